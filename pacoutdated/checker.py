"""
Outdated Checker - Wires configuration, databases and comparison into one run
"""

import logging
from typing import Any, Dict, Optional

from .common.errors import FetchFailedError
from .compare.version_comparator import OutdatedReport, build_report
from .report.reporter import Reporter
from .repo.local_database import LocalDatabase
from .repo.models import PackageMap
from .repo.pacman_conf import host_arch, read_repositories
from .repo.remote_database import RemoteDatabase, merge_packages

logger = logging.getLogger(__name__)


class OutdatedChecker:
    """Runs a complete comparison of installed packages against the repositories"""

    def __init__(self, config: Dict[str, Any], reporter: Optional[Reporter] = None):
        """
        Initialize OutdatedChecker with configuration

        Args:
            config: Dictionary containing:
                - pacman_conf: Path of pacman.conf
                - local_db_dir: Local package database directory
                - fetch_timeout: Seconds per server attempt
                - skip_unreachable_repos: Skip repositories no server answers for
                - arch: Value for $arch, None to detect
            reporter: Output sink, stdout Reporter by default
        """
        self.pacman_conf = config['pacman_conf']
        self.local_db_dir = config['local_db_dir']
        self.skip_unreachable_repos = config.get('skip_unreachable_repos', False)
        self.arch = config.get('arch') or host_arch()
        self.reporter = reporter or Reporter()
        self.remote_db = RemoteDatabase(arch=self.arch, timeout=config.get('fetch_timeout', 30))

    def get_local_packages(self) -> PackageMap:
        return LocalDatabase(self.local_db_dir).get_packages()

    def get_remote_packages(self) -> PackageMap:
        """Fetch every configured repository, one at a time, in declaration order"""
        packages: PackageMap = {}

        for repo in read_repositories(self.pacman_conf):
            self.reporter.announce_fetch(repo.name)
            try:
                repo_packages = self.remote_db.fetch_packages(repo)
            except FetchFailedError as e:
                if not self.skip_unreachable_repos:
                    raise
                logger.warning(f"⚠️ Skipping repository {repo.name}: {e}")
                continue
            merge_packages(packages, repo_packages)

        return packages

    def run(self) -> OutdatedReport:
        """
        Execute the comparison and print the result

        Returns:
            OutdatedReport that was printed

        Raises:
            PacOutdatedError: any fatal configuration, network or decoding error
        """
        local_packages = self.get_local_packages()
        remote_packages = self.get_remote_packages()

        self.reporter.announce_compare()
        report = build_report(local_packages, remote_packages)
        self.reporter.print_report(report)

        logger.debug(f"Compared {len(local_packages)} local against {len(remote_packages)} remote packages")
        return report

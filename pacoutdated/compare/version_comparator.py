"""
Version Comparator Module - Finds installed packages whose version differs from the repositories

Versions are opaque strings: two versions are either equal or different,
no ordering between them is computed.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ..repo.models import PackageMap, PackageRecord


class PackageComparison(Enum):
    """Result of comparing a local package with its repository counterpart"""
    SAME = 'same'
    DIFFERENT = 'different'


def compare_package_versions(local: PackageRecord, remote: PackageRecord) -> PackageComparison:
    """Compare two records of the same package by exact version string"""
    if local.version == remote.version:
        return PackageComparison.SAME
    return PackageComparison.DIFFERENT


@dataclass
class OutdatedPair:
    """An installed package and the differing repository version of it"""

    local: PackageRecord
    remote: PackageRecord

    @property
    def sort_key(self):
        return (self.remote.origin_repo, self.remote.name)


@dataclass
class OutdatedReport:
    """
    Ordered outdated packages plus the column widths needed to align them.

    Attributes:
        pairs: Outdated packages sorted by repository, then name
        name_width: Longest "repo/name" identifier
        version_width: Longest installed version
    """

    pairs: List[OutdatedPair] = field(default_factory=list)
    name_width: int = 0
    version_width: int = 0

    @property
    def count(self) -> int:
        """Return number of outdated packages."""
        return len(self.pairs)


def find_outdated(local_packages: PackageMap, remote_packages: PackageMap) -> List[OutdatedPair]:
    """
    Join local and remote packages by name and keep the ones whose versions differ

    Args:
        local_packages: Installed packages
        remote_packages: Packages offered by the repositories

    Returns:
        OutdatedPair list sorted by repository name, then package name
    """
    outdated = []
    for name, local in local_packages.items():
        remote = remote_packages.get(name)
        if remote is None:
            continue
        if compare_package_versions(local, remote) is PackageComparison.DIFFERENT:
            outdated.append(OutdatedPair(local=local, remote=remote))

    outdated.sort(key=lambda pair: pair.sort_key)
    return outdated


def build_report(local_packages: PackageMap, remote_packages: PackageMap) -> OutdatedReport:
    """Compare both package maps and compute the table layout for the result"""
    pairs = find_outdated(local_packages, remote_packages)

    name_width = max((len(pair.remote.package_id) for pair in pairs), default=0)
    version_width = max((len(pair.local.version) for pair in pairs), default=0)

    return OutdatedReport(pairs=pairs, name_width=name_width, version_width=version_width)

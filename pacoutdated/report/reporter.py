"""
Reporter Module - Prints progress lines and the outdated package table
"""

import sys
from typing import List

from ..compare.version_comparator import OutdatedReport


class Reporter:
    """Writes user-facing output of a run"""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def _print(self, message: str):
        print(message, file=self.stream, flush=True)

    def announce_fetch(self, repo_name: str):
        self._print(f":: Fetching package database for {repo_name}")

    def announce_compare(self):
        self._print(":: Comparing package versions")

    def announce_count(self, count: int):
        self._print(f":: {count} packages to upgrade")

    @staticmethod
    def format_rows(report: OutdatedReport) -> List[str]:
        """
        Render one aligned line per outdated package

        Format: <repo>/<name> <installed version> -> <repository version>
        """
        rows = []
        for pair in report.pairs:
            rows.append(
                f"{pair.remote.package_id:<{report.name_width + 1}} "
                f"{pair.local.version:<{report.version_width}} -> {pair.remote.version}"
            )
        return rows

    def print_report(self, report: OutdatedReport):
        """Print the package count followed by the table"""
        self.announce_count(report.count)
        for row in self.format_rows(report):
            self._print(row)

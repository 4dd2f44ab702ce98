"""
Package comparison modules
"""

from .version_comparator import (
    OutdatedPair,
    OutdatedReport,
    PackageComparison,
    build_report,
    compare_package_versions,
    find_outdated,
)

__all__ = [
    'OutdatedPair',
    'OutdatedReport',
    'PackageComparison',
    'build_report',
    'compare_package_versions',
    'find_outdated',
]

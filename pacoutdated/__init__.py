"""
pacoutdated

Lists locally installed pacman packages whose versions differ from what the
configured repositories currently offer.
"""

from .checker import OutdatedChecker
from .common.errors import (
    PacOutdatedError,
    ConfigMissingError,
    ConfigMalformedError,
    FetchFailedError,
    DecodeFailedError,
    RecordMalformedError,
)
from .compare.version_comparator import OutdatedPair, OutdatedReport, find_outdated, build_report
from .repo.models import PackageRecord, RepositoryConfig

__all__ = [
    'OutdatedChecker',
    'PacOutdatedError',
    'ConfigMissingError',
    'ConfigMalformedError',
    'FetchFailedError',
    'DecodeFailedError',
    'RecordMalformedError',
    'OutdatedPair',
    'OutdatedReport',
    'find_outdated',
    'build_report',
    'PackageRecord',
    'RepositoryConfig',
]

__version__ = "1.0.0"

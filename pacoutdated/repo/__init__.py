"""
Package database modules
"""

from .desc_parser import desc_fields, parse_desc, parse_record
from .local_database import LocalDatabase
from .models import PackageMap, PackageRecord, RepositoryConfig, UNSET
from .pacman_conf import (
    PacmanConfReader,
    database_url,
    host_arch,
    read_mirror_list,
    read_repositories,
    substitute_url_vars,
)
from .remote_database import RemoteDatabase, merge_packages

__all__ = [
    'desc_fields',
    'parse_desc',
    'parse_record',
    'LocalDatabase',
    'PackageMap',
    'PackageRecord',
    'RepositoryConfig',
    'UNSET',
    'PacmanConfReader',
    'database_url',
    'host_arch',
    'read_mirror_list',
    'read_repositories',
    'substitute_url_vars',
    'RemoteDatabase',
    'merge_packages',
]

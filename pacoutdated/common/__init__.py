"""
Common modules: errors, logging and configuration loading
"""

from .config_loader import ConfigLoader, load_config
from .errors import (
    PacOutdatedError,
    ConfigMissingError,
    ConfigMalformedError,
    FetchFailedError,
    DecodeFailedError,
    RecordMalformedError,
)
from .logging_utils import setup_logging

__all__ = [
    'ConfigLoader',
    'load_config',
    'PacOutdatedError',
    'ConfigMissingError',
    'ConfigMalformedError',
    'FetchFailedError',
    'DecodeFailedError',
    'RecordMalformedError',
    'setup_logging',
]

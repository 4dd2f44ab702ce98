"""
Error types raised by the checker
"""


class PacOutdatedError(Exception):
    """Base class for every fatal checker error."""
    pass


class ConfigMissingError(PacOutdatedError):
    """Raised when pacman.conf, a mirror list or a settings file is absent."""
    pass


class ConfigMalformedError(PacOutdatedError):
    """Raised when a configuration file cannot be understood."""
    pass


class FetchFailedError(PacOutdatedError):
    """Raised when no server of a repository delivered its database."""
    pass


class DecodeFailedError(PacOutdatedError):
    """Raised when a downloaded database is not a readable gzip archive."""
    pass


class RecordMalformedError(PacOutdatedError):
    """Raised when a desc entry inside a remote database cannot be parsed."""
    pass

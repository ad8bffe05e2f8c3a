"""Custom exceptions for aelist."""


class AelistError(Exception):
    """Base exception for all aelist errors."""

    pass


class ConfigurationError(AelistError):
    """Raised when configuration is invalid or exceeds a hard limit."""

    pass


class NothingFoundError(AelistError):
    """Raised when no executables were found in any search path."""

    pass


class LaunchError(AelistError):
    """Raised when the selected executable cannot be started."""

    pass

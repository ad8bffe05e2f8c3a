"""Interactive terminal launcher for executables in PATH."""

__version__ = "0.1.0"

# Re-export common utilities for convenience
from aelist.common import (
    AelistError,
    AppConfig,
    ConfigurationError,
    LaunchError,
    NothingFoundError,
    setup_logging,
    timing,
)

__all__ = [
    "__version__",
    "AelistError",
    "AppConfig",
    "ConfigurationError",
    "LaunchError",
    "NothingFoundError",
    "setup_logging",
    "timing",
]

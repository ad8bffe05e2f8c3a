"""Core utilities for aelist."""

from aelist.common.config import AppConfig, LauncherConfig
from aelist.common.decorators import timing
from aelist.common.errors import (
    AelistError,
    ConfigurationError,
    LaunchError,
    NothingFoundError,
)
from aelist.common.logging import setup_logging

__all__ = [
    "AppConfig",
    "LauncherConfig",
    "AelistError",
    "ConfigurationError",
    "LaunchError",
    "NothingFoundError",
    "setup_logging",
    "timing",
]

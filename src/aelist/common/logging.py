"""Logging utilities for aelist."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from aelist.common.errors import ConfigurationError


def parse_level(level: str | int) -> int:
    """Resolve a level name or number to a logging constant.

    Args:
        level: Name such as "debug" or "WARNING", or a logging constant

    Returns:
        Numeric logging level

    Raises:
        ConfigurationError: If the name is not a known logging level
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level {level!r}")
    return resolved


def setup_logging(
    name: str,
    level: str | int = "INFO",
    log_file: Path | None = None,
    console: bool = True,
) -> logging.Logger:
    """Setup standardized logging configuration.

    The console handler writes to stderr. Use ``console_suspended`` while
    curses owns the terminal so only the log file keeps receiving records.

    Args:
        name: Logger name (usually the package name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or logging constant
        log_file: Optional file path to write logs
        console: Whether to also log to console (default: True)

    Returns:
        Configured logger instance

    Raises:
        ConfigurationError: If ``level`` is not a known logging level

    Example:
        >>> logger = setup_logging("aelist", level="DEBUG")
        >>> logger.info("Indexing started")
    """
    logger = logging.getLogger(name)
    logger.setLevel(parse_level(level))

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


@contextmanager
def console_suspended(logger: logging.Logger) -> Iterator[logging.Logger]:
    """Detach console handlers for the duration of the block.

    File handlers stay attached. Records are not propagated to the root
    logger while suspended, so nothing is written over the curses screen.
    """
    console_handlers = [
        handler
        for handler in logger.handlers
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)
    ]
    propagate = logger.propagate
    null_handler = logging.NullHandler()
    for handler in console_handlers:
        logger.removeHandler(handler)
    logger.addHandler(null_handler)
    logger.propagate = False
    try:
        yield logger
    finally:
        logger.propagate = propagate
        logger.removeHandler(null_handler)
        for handler in console_handlers:
            logger.addHandler(handler)

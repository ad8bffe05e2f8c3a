"""Reusable decorators for aelist."""

import functools
import logging
import time
from collections.abc import Callable
from typing import Any


def timing(func: Callable) -> Callable:
    """Decorator to measure and log function execution time.

    The elapsed time is logged even when the wrapped call raises.

    Example:
        >>> @timing
        ... def build(paths):
        ...     return [scan(path) for path in paths]
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        logger = logging.getLogger(func.__module__)
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            duration = time.perf_counter() - start
            logger.info(f"{func.__name__} took {duration:.3f}s")

    return wrapper

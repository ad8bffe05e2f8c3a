"""Search-path resolution from explicit directories and the path variable."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

from aelist.common.errors import ConfigurationError

MAX_SEARCH_PATHS = 512

logger = logging.getLogger(__name__)


def split_path_list(value: str | None) -> list[str]:
    """Split a colon-delimited path list.

    Empty segments are kept as empty strings. An unset value yields no paths.
    """
    if value is None:
        return []
    return value.split(":")


def resolve_search_paths(
    explicit: Sequence[str] = (),
    *,
    include_env: bool = False,
    env_value: str | None = None,
) -> tuple[str, ...]:
    """Build the ordered list of directories to index.

    Explicit paths come first. The environment path list is appended when no
    explicit path was given or when ``include_env`` is set.

    Args:
        explicit: Directories given on the command line
        include_env: Also append the environment path list when explicit paths exist
        env_value: Raw value of the path variable (None when unset)

    Returns:
        Tuple of directory strings

    Raises:
        ConfigurationError: If more than MAX_SEARCH_PATHS directories result
    """
    paths = list(explicit)
    if not paths or include_env:
        paths.extend(split_path_list(env_value))

    if len(paths) > MAX_SEARCH_PATHS:
        raise ConfigurationError(f"Too many paths! Got {len(paths)}, the limit is {MAX_SEARCH_PATHS}")

    logger.debug(f"Resolved {len(paths)} search paths ({len(explicit)} explicit)")
    return tuple(paths)


def search_paths_from_environment(
    explicit: Sequence[str] = (),
    *,
    include_env: bool = False,
    env_var: str = "PATH",
) -> tuple[str, ...]:
    """Resolve search paths reading the path list from ``os.environ``."""
    return resolve_search_paths(explicit, include_env=include_env, env_value=os.environ.get(env_var))

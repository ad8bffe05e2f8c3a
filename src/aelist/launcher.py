"""Detached launch of the selected executable."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

from aelist.common.errors import LaunchError
from aelist.index import ExecutableRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LaunchResult:
    pid: int
    path: str


def launch_detached(record: ExecutableRecord | None) -> LaunchResult | None:
    """Start ``record`` in a new session with its standard streams on the null device.

    The child gets no arguments beyond its program name and is not waited for.

    Args:
        record: Executable to start, or None for a no-op

    Returns:
        LaunchResult for the started child, or None when there was nothing to launch

    Raises:
        LaunchError: If the process cannot be created or the executable cannot be run
    """
    if record is None:
        logger.debug("Nothing selected, skipping launch")
        return None

    try:
        process = subprocess.Popen(
            [record.path],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
            close_fds=True,
        )
    except OSError as err:
        raise LaunchError(f"Failed to launch {record.path}: {err}") from err

    logger.info(f"Launched {record.path} (pid {process.pid})")
    return LaunchResult(pid=process.pid, path=record.path)

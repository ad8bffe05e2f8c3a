"""Executable index: one scan of every search path, kept in memory."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from aelist.common.decorators import timing
from aelist.common.errors import NothingFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutableRecord:
    """An executable file found during the scan."""

    name: str
    path: str
    size: int


@dataclass(frozen=True)
class ExecutableIndex:
    """Ordered executables in scan order with their aggregate size.

    Order is search-path order, then the order the OS lists each directory.
    Same-named executables from different directories are separate records.
    """

    records: tuple[ExecutableRecord, ...]
    path_count: int = 0
    total_size: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "total_size", sum(record.size for record in self.records))

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, position: int) -> ExecutableRecord:
        return self.records[position]

    def __iter__(self) -> Iterator[ExecutableRecord]:
        return iter(self.records)


def scan_directory(directory: str) -> Iterator[ExecutableRecord]:
    """Yield executable regular files directly inside ``directory``.

    Directories that cannot be opened and entries that are not executable,
    vanish before they can be stat'ed, or are not regular files are skipped.
    ``os.scandir`` never yields the ``.`` and ``..`` entries.
    """
    try:
        entries = os.scandir(directory)
    except OSError as err:
        logger.debug(f"Skipping search path {directory!r}: {err}")
        return

    with entries:
        for entry in entries:
            path = os.path.join(directory, entry.name)
            if not os.access(path, os.X_OK):
                continue
            try:
                st = os.stat(path)
            except OSError as err:
                logger.debug(f"Skipping {path}: {err}")
                continue
            if not stat.S_ISREG(st.st_mode):
                continue
            yield ExecutableRecord(name=entry.name, path=path, size=st.st_size)


def collect_executables(paths: Iterable[str]) -> list[ExecutableRecord]:
    """Scan every directory in order and concatenate the results."""
    records: list[ExecutableRecord] = []
    for directory in paths:
        records.extend(scan_directory(directory))
    return records


@timing
def build_index(paths: Sequence[str]) -> ExecutableIndex:
    """Build the executable index for the given search paths.

    Args:
        paths: Ordered search-path directories

    Returns:
        Non-empty ExecutableIndex

    Raises:
        NothingFoundError: If no executable was found in any search path
    """
    records = collect_executables(paths)
    if not records:
        raise NothingFoundError("Not found files in paths!")

    index = ExecutableIndex(records=tuple(records), path_count=len(paths))
    logger.info(f"Indexed {len(index)} executables from {len(paths)} paths ({index.total_size} bytes)")
    return index

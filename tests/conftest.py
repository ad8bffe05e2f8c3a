"""Shared fixtures for aelist tests."""

import os

import pytest

from aelist.index import ExecutableIndex, ExecutableRecord


@pytest.fixture
def make_file():
    """Create a file of a given size and permission mode."""

    def _make(directory, name, size=0, mode=0o755):
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_bytes(b"x" * size)
        os.chmod(path, mode)
        return path

    return _make


@pytest.fixture
def foo_index():
    """Index with foo (100 bytes) scanned before foobar (200 bytes)."""
    return ExecutableIndex(
        records=(
            ExecutableRecord(name="foo", path="/bin/foo", size=100),
            ExecutableRecord(name="foobar", path="/bin/foobar", size=200),
        ),
        path_count=1,
    )


@pytest.fixture
def mixed_index():
    """Index with several overlapping names across two directories."""
    return ExecutableIndex(
        records=(
            ExecutableRecord(name="xgit", path="/usr/bin/xgit", size=10),
            ExecutableRecord(name="git-lfs", path="/usr/bin/git-lfs", size=20),
            ExecutableRecord(name="gitk", path="/usr/bin/gitk", size=30),
            ExecutableRecord(name="git", path="/usr/bin/git", size=4096),
            ExecutableRecord(name="git", path="/usr/local/bin/git", size=8192),
            ExecutableRecord(name="vim", path="/usr/bin/vim", size=2048),
        ),
        path_count=2,
    )

"""Resolved launcher settings threaded through every stage of a run."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

DEFAULT_NPROMPT = 30
MAX_NPROMPT = 2**31 - 1


class DisplayMode(str, Enum):
    """How the filtered view is drawn."""

    SHORT = "short"
    LINE = "line"
    LONG = "long"


def choose_random_mode(rng: random.Random | None = None) -> DisplayMode:
    """Pick one of the display modes uniformly."""
    return (rng or random).choice(list(DisplayMode))


@dataclass(frozen=True)
class LauncherSettings:
    """Immutable context for one launcher run.

    Built once by the CLI from config values and flags, then handed to the
    path resolver, indexer, filter engine and interactive loop.
    """

    paths: tuple[str, ...] = ()
    mode: DisplayMode = DisplayMode.SHORT
    nprompt: int = DEFAULT_NPROMPT
    skip_banner: bool = False
    include_env_paths: bool = False
    path_env_var: str = "PATH"

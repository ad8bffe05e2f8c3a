"""Blocking keystroke loop that filters the index and returns the launch target."""

from __future__ import annotations

import curses
import locale
import logging
import sys
from enum import Enum

from aelist.common.errors import ConfigurationError
from aelist.display import Frame, render_frame
from aelist.index import ExecutableIndex, ExecutableRecord
from aelist.selection import SelectionState
from aelist.settings import LauncherSettings

logger = logging.getLogger(__name__)

CONFIRM_KEYS = {"\n", "\r", curses.KEY_ENTER}
BACKSPACE_KEYS = {"\x7f", "\b", curses.KEY_BACKSPACE, curses.KEY_DC, 127, 8}


class KeyAction(Enum):
    CONFIRM = "confirm"
    CHANGED = "changed"
    UNCHANGED = "unchanged"


def handle_key(state: SelectionState, key: str | int) -> KeyAction:
    """Apply one key to the selection state.

    Args:
        state: Query and selection being edited
        key: Value returned by ``window.get_wch()`` (str for characters, int for keys)

    Returns:
        What the key did. Non-printable keys other than backspace and Enter are ignored.
    """
    if key in CONFIRM_KEYS:
        return KeyAction.CONFIRM
    if key in BACKSPACE_KEYS:
        return KeyAction.CHANGED if state.backspace() else KeyAction.UNCHANGED
    if isinstance(key, str) and key.isprintable():
        # characters past the query limit are dropped
        return KeyAction.CHANGED if state.append(key) else KeyAction.UNCHANGED
    return KeyAction.UNCHANGED


class InteractiveSession:
    """One curses session over a built index."""

    def __init__(self, stdscr: curses.window, index: ExecutableIndex, settings: LauncherSettings) -> None:
        self.stdscr = stdscr
        self.index = index
        self.settings = settings
        self.state = SelectionState(index, nprompt=settings.nprompt)

    def paint(self, frame: Frame) -> None:
        height, width = self.stdscr.getmaxyx()
        self.stdscr.erase()
        for line in frame.lines:
            if line.row >= height or line.col >= width - 1:
                continue
            self.stdscr.addstr(line.row, line.col, line.text[: width - line.col - 1])
        row, col = frame.cursor
        self.stdscr.move(min(row, height - 1), min(col, width - 1))
        self.stdscr.refresh()

    def render(self) -> None:
        self.paint(render_frame(self.index, self.state.result, self.settings))

    def run(self) -> ExecutableRecord | None:
        """Read keys until Enter and return the selected record.

        KeyboardInterrupt propagates so the caller can exit without launching.
        """
        self.render()
        while True:
            key = self.stdscr.get_wch()
            action = handle_key(self.state, key)
            if action is KeyAction.CONFIRM:
                selected = self.state.selected
                logger.debug(f"Confirmed query {self.state.query!r} -> {selected.path if selected else None}")
                return selected
            self.render()


def run_interactive(index: ExecutableIndex, settings: LauncherSettings) -> ExecutableRecord | None:
    """Run the interactive session inside ``curses.wrapper``.

    The wrapper enables cbreak/noecho/keypad and restores the terminal on
    return, on error and on KeyboardInterrupt.

    Raises:
        ConfigurationError: If stdin or stdout is not a terminal
    """
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise ConfigurationError("aelist needs an interactive terminal")
    locale.setlocale(locale.LC_ALL, "")
    return curses.wrapper(lambda stdscr: InteractiveSession(stdscr, index, settings).run())

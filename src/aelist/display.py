"""Frame layout for the three display modes.

Rendering is pure: a frame is a list of positioned text lines plus the
cursor position, painted onto curses by the interactive loop.
"""

from __future__ import annotations

from dataclasses import dataclass

from aelist.index import ExecutableIndex
from aelist.selection import FilterResult
from aelist.settings import DisplayMode, LauncherSettings
from aelist.units import format_bytes

PROMPT = ": "
RULE_WIDTH = 45
HLINE = "─"


@dataclass(frozen=True)
class ScreenLine:
    row: int
    col: int
    text: str


@dataclass(frozen=True)
class Frame:
    lines: tuple[ScreenLine, ...]
    cursor: tuple[int, int]

    def rows(self) -> dict[int, str]:
        """Text per row, joining lines that share a row in column order.

        Not used for painting, which draws ``lines`` directly. It gives a
        plain view of a frame for inspection, e.g. in tests or a debugger.
        """
        rows: dict[int, str] = {}
        for line in sorted(self.lines, key=lambda item: (item.row, item.col)):
            current = rows.get(line.row, "")
            rows[line.row] = current.ljust(line.col) + line.text
        return rows


@dataclass(frozen=True)
class Layout:
    """Row numbers used by a display mode."""

    banner: int | None
    summary: int
    prompt: int
    rule: int | None

    @classmethod
    def for_settings(cls, settings: LauncherSettings) -> Layout:
        offset = 0 if settings.skip_banner else 1
        if settings.mode is DisplayMode.LINE:
            return cls(banner=None, summary=0, prompt=0, rule=None)
        return cls(
            banner=None if settings.skip_banner else 0,
            summary=offset,
            prompt=offset + 1,
            rule=offset + 2 if settings.mode is DisplayMode.LONG else None,
        )


def banner_text(index: ExecutableIndex) -> str:
    return f"loaded {len(index)} files from {index.path_count} paths ({format_bytes(index.total_size)})"


def summary_text(index: ExecutableIndex, result: FilterResult) -> str:
    if result.selected is None:
        return f"exec - {result.match_count}"
    record = index[result.selected]
    return f"exec {record.path} ({format_bytes(record.size)}) {result.match_count}"


def render_frame(index: ExecutableIndex, result: FilterResult, settings: LauncherSettings) -> Frame:
    """Lay out one frame for the current query and filter result.

    Args:
        index: Executable index the result refers to
        result: Latest filter result
        settings: Display mode, banner flag and display cap

    Returns:
        Frame with every line to draw and the cursor at the end of the query
    """
    layout = Layout.for_settings(settings)
    prompt = PROMPT + result.query
    lines = [ScreenLine(layout.prompt, 0, prompt)]

    if layout.banner is not None:
        lines.append(ScreenLine(layout.banner, 0, banner_text(index)))

    if settings.mode is DisplayMode.LINE:
        lines.append(ScreenLine(layout.prompt, len(prompt) + 2, summary_text(index, result)))
    else:
        lines.append(ScreenLine(layout.summary, 0, summary_text(index, result)))

    if layout.rule is not None:
        lines.append(ScreenLine(layout.rule, 0, HLINE * RULE_WIDTH))
        for offset, position in enumerate(result.matches[: settings.nprompt], start=1):
            lines.append(ScreenLine(layout.rule + offset, 0, index[position].name))

    return Frame(lines=tuple(lines), cursor=(layout.prompt, len(prompt)))

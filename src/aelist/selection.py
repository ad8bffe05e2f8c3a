"""Incremental filter and launch-target selection over the executable index."""

from __future__ import annotations

from dataclasses import dataclass, field

from aelist.index import ExecutableIndex, ExecutableRecord
from aelist.settings import DEFAULT_NPROMPT

MAX_QUERY_LENGTH = 2047


@dataclass(frozen=True)
class FilterResult:
    """Outcome of filtering the index with one query.

    ``selected`` and ``matches`` are positions into the index, so a result
    never aliases or alters stored records.
    """

    query: str
    match_count: int
    selected: int | None
    matches: tuple[int, ...]


def filter_index(
    index: ExecutableIndex,
    query: str,
    *,
    nprompt: int = DEFAULT_NPROMPT,
    previous: int | None = None,
) -> FilterResult:
    """Filter the index by case-sensitive substring and pick the launch target.

    The first record whose name equals the query wins. Without an exact
    match the first record containing the query is selected. When nothing
    matches, ``previous`` is kept.

    Args:
        index: Executable index to scan
        query: Typed query; the empty string matches everything
        nprompt: Maximum number of matches kept for rendering
        previous: Selection established by an earlier query

    Returns:
        FilterResult with the match count, selection and render positions
    """
    match_count = 0
    first_match: int | None = None
    exact: int | None = None
    matches: list[int] = []

    for position, record in enumerate(index):
        if query not in record.name:
            continue
        match_count += 1
        if first_match is None:
            first_match = position
        if exact is None and record.name == query:
            exact = position
        if len(matches) < nprompt:
            matches.append(position)

    if exact is not None:
        selected = exact
    elif first_match is not None:
        selected = first_match
    else:
        selected = previous

    return FilterResult(query=query, match_count=match_count, selected=selected, matches=tuple(matches))


@dataclass
class SelectionState:
    """Mutable query plus the result of the last filter pass."""

    index: ExecutableIndex
    nprompt: int = DEFAULT_NPROMPT
    query: str = ""
    result: FilterResult = field(init=False)

    def __post_init__(self) -> None:
        self.result = filter_index(self.index, self.query, nprompt=self.nprompt)

    @property
    def match_count(self) -> int:
        return self.result.match_count

    @property
    def selected(self) -> ExecutableRecord | None:
        if self.result.selected is None:
            return None
        return self.index[self.result.selected]

    def update(self, query: str) -> FilterResult:
        """Replace the query and re-run the filter, keeping the old selection on no match."""
        self.query = query[:MAX_QUERY_LENGTH]
        self.result = filter_index(
            self.index,
            self.query,
            nprompt=self.nprompt,
            previous=self.result.selected,
        )
        return self.result

    def append(self, char: str) -> bool:
        """Append a character unless the query is full. Returns whether it was added."""
        if len(self.query) >= MAX_QUERY_LENGTH:
            return False
        self.update(self.query + char)
        return True

    def backspace(self) -> bool:
        """Drop the last character. Returns False when the query was already empty."""
        if not self.query:
            return False
        self.update(self.query[:-1])
        return True

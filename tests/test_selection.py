"""Tests for the filter/selection engine."""

from aelist.index import ExecutableIndex, ExecutableRecord
from aelist.selection import MAX_QUERY_LENGTH, SelectionState, filter_index


class TestFilterIndex:
    """Test filter_index function."""

    def test_foo_then_foobar(self, foo_index):
        """Test first match for a prefix, exact match for the full name."""
        result = filter_index(foo_index, "foo")
        assert result.match_count == 2
        assert foo_index[result.selected].name == "foo"

        result = filter_index(foo_index, "foobar", previous=result.selected)
        assert result.match_count == 1
        assert foo_index[result.selected].name == "foobar"
        assert foo_index[result.selected].size == 200

    def test_empty_query_matches_everything(self, mixed_index):
        """Test the empty query selects the first record and counts all."""
        result = filter_index(mixed_index, "")
        assert result.match_count == len(mixed_index)
        assert result.selected == 0

    def test_substring_count(self, mixed_index):
        """Test the count is a case-sensitive, non-anchored substring count."""
        assert filter_index(mixed_index, "git").match_count == 5
        assert filter_index(mixed_index, "it-").match_count == 1
        assert filter_index(mixed_index, "GIT").match_count == 0

    def test_exact_match_beats_earlier_substring_matches(self, mixed_index):
        """Test exact name wins however many matches come before it."""
        result = filter_index(mixed_index, "git")
        assert mixed_index[result.selected].path == "/usr/bin/git"
        assert mixed_index[result.selected].size == 4096

    def test_first_exact_match_wins_among_duplicates(self, mixed_index):
        """Test the earlier directory wins between same-named executables."""
        result = filter_index(mixed_index, "git")
        assert result.selected == 3

    def test_exact_match_beyond_display_cap(self, mixed_index):
        """Test the display cap does not hide the exact match from selection."""
        result = filter_index(mixed_index, "git", nprompt=1)
        assert result.matches == (0,)
        assert result.selected == 3

    def test_first_substring_match_without_exact(self, mixed_index):
        """Test tie-break is index order."""
        result = filter_index(mixed_index, "gi")
        assert result.selected == 0

    def test_no_match_keeps_previous(self, mixed_index):
        """Test a query with no matches leaves the selection alone."""
        result = filter_index(mixed_index, "emacs", previous=5)
        assert result.match_count == 0
        assert result.selected == 5
        assert result.matches == ()

    def test_no_match_without_previous(self, mixed_index):
        """Test nothing is selected when nothing ever matched."""
        assert filter_index(mixed_index, "emacs").selected is None

    def test_display_cap(self, mixed_index):
        """Test the render list never exceeds nprompt."""
        result = filter_index(mixed_index, "", nprompt=4)
        assert result.matches == (0, 1, 2, 3)
        assert result.match_count == 6

    def test_records_are_never_mutated(self, mixed_index):
        """Test selecting an exact match leaves stored records untouched."""
        before = mixed_index.records
        state = SelectionState(mixed_index)
        state.update("gitk")
        state.update("git")
        state.update("vim")
        assert mixed_index.records == before
        assert mixed_index[2] == ExecutableRecord(name="gitk", path="/usr/bin/gitk", size=30)


class TestSelectionState:
    """Test SelectionState query editing."""

    def test_initial_state_is_unfiltered(self, foo_index):
        """Test the empty query view before any key."""
        state = SelectionState(foo_index)
        assert state.query == ""
        assert state.match_count == 2
        assert state.selected.name == "foo"

    def test_append_and_backspace(self, foo_index):
        """Test typing then deleting back to the exact match."""
        state = SelectionState(foo_index)
        for char in "foobar":
            assert state.append(char)
        assert state.selected.name == "foobar"

        assert state.backspace()
        assert state.query == "fooba"
        assert state.selected.name == "foo"

    def test_backspace_on_empty_query(self, foo_index):
        """Test backspace is a no-op on an empty query."""
        state = SelectionState(foo_index)
        assert state.backspace() is False
        assert state.query == ""

    def test_selection_persists_under_no_match(self, foo_index):
        """Test typing past every match keeps the last launch target."""
        state = SelectionState(foo_index)
        for char in "foobar":
            state.append(char)
        state.append("z")
        assert state.match_count == 0
        assert state.selected.name == "foobar"

    def test_query_is_bounded(self):
        """Test characters beyond the query limit are dropped."""
        index = ExecutableIndex(records=(ExecutableRecord("a", "/a", 1),))
        state = SelectionState(index)
        state.update("a" * MAX_QUERY_LENGTH)
        assert state.append("a") is False
        assert len(state.query) == MAX_QUERY_LENGTH

    def test_update_truncates(self):
        """Test update never stores more than the query limit."""
        index = ExecutableIndex(records=(ExecutableRecord("a", "/a", 1),))
        state = SelectionState(index)
        state.update("b" * (MAX_QUERY_LENGTH + 10))
        assert len(state.query) == MAX_QUERY_LENGTH

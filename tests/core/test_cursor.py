"""Tests for the selection cursor state machine."""

import pytest

from narrow.core.cursor import NavKind, SelectionCursor
from tests.helpers import make_candidates


def make_cursor(length: int, *, require_match: bool = False, page_size: int = 3) -> SelectionCursor:
    cursor = SelectionCursor(require_match=require_match, page_size=page_size)
    cursor.recompute(make_candidates(*[str(index) for index in range(length)]))
    return cursor


class TestInitialIndex:
    """Tests for choosing the index after a recompute."""

    def test_empty_list_has_no_cursor(self):
        assert make_cursor(0).index is None

    def test_defaults_to_first(self):
        assert make_cursor(5).index == 0

    def test_points_at_default_when_not_moved(self):
        candidates = make_candidates("x", "def", "y")
        index = SelectionCursor.initial_index(candidates, require_match=False, default_candidate="def")
        assert index == 1

    def test_first_when_default_moved_to_front(self):
        candidates = make_candidates("def", "x")
        index = SelectionCursor.initial_index(
            candidates, require_match=False, default_candidate="def", move_default_to_front=True
        )
        assert index == 0

    def test_missing_default_falls_back_to_first(self):
        index = SelectionCursor.initial_index(make_candidates("x"), require_match=False, default_candidate="nope")
        assert index == 0

    def test_restore_clamps_previous_index(self):
        candidates = make_candidates("a", "b", "c")
        assert SelectionCursor.initial_index(candidates, require_match=False, restore_index=12) == 2
        assert SelectionCursor.initial_index(candidates, require_match=False, restore_index=-1) == -1
        assert SelectionCursor.initial_index(candidates, require_match=True, restore_index=-1) == 0


class TestNavigation:
    """Tests for clamped navigation."""

    def test_prev_reaches_raw_input_then_stops(self):
        cursor = make_cursor(3)
        assert cursor.navigate(NavKind.PREV) == -1
        assert cursor.navigate(NavKind.PREV) == -1

    def test_prev_stops_at_zero_when_match_required(self):
        cursor = make_cursor(3, require_match=True)
        assert cursor.navigate(NavKind.PREV) == 0

    def test_next_stops_at_end(self):
        cursor = make_cursor(2)
        cursor.navigate(NavKind.NEXT)
        assert cursor.navigate(NavKind.NEXT) == 1

    @pytest.mark.parametrize(
        ("require_match", "expected"),
        [(False, -1), (True, 0)],
    )
    def test_prev_page_clamps_to_lower_bound(self, require_match, expected):
        cursor = make_cursor(10, require_match=require_match)
        cursor.navigate(NavKind.NEXT)
        assert cursor.navigate(NavKind.PREV_PAGE) == expected

    def test_next_page_steps_by_page_size(self):
        cursor = make_cursor(10)
        assert cursor.navigate(NavKind.NEXT_PAGE) == 3
        assert cursor.navigate(NavKind.NEXT_PAGE) == 6
        assert cursor.navigate(NavKind.NEXT_PAGE) == 9
        assert cursor.navigate(NavKind.NEXT_PAGE) == 9

    def test_beginning_and_end(self):
        cursor = make_cursor(10)
        assert cursor.navigate(NavKind.END) == 9
        assert cursor.navigate(NavKind.BEGINNING) == 0

    def test_navigation_on_empty_list_is_noop(self):
        cursor = make_cursor(0)
        for kind in NavKind:
            assert cursor.navigate(kind) is None

    def test_clamp_to_explicit_index(self):
        cursor = make_cursor(3)
        assert cursor.clamp_to(10) == 2
        assert cursor.clamp_to(-5) == -1
        assert cursor.index == 0

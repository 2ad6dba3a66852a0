"""Tests for viewport windowing."""

import pytest

from narrow.core.viewport import compute_viewport, first_shown_index, keep_row_visible
from tests.helpers import displays, make_candidates


@pytest.mark.parametrize(
    ("cursor", "expected"),
    [(0, 0), (1, 0), (5, 5), (7, 7), (9, 7)],
)
def test_first_shown_with_page_of_three(cursor, expected):
    assert first_shown_index(cursor, 10, 3) == expected


@pytest.mark.parametrize("cursor", [0, 1, 2])
def test_single_row_page_shows_cursor(cursor):
    candidates = make_candidates("a", "b", "c")
    viewport = compute_viewport(cursor, candidates, 1)
    assert viewport.first_shown == cursor
    assert viewport.rows == [candidates[cursor]]
    assert viewport.highlighted_row == 0


def test_list_shorter_than_page_starts_at_zero():
    assert first_shown_index(3, 4, 10) == 0


def test_default_page_centers_cursor():
    assert first_shown_index(6, 20, 10) == 2


def test_slice_and_highlighted_row():
    candidates = make_candidates(*[str(index) for index in range(10)])
    viewport = compute_viewport(9, candidates, 3)
    assert viewport.first_shown == 7
    assert displays(viewport.rows) == ["7", "8", "9"]
    assert viewport.highlighted_row == 2


def test_raw_input_cursor_has_no_highlighted_row():
    viewport = compute_viewport(-1, make_candidates("a", "b"), 3)
    assert viewport.first_shown == 0
    assert viewport.highlighted_row is None


def test_empty_list():
    viewport = compute_viewport(None, [], 3)
    assert viewport.rows == []
    assert viewport.highlighted_row is None


class TestKeepRowVisible:
    """Tests for the scroll post-pass."""

    def test_scrolls_down_to_row(self):
        assert keep_row_visible(0, 7, 5) == 3

    def test_scrolls_up_to_row(self):
        assert keep_row_visible(4, 1, 5) == 1

    def test_is_idempotent(self):
        offset = keep_row_visible(0, 7, 5)
        assert keep_row_visible(offset, 7, 5) == offset

    def test_unknown_geometry_is_noop(self):
        assert keep_row_visible(2, 7, 0) == 2
        assert keep_row_visible(2, None, 5) == 2

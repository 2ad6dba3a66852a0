"""Viewport: the contiguous slice of refined candidates that is shown."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from narrow.domain.candidate import Candidate
from narrow.utils import clamp


@dataclass(frozen=True, slots=True)
class Viewport:
    """Result of windowing a refined list around the cursor.

    Attributes:
        first_shown: Index in the refined list of the first displayed row
        rows: Displayed candidates, at most ``page_size`` of them
        highlighted_row: Position of the cursor inside ``rows``, or None
            when the cursor is on the raw input or there is nothing to show
    """

    first_shown: int
    rows: list[Candidate]
    highlighted_row: Optional[int]


def first_shown_index(cursor_index: Optional[int], length: int, page_size: int) -> int:
    """Index of the first row shown, keeping the cursor visible.

    The cursor sits just above the middle of the page so there is one more
    row of context below it than above it. A one-row page starts at the
    cursor itself.
    """
    cursor = cursor_index if cursor_index is not None and cursor_index >= 0 else 0
    return clamp(cursor - max(1, page_size // 2) + 1, 0, max(0, length - page_size))


def compute_viewport(
    cursor_index: Optional[int],
    candidates: Sequence[Candidate],
    page_size: int,
) -> Viewport:
    first = first_shown_index(cursor_index, len(candidates), page_size)
    rows = list(candidates[first : first + page_size])
    highlighted = None
    if cursor_index is not None and cursor_index >= 0:
        highlighted = cursor_index - first
    return Viewport(first_shown=first, rows=rows, highlighted_row=highlighted)


def keep_row_visible(scroll_offset: int, row: Optional[int], visible_height: int) -> int:
    """Scroll offset that brings ``row`` into a surface ``visible_height`` rows tall.

    Returns ``scroll_offset`` unchanged when the row is already visible,
    so calling it again with its own result is a no-op.
    """
    if row is None or visible_height <= 0:
        return scroll_offset
    if row < scroll_offset:
        return row
    if row >= scroll_offset + visible_height:
        return row - visible_height + 1
    return scroll_offset

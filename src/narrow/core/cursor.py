"""Selection cursor.

The cursor is ``None`` exactly when there are no candidates. Otherwise
it is an index in ``[lower_bound, length - 1]`` where ``-1`` (only
allowed when a match is not required) stands for the raw input.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Optional

from narrow.domain.candidate import Candidate
from narrow.logger import get_logger
from narrow.utils import clamp

logger = get_logger("cursor")

RAW_INPUT_INDEX = -1


class NavKind(Enum):
    """Navigation commands."""

    PREV = "prev"
    NEXT = "next"
    PREV_PAGE = "prev_page"
    NEXT_PAGE = "next_page"
    BEGINNING = "beginning"
    END = "end"


class SelectionCursor:
    """Clamped cursor over a refined candidate list."""

    def __init__(self, *, require_match: bool, page_size: int) -> None:
        self.require_match = require_match
        self.page_size = page_size
        self.index: Optional[int] = None
        self.length = 0

    @property
    def lower_bound(self) -> int:
        return 0 if self.require_match else RAW_INPUT_INDEX

    @property
    def on_candidate(self) -> bool:
        """True if the cursor points at an actual candidate."""
        return self.index is not None and self.index >= 0

    def recompute(
        self,
        candidates: Sequence[Candidate],
        *,
        default_candidate: Optional[str] = None,
        move_default_to_front: bool = False,
        restore_index: Optional[int] = None,
    ) -> Optional[int]:
        """Pick the initial index for a freshly refined list."""
        self.index = self.initial_index(
            candidates,
            require_match=self.require_match,
            default_candidate=default_candidate,
            move_default_to_front=move_default_to_front,
            restore_index=restore_index,
        )
        self.length = len(candidates)
        return self.index

    @staticmethod
    def initial_index(
        candidates: Sequence[Candidate],
        *,
        require_match: bool,
        default_candidate: Optional[str] = None,
        move_default_to_front: bool = False,
        restore_index: Optional[int] = None,
    ) -> Optional[int]:
        if not candidates:
            return None
        if restore_index is not None:
            lower = 0 if require_match else RAW_INPUT_INDEX
            return clamp(restore_index, lower, len(candidates) - 1)
        if move_default_to_front or default_candidate is None:
            return 0
        for index, candidate in enumerate(candidates):
            if candidate.full_form == default_candidate:
                return index
        return 0

    def navigate(self, kind: NavKind) -> Optional[int]:
        """Move the cursor; boundaries and the empty list are no-ops."""
        if self.index is None:
            return None

        last = self.length - 1
        if kind is NavKind.PREV:
            target = self.index - 1
        elif kind is NavKind.NEXT:
            target = self.index + 1
        elif kind is NavKind.PREV_PAGE:
            target = self.index - self.page_size
        elif kind is NavKind.NEXT_PAGE:
            target = self.index + self.page_size
        elif kind is NavKind.BEGINNING:
            target = 0
        else:
            target = last

        self.index = clamp(target, self.lower_bound, last)
        logger.debug(f"Cursor {kind.value} -> {self.index}")
        return self.index

    def clamp_to(self, index: int) -> Optional[int]:
        """Clamp an explicit index into the valid range without moving the cursor."""
        if self.index is None:
            return None
        return clamp(index, self.lower_bound, self.length - 1)

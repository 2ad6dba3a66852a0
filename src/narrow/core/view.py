"""Observation surface handed to rendering collaborators after each event."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from narrow.domain.candidate import Candidate


@dataclass(frozen=True, slots=True)
class CountSummary:
    """Matches for the current query out of the candidates considered.

    Attributes:
        shown: Number of refined candidates
        total: Number of candidates the refine stage looked at
    """

    shown: int
    total: int

    def render(self, fmt: str = "{shown}/{total}") -> str:
        return fmt.format(shown=self.shown, total=self.total)


@dataclass(frozen=True)
class ViewSnapshot:
    """Fully resolved view of a session between two events."""

    prompt: str
    query: str
    indicator_query: str
    displayed_slice: tuple[Candidate, ...]
    highlighted_row: Optional[int]
    first_shown: int
    cursor_index: Optional[int]
    count_summary: CountSummary
    default_value_hint_visible: bool
    default_candidate: Optional[str] = None
    selected: tuple[str, ...] = ()
    multi_select: bool = False
    require_match: bool = False

    @property
    def current_candidate(self) -> Optional[Candidate]:
        if self.highlighted_row is None or not 0 <= self.highlighted_row < len(self.displayed_slice):
            return None
        return self.displayed_slice[self.highlighted_row]

    @property
    def raw_input_selected(self) -> bool:
        """True when a commit would take the typed text rather than a row."""
        return self.cursor_index is None or self.cursor_index < 0

"""
CandidateList - scrollable list of the rows a session currently displays.
"""

from __future__ import annotations

from typing import Any, Optional

from rich.console import Group
from rich.text import Text
from textual.containers import VerticalScroll
from textual.widgets import Static

from narrow.core.view import ViewSnapshot
from narrow.core.viewport import keep_row_visible
from narrow.logger import get_logger
from narrow.presentation.formatters import format_candidate_text

logger = get_logger("candidate_list")


class CandidateList(VerticalScroll):
    """Renders the displayed slice of a :class:`ViewSnapshot`.

    The slice is already bounded by the page size; scrolling only matters
    when the widget ends up shorter than a page, which the session cannot
    know. :meth:`keep_cursor_visible` corrects for that after each render.
    """

    DEFAULT_CSS = """
    CandidateList {
        height: auto;
        max-height: 100%;
    }
    CandidateList > Static {
        height: auto;
        width: 100%;
        margin: 0;
        padding: 0;
    }
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._rows = Static("", id="candidate-rows")
        self._view: Optional[ViewSnapshot] = None
        self._lines: list[Text] = []

    def compose(self):
        yield self._rows

    @property
    def lines(self) -> list[Text]:
        """Rich lines of the last rendered view."""
        return list(self._lines)

    def show_view(self, view: ViewSnapshot) -> None:
        """Render ``view`` and schedule the visibility post-pass."""
        self._view = view
        width = self.size.width or None
        lines: list[Text] = []
        selected = set(view.selected)
        for row, candidate in enumerate(view.displayed_slice):
            lines.append(
                format_candidate_text(
                    candidate,
                    current=row == view.highlighted_row,
                    selected=(candidate.full_form in selected) if view.multi_select else None,
                    width=width,
                )
            )
        if not lines:
            lines.append(Text("No match", style="dim italic"))
        self._lines = lines
        self._rows.update(Group(*lines))
        self.call_after_refresh(self.keep_cursor_visible)

    def keep_cursor_visible(self) -> None:
        """Scroll so the highlighted row is on screen.

        Idempotent: a second call right after the first leaves the scroll
        position where it is. Never touches the session.
        """
        if self._view is None:
            return
        current = int(self.scroll_y)
        target = keep_row_visible(current, self._view.highlighted_row, self.scrollable_content_region.height)
        if target != current:
            logger.debug(f"Scrolling candidate list from {current} to {target}")
            self.scroll_to(y=target, animate=False)

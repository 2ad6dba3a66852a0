"""
Formatting helpers for candidate rows and the prompt line.
"""

from __future__ import annotations

from typing import Optional

from rich.text import Text

from narrow.core.view import ViewSnapshot
from narrow.domain.candidate import PRIMARY, Candidate

MARKER_STYLES: dict[str, str] = {
    PRIMARY: "bold magenta",
    "secondary": "bold cyan",
}

CURRENT_STYLE = "reverse"
SELECTED_MARK = "* "
UNSELECTED_MARK = "  "


def format_candidate_text(
    candidate: Candidate,
    *,
    current: bool = False,
    selected: Optional[bool] = None,
    width: Optional[int] = None,
) -> Text:
    """
    Render one candidate row.

    Prefix and suffix are dimmed, highlight spans are styled by marker and
    the right margin is pushed to the right edge when ``width`` is known.
    ``selected`` adds a selection column; leave it ``None`` outside
    multi-select sessions.
    """
    text = Text(no_wrap=True, overflow="ellipsis")
    if selected is not None:
        text.append(SELECTED_MARK if selected else UNSELECTED_MARK, style="bold green" if selected else "")
    if candidate.display_prefix:
        text.append(candidate.display_prefix, style="dim")

    offset = len(text)
    text.append(candidate.display)
    for span in candidate.highlights:
        start = max(0, span.start)
        end = min(len(candidate.display), span.end)
        if start < end:
            text.stylize(MARKER_STYLES.get(span.marker, "bold"), offset + start, offset + end)

    if candidate.display_suffix:
        text.append(candidate.display_suffix, style="dim")

    if candidate.right_margin:
        gap = 1
        if width is not None:
            gap = max(1, width - len(text) - len(candidate.right_margin))
        text.append(" " * gap)
        text.append(candidate.right_margin, style="italic dim")

    if current:
        text.stylize(CURRENT_STYLE)
    return text


def format_count_indicator(view: ViewSnapshot, count_format: str = "{shown}/{total}") -> str:
    """Return the count indicator text, e.g. ``"3/120"``."""
    return view.count_summary.render(count_format)


def format_prompt_text(view: ViewSnapshot, count_format: str = "{shown}/{total}") -> Text:
    """
    Render the line shown above the input: count, prompt, default hint.

    The prompt is emphasized when the cursor is on the raw input, since
    committing would then take the typed text.
    """
    text = Text()
    text.append(format_count_indicator(view, count_format), style="dim")
    text.append(" ")
    text.append(view.prompt, style="bold reverse" if view.raw_input_selected and view.cursor_index is not None else "bold")
    if view.default_value_hint_visible and view.default_candidate is not None:
        text.append(f" (default {view.default_candidate})", style="italic")
    if view.indicator_query != view.query:
        text.append(f" [{view.indicator_query}]", style="cyan")
    if view.multi_select and view.selected:
        text.append(f" {len(view.selected)} selected", style="green")
    return text

"""Formatting helpers turning session views into rich text."""

from .candidate import (
    MARKER_STYLES,
    format_candidate_text,
    format_count_indicator,
    format_prompt_text,
)

__all__ = [
    "MARKER_STYLES",
    "format_candidate_text",
    "format_count_indicator",
    "format_prompt_text",
]

"""Candidate records.

A candidate is the unit the narrowing pipeline moves around. The display
text is what gets matched and highlighted; everything else rides along
untouched until commit, which only reads ``full_form``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from narrow.domain.errors import InvalidCollectionShape

__all__ = ["PRIMARY", "HighlightSpan", "Candidate", "as_candidate"]

PRIMARY = "primary"
"""Marker for the span matched by the query."""


@dataclass(frozen=True, slots=True)
class HighlightSpan:
    """Half-open ``[start, end)`` range of the display text to emphasize."""

    start: int
    end: int
    marker: str = PRIMARY


@dataclass(frozen=True, slots=True)
class Candidate:
    """One selectable item.

    Attributes:
        display: Text shown to the user and used for matching
        full: Value returned on commit when it differs from ``display``
        display_prefix: Text rendered before ``display``, never matched
        display_suffix: Text rendered after ``display``, never matched
        right_margin: Supplementary text aligned to the right edge
        highlights: Spans added by the highlight stage
    """

    display: str
    full: str | None = None
    display_prefix: str = ""
    display_suffix: str = ""
    right_margin: str = ""
    highlights: tuple[HighlightSpan, ...] = field(default=(), compare=False)

    @property
    def full_form(self) -> str:
        """Value committed or inserted for this candidate."""
        return self.display if self.full is None else self.full

    def with_highlights(self, spans: tuple[HighlightSpan, ...]) -> Candidate:
        """Return a copy carrying ``spans``; all other metadata is kept."""
        return replace(self, highlights=tuple(spans))

    def __str__(self) -> str:
        return self.display


_MAPPING_KEYS = {
    "display": "display",
    "full": "full",
    "full_form": "full",
    "prefix": "display_prefix",
    "display_prefix": "display_prefix",
    "suffix": "display_suffix",
    "display_suffix": "display_suffix",
    "right_margin": "right_margin",
    "margin": "right_margin",
}


def as_candidate(item: Any) -> Candidate:
    """Coerce a caller-supplied item into a :class:`Candidate`.

    Accepted shapes:
        - ``Candidate``: returned as is
        - ``str``: becomes the display text
        - ``(display, full)`` pair of strings
        - mapping with a ``display`` key and optional ``full``/``prefix``/
          ``suffix``/``right_margin`` keys

    Raises:
        InvalidCollectionShape: For anything else
    """
    if isinstance(item, Candidate):
        return item
    if isinstance(item, str):
        return Candidate(item)
    if isinstance(item, tuple) and len(item) == 2 and all(isinstance(part, str) for part in item):
        return Candidate(item[0], full=item[1])
    if isinstance(item, Mapping):
        if not isinstance(item.get("display"), str):
            raise InvalidCollectionShape(f"Candidate mapping needs a string 'display' key: {item!r}")
        kwargs: dict[str, str] = {}
        for key, value in item.items():
            target = _MAPPING_KEYS.get(key)
            if target is None:
                raise InvalidCollectionShape(f"Unknown candidate key {key!r}")
            if value is not None and not isinstance(value, str):
                raise InvalidCollectionShape(f"Candidate field {key!r} must be a string, got {type(value).__name__}")
            if value is not None:
                kwargs[target] = value
        return Candidate(**kwargs)
    raise InvalidCollectionShape(f"Cannot use {type(item).__name__} as a candidate: {item!r}")

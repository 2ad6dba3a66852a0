"""Pipeline stage protocols."""

from collections.abc import Sequence
from typing import Protocol

from narrow.domain.candidate import Candidate

__all__ = ["Preprocessor", "Refiner", "Highlighter"]


class Preprocessor(Protocol):
    """Turns raw candidates into the list the refine stage filters.

    Runs once per session for static sources and once per distinct query
    for dynamic ones. Must return a new sequence rather than sorting the
    caller's list in place.
    """

    def __call__(self, candidates: Sequence[Candidate]) -> list[Candidate]:
        ...


class Refiner(Protocol):
    """Filters (and may reorder) candidates for the current query."""

    def __call__(self, query: str, candidates: Sequence[Candidate]) -> list[Candidate]:
        ...


class Highlighter(Protocol):
    """Decorates the displayed subset with highlight spans.

    Only ever called with the candidates about to be shown, so the cost
    is bounded by the page size.
    """

    def __call__(self, query: str, candidates: Sequence[Candidate]) -> list[Candidate]:
        ...

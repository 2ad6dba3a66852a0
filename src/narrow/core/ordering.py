"""Ordering policy applied after refine.

Both rules are stable partitions: matching candidates move to the front
keeping their relative order, and the rest keep theirs.
"""

from collections.abc import Callable, Sequence
from typing import Optional

from narrow.domain.candidate import Candidate


def stable_partition(
    candidates: Sequence[Candidate],
    predicate: Callable[[Candidate], bool],
) -> list[Candidate]:
    """Move candidates satisfying ``predicate`` to the front."""
    front: list[Candidate] = []
    rest: list[Candidate] = []
    for candidate in candidates:
        (front if predicate(candidate) else rest).append(candidate)
    return front + rest


def matches_input(candidate: Candidate, raw_input: str) -> bool:
    """True if the typed text is exactly this candidate."""
    return candidate.display == raw_input or candidate.full_form == raw_input


def apply_ordering(
    candidates: Sequence[Candidate],
    *,
    raw_input: str,
    default_candidate: Optional[str] = None,
    move_default_to_front: bool = False,
) -> list[Candidate]:
    """Promote the default candidate (optionally), then exact input matches.

    Args:
        candidates: Output of the refine stage
        raw_input: Literal typed query, not the display query
        default_candidate: Full form of the default candidate
        move_default_to_front: Whether the default is promoted at all
    """
    ordered = list(candidates)
    if move_default_to_front and default_candidate is not None:
        ordered = stable_partition(ordered, lambda candidate: candidate.full_form == default_candidate)
    if raw_input:
        ordered = stable_partition(ordered, lambda candidate: matches_input(candidate, raw_input))
    return ordered

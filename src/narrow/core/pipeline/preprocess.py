"""Default preprocess stages."""

from collections.abc import Sequence

from narrow.domain.candidate import Candidate


def sort_candidates(candidates: Sequence[Candidate]) -> list[Candidate]:
    """Stable sort by display length, then display text."""
    return sorted(candidates, key=lambda candidate: (len(candidate.display), candidate.display))


def keep_order(candidates: Sequence[Candidate]) -> list[Candidate]:
    """Identity preprocess for producers that already order their output."""
    return list(candidates)

"""Helpers shared by test modules."""

from narrow.domain.candidate import Candidate


def assert_cursor_invariant(session) -> None:
    """Cursor is None iff nothing matched, otherwise within [lower_bound, len-1]."""
    state = session.state
    refined = state.refined_candidates
    if not refined:
        assert state.cursor_index is None
        return
    assert state.cursor_index is not None
    lower = 0 if state.require_match else -1
    assert lower <= state.cursor_index <= len(refined) - 1


def displays(candidates) -> list[str]:
    return [candidate.display for candidate in candidates]


def make_candidates(*texts: str) -> list[Candidate]:
    return [Candidate(text) for text in texts]

"""Default refine stage: literal substring filtering.

The query is plain text. Nothing in it is treated as a pattern, so
``"a.b"`` only matches candidates containing those three characters.
"""

from collections.abc import Sequence

from narrow.core.pipeline.highlight import find_match
from narrow.domain.candidate import Candidate


def substring_refine(
    query: str,
    candidates: Sequence[Candidate],
    *,
    ignore_case: bool = False,
) -> list[Candidate]:
    """Keep candidates whose display text contains ``query``.

    Matching uses the same folding as the highlight stage, so every kept
    candidate can be marked. Order is preserved. Always returns a new
    list, even for an empty query.
    """
    if not query:
        return list(candidates)
    return [
        candidate
        for candidate in candidates
        if find_match(query, candidate.display, ignore_case=ignore_case) >= 0
    ]

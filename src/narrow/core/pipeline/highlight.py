"""Default highlight stage."""

from collections.abc import Sequence

from narrow.domain.candidate import PRIMARY, Candidate, HighlightSpan


def find_match(query: str, text: str, *, ignore_case: bool = False) -> int:
    """Index of the first occurrence of ``query`` in ``text``, or -1."""
    if ignore_case:
        # lower, not casefold: casefold can change length ("ß" -> "ss")
        return text.lower().find(query.lower())
    return text.find(query)


def first_match_highlight(
    query: str,
    candidates: Sequence[Candidate],
    *,
    ignore_case: bool = False,
) -> list[Candidate]:
    """Mark the first occurrence of ``query`` in each display text.

    Candidates without a match (and every candidate when the query is
    empty) come back unchanged.
    """
    if not query:
        return list(candidates)

    highlighted: list[Candidate] = []
    for candidate in candidates:
        start = find_match(query, candidate.display, ignore_case=ignore_case)
        if start < 0:
            highlighted.append(candidate)
            continue
        span = HighlightSpan(start, start + len(query), PRIMARY)
        highlighted.append(candidate.with_highlights((span,)))
    return highlighted

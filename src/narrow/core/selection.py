"""Multi-select accumulator and commit resolution."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional

from narrow.core.cursor import RAW_INPUT_INDEX
from narrow.domain.candidate import Candidate
from narrow.domain.errors import NoMatchRequired


class MultiSelect:
    """Ordered set of full forms, in the order they were first selected."""

    def __init__(self, values: Sequence[str] = ()) -> None:
        self._values: list[str] = []
        for value in values:
            self.add(value)

    def toggle(self, value: str) -> bool:
        """Add ``value`` if absent, remove it if present.

        Returns:
            True if ``value`` is selected afterwards
        """
        if value in self._values:
            self._values.remove(value)
            return False
        self._values.append(value)
        return True

    def add(self, value: str) -> None:
        if value not in self._values:
            self._values.append(value)

    @property
    def values(self) -> list[str]:
        return list(self._values)

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)


def resolve_commit(
    candidates: Sequence[Candidate],
    index: Optional[int],
    *,
    query: str,
    require_match: bool,
    default_candidate: Optional[str] = None,
) -> str:
    """Resolve what a commit at ``index`` yields.

    ``index`` of ``None`` (nothing to select) or ``-1`` means the raw
    input. An empty raw input resolves to the default candidate, or to an
    empty string when there is none.

    Raises:
        NoMatchRequired: If the raw input would be committed while a match
            is required
    """
    if index is not None and 0 <= index < len(candidates):
        return candidates[index].full_form
    if index is not None and index != RAW_INPUT_INDEX:
        raise IndexError(f"Commit index {index} outside of {len(candidates)} candidates")
    if require_match:
        raise NoMatchRequired()
    if query:
        return query
    return default_candidate or ""


def resolve_exact_input(
    candidates: Sequence[Candidate],
    *,
    query: str,
    require_match: bool,
) -> str:
    """Resolve a commit of the literal typed text.

    Raises:
        NoMatchRequired: If a match is required and no candidate's full
            form equals the typed text
    """
    if require_match and not any(candidate.full_form == query for candidate in candidates):
        raise NoMatchRequired()
    return query


def assemble_result(resolved: str, selected: Optional[MultiSelect]) -> str | list[str]:
    """Final value of a session.

    With multi-select the resolved value joins the accumulator (once) and
    the ordered accumulator is the result. An empty resolved value is
    not added.
    """
    if selected is None:
        return resolved
    if resolved:
        selected.add(resolved)
    return selected.values

"""Candidate sources.

A caller hands the engine either a ready collection or a function of the
query. :func:`normalize` turns both into one of two handles the session
consumes the same way.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from narrow.domain.candidate import Candidate, as_candidate
from narrow.domain.errors import GeneratorFailure, InvalidCollectionShape
from narrow.domain.protocols import Preprocessor
from narrow.logger import get_logger

logger = get_logger("source")

CandidateGenerator = Callable[[str], Any]


@dataclass(frozen=True, slots=True)
class SourceResult:
    """What a source produced for one query.

    Attributes:
        candidates: Preprocessed candidates
        display_query: Replacement for the typed query in highlighting and
            in the indicator; ``None`` keeps the typed query
    """

    candidates: list[Candidate]
    display_query: str | None = None


def coerce_candidates(items: Any) -> list[Candidate]:
    """Turn a collection of candidate-like items into candidates.

    Mappings contribute their keys, like completion tables do.

    Raises:
        InvalidCollectionShape: If ``items`` is not a collection or one of
            its items cannot be used as a candidate
    """
    if items is None or isinstance(items, (str, bytes)):
        raise InvalidCollectionShape(f"Expected a collection of candidates, got {type(items).__name__}")
    if isinstance(items, Mapping):
        items = list(items.keys())
    if not isinstance(items, Iterable):
        raise InvalidCollectionShape(f"Expected a collection of candidates, got {type(items).__name__}")
    return [as_candidate(item) for item in items]


class StaticSource:
    """A fixed collection, preprocessed once per session."""

    dynamic = False

    def __init__(self, candidates: Sequence[Candidate]) -> None:
        self._candidates = list(candidates)

    @property
    def candidates(self) -> list[Candidate]:
        return list(self._candidates)

    def prepare(self, preprocess: Preprocessor) -> list[Candidate]:
        """Run ``preprocess`` over the collection and return the result."""
        return list(preprocess(list(self._candidates)))

    def __len__(self) -> int:
        return len(self._candidates)


class DynamicSource:
    """A function of the query, re-invoked for every distinct query.

    The function may return a collection of candidate-like items, or a
    mapping with a ``candidates`` key and an optional ``display_query``
    (``input`` is accepted as an alias) key.
    """

    dynamic = True

    def __init__(self, generator: CandidateGenerator) -> None:
        self._generator = generator

    @property
    def generator(self) -> CandidateGenerator:
        return self._generator

    def fetch(self, query: str, preprocess: Preprocessor) -> SourceResult:
        """Call the generator for ``query`` and preprocess what it returns.

        Raises:
            GeneratorFailure: If the generator raises or returns something
                that cannot be turned into candidates
        """
        try:
            produced = self._generator(query)
            display_query = None
            if isinstance(produced, SourceResult):
                return SourceResult(list(preprocess(produced.candidates)), produced.display_query)
            if isinstance(produced, Mapping) and "candidates" in produced:
                display_query = produced.get("display_query", produced.get("input"))
                if display_query is not None and not isinstance(display_query, str):
                    raise InvalidCollectionShape(
                        f"display_query must be a string, got {type(display_query).__name__}"
                    )
                produced = produced["candidates"]
            candidates = coerce_candidates(produced)
        except Exception as e:
            logger.warning(f"Generator {getattr(self._generator, '__name__', self._generator)!r} failed for {query!r}: {e}")
            raise GeneratorFailure(query, e) from e
        return SourceResult(list(preprocess(candidates)), display_query)


CandidateSource = Union[StaticSource, DynamicSource]


def normalize(raw: Any) -> CandidateSource:
    """Wrap ``raw`` in a source handle.

    Args:
        raw: A source handle (returned unchanged), a callable of the query,
            or a collection of candidate-like items

    Raises:
        InvalidCollectionShape: If ``raw`` is a collection that cannot be
            normalized; fatal to session start
    """
    if isinstance(raw, (StaticSource, DynamicSource)):
        return raw
    if callable(raw) and not isinstance(raw, (Mapping, Sequence)):
        return DynamicSource(raw)
    candidates = coerce_candidates(raw)
    logger.debug(f"Normalized static source with {len(candidates)} candidates")
    return StaticSource(candidates)

"""Preprocess → Refine → Highlight pipeline.

Each stage is a plain callable matching the protocols in
:mod:`narrow.domain.protocols`. :class:`PipelineConfig` bundles one of
each; callers replace any subset with :meth:`PipelineConfig.replace`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import partial
from typing import Optional

from narrow.core.config import EngineConfig
from narrow.domain.protocols import Highlighter, Preprocessor, Refiner

from .highlight import find_match, first_match_highlight
from .preprocess import keep_order, sort_candidates
from .refine import substring_refine

__all__ = [
    "PipelineConfig",
    "sort_candidates",
    "keep_order",
    "substring_refine",
    "first_match_highlight",
    "find_match",
]


@dataclass(frozen=True)
class PipelineConfig:
    """The three replaceable stages of a session."""

    preprocess: Preprocessor = sort_candidates
    refine: Refiner = substring_refine
    highlight: Highlighter = first_match_highlight

    @classmethod
    def from_engine_config(cls, config: EngineConfig) -> PipelineConfig:
        """Build the default stages with the engine's switches bound in."""
        return cls(
            preprocess=sort_candidates if config.sort_enabled else keep_order,
            refine=partial(substring_refine, ignore_case=config.ignore_case),
            highlight=partial(first_match_highlight, ignore_case=config.ignore_case),
        )

    def replace(
        self,
        *,
        preprocess: Optional[Preprocessor] = None,
        refine: Optional[Refiner] = None,
        highlight: Optional[Highlighter] = None,
    ) -> PipelineConfig:
        """Return a copy with the given stages swapped in."""
        changes = {
            name: stage
            for name, stage in (("preprocess", preprocess), ("refine", refine), ("highlight", highlight))
            if stage is not None
        }
        return replace(self, **changes)

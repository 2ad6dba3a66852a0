"""Memo of the last finished session, for repeating it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from narrow.core.config import SessionOptions
from narrow.core.pipeline import PipelineConfig
from narrow.core.source import CandidateSource


@dataclass(frozen=True)
class SessionRecord:
    """Everything needed to reopen a session where it was left.

    ``pipeline`` is the one the session ran with, so a restored cursor
    index points into the same ordering. ``last_command`` and
    ``last_prefix_arg`` are opaque to the engine; hosts use them to re-run
    whatever command opened the session.
    """

    prompt: str
    source: CandidateSource
    options: SessionOptions
    query: str
    cursor_index: Optional[int]
    pipeline: Optional[PipelineConfig] = None
    call_args: Mapping[str, Any] = field(default_factory=dict)
    last_command: Any = None
    last_prefix_arg: Any = None


class SessionMemo:
    """Holds the record of the most recently finished session."""

    def __init__(self) -> None:
        self._last: Optional[SessionRecord] = None

    def record(self, record: SessionRecord) -> None:
        self._last = record

    @property
    def last(self) -> Optional[SessionRecord]:
        return self._last

    def clear(self) -> None:
        self._last = None

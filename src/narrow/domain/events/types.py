"""Event types published by narrowing sessions."""

import time
from dataclasses import dataclass, field
from typing import Any, Mapping

from narrow.domain.candidate import Candidate


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    """

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""


@dataclass
class CandidateSelected(Event):
    """Published once per successful commit.

    Attributes:
        value: Resolved result (a string, or a list of strings for multi-select)
        call_args: The arguments the session was started with
    """

    value: str | list[str]
    """Resolved commit result."""
    call_args: Mapping[str, Any] = field(default_factory=dict)
    """Original ``start_session`` arguments."""


@dataclass
class CandidateInserted(Event):
    """Published when a candidate is copied into the input without committing."""

    value: str
    """Full form copied into the input."""
    candidate: Candidate | None = None
    """Candidate the value came from."""


@dataclass
class HistoryAppendRequested(Event):
    """Asks the host to record committed values in its history."""

    values: list[str]
    """Values in commit order."""


@dataclass
class FeedbackMessage(Event):
    """Recoverable message for the host's feedback channel (echo area, status bar)."""

    message: str
    """Text to show."""
    code: str = "info"
    """Error code of the rejection, or ``info``."""

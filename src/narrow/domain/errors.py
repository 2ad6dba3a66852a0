"""Errors raised by narrowing sessions.

Only :class:`InvalidCollectionShape` is allowed to abort a session, and
only while it is being started. Everything else is raised from a single
event and leaves the session exactly as it was before that event.
"""

from __future__ import annotations

__all__ = [
    "NarrowError",
    "GeneratorFailure",
    "InvalidCollectionShape",
    "NoMatchRequired",
    "EmptyHistory",
    "SessionClosedError",
    "NothingToRepeat",
]


class NarrowError(Exception):
    """Base class for all narrowing errors.

    Attributes:
        code: Stable identifier used in feedback messages and logs
        message: Human readable description shown on the feedback channel
        cause: Underlying exception, if any
    """

    code = "narrow_error"

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class GeneratorFailure(NarrowError):
    """A dynamic candidate source raised while computing candidates."""

    code = "generator_failure"

    def __init__(self, query: str, cause: BaseException) -> None:
        super().__init__(f"Candidate generator failed for query {query!r}: {cause}", cause=cause)
        self.query = query


class InvalidCollectionShape(NarrowError):
    """A source could not be normalized into candidates."""

    code = "invalid_collection_shape"


class NoMatchRequired(NarrowError):
    """Commit of raw input rejected because a match is required."""

    code = "no_match_required"

    def __init__(self, message: str = "Match required") -> None:
        super().__init__(message)


class EmptyHistory(NarrowError):
    """A history-backed sub-session found no recorded entries."""

    code = "empty_history"

    def __init__(self, message: str = "No history is recorded for this command") -> None:
        super().__init__(message)


class SessionClosedError(NarrowError):
    """An event arrived after the session was committed or cancelled."""

    code = "session_closed"

    def __init__(self, message: str = "Session is no longer active") -> None:
        super().__init__(message)


class NothingToRepeat(NarrowError):
    """Repeat was requested before any session finished."""

    code = "nothing_to_repeat"

    def __init__(self, message: str = "No previous session to repeat") -> None:
        super().__init__(message)

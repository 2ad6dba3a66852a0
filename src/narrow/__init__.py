"""narrow - an incremental-narrowing selection engine."""

from narrow.core import (
    CommitResult,
    EngineConfig,
    NarrowEngine,
    NarrowingSession,
    NavKind,
    Pending,
    PipelineConfig,
    SessionOptions,
    start_session,
)
from narrow.domain.candidate import Candidate

__version__ = "0.1.0"

__all__ = [
    "Candidate",
    "CommitResult",
    "EngineConfig",
    "NarrowEngine",
    "NarrowingSession",
    "NavKind",
    "Pending",
    "PipelineConfig",
    "SessionOptions",
    "start_session",
]

"""Core narrowing engine: sources, pipeline, ordering, cursor, viewport and sessions."""

from narrow.core.config import EngineConfig, SessionOptions, load_engine_config
from narrow.core.cursor import NavKind, SelectionCursor
from narrow.core.engine import NarrowEngine, start_session
from narrow.core.history import InMemoryHistory
from narrow.core.memo import SessionMemo, SessionRecord
from narrow.core.pipeline import PipelineConfig
from narrow.core.session import CommitResult, NarrowingSession, Pending, SessionState
from narrow.core.source import DynamicSource, SourceResult, StaticSource, normalize
from narrow.core.view import CountSummary, ViewSnapshot

__all__ = [
    "EngineConfig",
    "SessionOptions",
    "load_engine_config",
    "NavKind",
    "SelectionCursor",
    "NarrowEngine",
    "start_session",
    "InMemoryHistory",
    "SessionMemo",
    "SessionRecord",
    "PipelineConfig",
    "CommitResult",
    "NarrowingSession",
    "Pending",
    "SessionState",
    "DynamicSource",
    "SourceResult",
    "StaticSource",
    "normalize",
    "CountSummary",
    "ViewSnapshot",
]

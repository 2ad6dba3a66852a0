"""Engine: the entry point that starts narrowing sessions."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from narrow.core.config import EngineConfig, SessionOptions
from narrow.core.memo import SessionMemo
from narrow.core.pipeline import PipelineConfig
from narrow.core.session import NarrowingSession
from narrow.core.source import normalize
from narrow.domain.errors import InvalidCollectionShape, NothingToRepeat
from narrow.domain.protocols import HistoryStore
from narrow.logger import get_logger

logger = get_logger("engine")

OptionsLike = Union[SessionOptions, Mapping[str, Any], None]


def _coerce_options(options: OptionsLike) -> SessionOptions:
    if options is None:
        return SessionOptions()
    if isinstance(options, SessionOptions):
        return options
    return SessionOptions.model_validate(dict(options))


class NarrowEngine:
    """Starts sessions sharing one configuration, history and memo.

    The configuration is read once here; the default pipeline is built
    from it and handed to every session.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        pipeline: Optional[PipelineConfig] = None,
        history: Optional[HistoryStore] = None,
        memo: Optional[SessionMemo] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.pipeline = pipeline or PipelineConfig.from_engine_config(self.config)
        self.history = history
        self.memo = memo if memo is not None else SessionMemo()

    def start_session(
        self,
        prompt: str,
        source: Any,
        options: OptionsLike = None,
        *,
        pipeline: Optional[PipelineConfig] = None,
        last_command: Any = None,
        last_prefix_arg: Any = None,
        **call_args: Any,
    ) -> NarrowingSession:
        """Start a session over ``source``.

        Args:
            prompt: Text shown before the input
            source: A collection of candidate-like items or a function of
                the query
            options: ``SessionOptions`` or a mapping of its fields
            pipeline: Stages for this session only
            last_command: Opaque value kept for repeating the session
            last_prefix_arg: Opaque value kept for repeating the session
            **call_args: Extra arguments handed to ``CandidateSelected`` handlers

        Raises:
            InvalidCollectionShape: If the source cannot be normalized
        """
        session_options = _coerce_options(options)
        try:
            normalized = normalize(source)
        except InvalidCollectionShape as e:
            logger.error(f"Cannot start session {prompt!r}: {e.message}")
            raise

        return NarrowingSession(
            prompt,
            normalized,
            session_options,
            self.config,
            pipeline or self.pipeline,
            history=self.history,
            memo=self.memo,
            call_args={"prompt": prompt, "options": session_options, **call_args},
            last_command=last_command,
            last_prefix_arg=last_prefix_arg,
        )

    def repeat_last(self) -> NarrowingSession:
        """Reopen the last finished session with its query and cursor restored.

        Raises:
            NothingToRepeat: If no session has finished yet
        """
        record = self.memo.last
        if record is None:
            raise NothingToRepeat()

        options = record.options.model_copy(update={"initial_input": record.query})
        logger.info(f"Repeating session {record.prompt!r} at {record.query!r}")
        return NarrowingSession(
            record.prompt,
            record.source,
            options,
            self.config,
            record.pipeline or self.pipeline,
            history=self.history,
            memo=self.memo,
            restore_index=record.cursor_index,
            call_args=record.call_args,
            last_command=record.last_command,
            last_prefix_arg=record.last_prefix_arg,
        )


def start_session(
    prompt: str,
    source: Any,
    options: OptionsLike = None,
    *,
    config: Optional[EngineConfig] = None,
    pipeline: Optional[PipelineConfig] = None,
    history: Optional[HistoryStore] = None,
) -> NarrowingSession:
    """Start a one-off session with its own engine."""
    return NarrowEngine(config=config, pipeline=pipeline, history=history).start_session(prompt, source, options)

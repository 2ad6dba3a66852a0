"""Narrowing sessions.

A :class:`NarrowingSession` owns one :class:`SessionState` and exposes
one method per external event. Every event either fully replaces the
state or leaves it untouched: new refined lists and cursor positions are
computed into locals first and only assigned once nothing else can fail.

Event flow for a query change::

    source (dynamic only) -> preprocess -> refine -> ordering -> cursor
                                                                  |
    view snapshot <- highlight (displayed rows only) <- viewport <-+
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from narrow.core.config import EngineConfig, SessionOptions
from narrow.core.cursor import NavKind, SelectionCursor
from narrow.core.memo import SessionMemo, SessionRecord
from narrow.core.ordering import apply_ordering
from narrow.core.pipeline import PipelineConfig, keep_order
from narrow.core.selection import (
    MultiSelect,
    assemble_result,
    resolve_commit,
    resolve_exact_input,
)
from narrow.core.source import CandidateSource, DynamicSource, StaticSource
from narrow.core.view import CountSummary, ViewSnapshot
from narrow.core.viewport import compute_viewport
from narrow.domain.candidate import Candidate
from narrow.domain.errors import (
    EmptyHistory,
    GeneratorFailure,
    NarrowError,
    SessionClosedError,
)
from narrow.domain.events import (
    CandidateInserted,
    CandidateSelected,
    EventBus,
    FeedbackMessage,
    HistoryAppendRequested,
)
from narrow.domain.protocols import HistoryStore
from narrow.logger import get_logger

logger = get_logger("session")

__all__ = ["SessionState", "CommitResult", "Pending", "NarrowingSession"]


@dataclass
class SessionState:
    """Mutable state of one session.

    ``raw_candidates`` is the preprocessed list for static sources and the
    source itself for dynamic ones, whose candidates change per query.
    """

    raw_candidates: Union[list[Candidate], DynamicSource]
    cursor: SelectionCursor
    refined_candidates: list[Candidate] = field(default_factory=list)
    query: str = ""
    previous_query: Optional[str] = None
    display_query: Optional[str] = None
    pool_size: int = 0
    selected: MultiSelect = field(default_factory=MultiSelect)
    require_match: bool = False
    multi_select: bool = False
    move_default_to_front: bool = True
    default_candidate: Optional[str] = None

    @property
    def cursor_index(self) -> Optional[int]:
        return self.cursor.index

    @property
    def lower_bound(self) -> int:
        return self.cursor.lower_bound


@dataclass(frozen=True)
class CommitResult:
    """Terminal value of a committed session."""

    value: Union[str, list[str]]


@dataclass(frozen=True)
class Pending:
    """A commit that did not end the session.

    Attributes:
        error: Why the commit was rejected
    """

    error: Optional[NarrowError] = None


class NarrowingSession:
    """One interactive narrowing session.

    Sessions are normally created through :class:`narrow.core.engine.NarrowEngine`.

    Args:
        prompt: Text shown before the input
        source: Normalized candidate source
        options: Per-session options
        config: Engine configuration
        pipeline: Preprocess/refine/highlight stages
        history: Store that receives committed values
        memo: Receives a record of the session when it ends
        restore_index: Cursor index of a previous session to clamp into the
            initial list instead of computing a fresh one
        call_args: Arguments of the call that opened the session, passed
            to ``CandidateSelected`` handlers
        last_command: Opaque value stored in the memo record
        last_prefix_arg: Opaque value stored in the memo record
    """

    def __init__(
        self,
        prompt: str,
        source: CandidateSource,
        options: SessionOptions,
        config: EngineConfig,
        pipeline: PipelineConfig,
        *,
        history: Optional[HistoryStore] = None,
        memo: Optional[SessionMemo] = None,
        event_bus: Optional[EventBus] = None,
        restore_index: Optional[int] = None,
        call_args: Optional[Mapping[str, Any]] = None,
        last_command: Any = None,
        last_prefix_arg: Any = None,
    ) -> None:
        self.prompt = prompt
        self.source = source
        self.options = options
        self.config = config
        self.pipeline = pipeline
        self.history = history
        self.memo = memo
        self.events = event_bus or EventBus()
        self.call_args = dict(call_args or {})
        self.last_command = last_command
        self.last_prefix_arg = last_prefix_arg
        self.page_size = options.effective_page_size(config)
        self.closed = False
        self.cancelled = False
        self.result: Optional[CommitResult] = None

        raw: Union[list[Candidate], DynamicSource]
        if isinstance(source, StaticSource):
            raw = source.prepare(pipeline.preprocess)
        else:
            raw = source

        self.state = SessionState(
            raw_candidates=raw,
            cursor=SelectionCursor(require_match=options.require_match, page_size=self.page_size),
            require_match=options.require_match,
            multi_select=options.multi_select,
            move_default_to_front=options.move_default_to_front,
            default_candidate=options.default_candidate,
        )
        self._refresh(options.initial_input, restore_index=restore_index)
        self.view = self._build_view()
        logger.info(
            f"Session {prompt!r} started: {self.state.pool_size} candidates, "
            f"require_match={options.require_match}, multi_select={options.multi_select}"
        )

    # ------------------------------------------------------------------
    # Recompute
    # ------------------------------------------------------------------

    def _refresh(self, query: str, *, restore_index: Optional[int] = None) -> None:
        state = self.state
        if isinstance(state.raw_candidates, DynamicSource):
            produced = state.raw_candidates.fetch(query, self.pipeline.preprocess)
            pool, display_query = produced.candidates, produced.display_query
        else:
            pool, display_query = state.raw_candidates, None

        refined = self.pipeline.refine(query, pool)
        ordered = apply_ordering(
            refined,
            raw_input=query,
            default_candidate=state.default_candidate,
            move_default_to_front=state.move_default_to_front,
        )

        # Nothing below can fail; assign everything at once
        state.query = query
        state.previous_query = query
        state.display_query = display_query
        state.pool_size = len(pool)
        state.refined_candidates = ordered
        state.cursor.recompute(
            ordered,
            default_candidate=state.default_candidate,
            move_default_to_front=state.move_default_to_front,
            restore_index=restore_index,
        )
        logger.debug(f"Refreshed {query!r}: {len(ordered)}/{len(pool)} candidates, cursor={state.cursor.index}")

    def _build_view(self) -> ViewSnapshot:
        state = self.state
        viewport = compute_viewport(state.cursor.index, state.refined_candidates, self.page_size)
        indicator_query = state.display_query if state.display_query is not None else state.query
        rows = self.pipeline.highlight(indicator_query, viewport.rows)
        default = state.default_candidate
        hint_visible = (
            not state.query
            and default is not None
            and not any(candidate.full_form == default for candidate in state.refined_candidates)
        )
        return ViewSnapshot(
            prompt=self.prompt,
            query=state.query,
            indicator_query=indicator_query,
            displayed_slice=tuple(rows),
            highlighted_row=viewport.highlighted_row,
            first_shown=viewport.first_shown,
            cursor_index=state.cursor.index,
            count_summary=CountSummary(shown=len(state.refined_candidates), total=state.pool_size),
            default_value_hint_visible=hint_visible,
            default_candidate=default,
            selected=tuple(state.selected.values),
            multi_select=state.multi_select,
            require_match=state.require_match,
        )

    def _ensure_open(self) -> None:
        if self.closed:
            raise SessionClosedError()

    def _feedback(self, error: NarrowError) -> None:
        self.events.publish(FeedbackMessage(message=error.message, code=error.code))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def query(self) -> str:
        """Literal typed text, never the display query."""
        return self.state.query

    @property
    def current_candidate(self) -> Optional[Candidate]:
        index = self.state.cursor.index
        if index is None or index < 0:
            return None
        return self.state.refined_candidates[index]

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on_query_changed(self, text: str) -> ViewSnapshot:
        """Recompute for new query text.

        Raises:
            GeneratorFailure: If a dynamic source failed; the previous view
                stays current
            SessionClosedError: If the session already ended
        """
        self._ensure_open()
        if text == self.state.previous_query:
            return self.view
        try:
            self._refresh(text)
        except GeneratorFailure as e:
            logger.opt(exception=e).error(f"Keeping previous view after generator failure: {e.message}")
            self._feedback(e)
            raise
        self.view = self._build_view()
        return self.view

    def on_navigate(self, kind: NavKind) -> ViewSnapshot:
        """Move the cursor. Never raises; a no-op on an ended session."""
        if self.closed:
            logger.debug(f"Ignoring {kind.value} on closed session")
            return self.view
        self.state.cursor.navigate(kind)
        self.view = self._build_view()
        return self.view

    def on_toggle_select(self) -> ViewSnapshot:
        """Toggle the current candidate in the multi-select set."""
        candidate = self.current_candidate
        if self.closed or not self.state.multi_select or candidate is None:
            return self.view
        selected = self.state.selected.toggle(candidate.full_form)
        logger.debug(f"{'Selected' if selected else 'Deselected'} {candidate.full_form!r}")
        self.view = self._build_view()
        return self.view

    def on_insert(self) -> ViewSnapshot:
        """Copy the current candidate into the input without committing.

        The query becomes the candidate's full form and is recomputed. In
        multi-select sessions the value is also added to the selection.
        """
        self._ensure_open()
        candidate = self.current_candidate
        if candidate is None:
            return self.view
        value = candidate.full_form
        self.on_query_changed(value)
        if self.state.multi_select:
            self.state.selected.add(value)
            self.view = self._build_view()
        self.events.publish(CandidateInserted(value=value, candidate=candidate))
        return self.view

    def on_commit(self, explicit_index: Optional[int] = None) -> Union[CommitResult, Pending]:
        """Commit the current (or an explicitly given) candidate.

        Args:
            explicit_index: Index into the refined list to commit instead of
                the cursor; clamped into the valid range

        Returns:
            CommitResult when the session ended, Pending when the commit
            was rejected and the session continues
        """
        self._ensure_open()
        state = self.state
        index = state.cursor.index
        if explicit_index is not None and index is not None:
            index = state.cursor.clamp_to(explicit_index)

        raw_selected = index is None or index < 0
        if state.multi_select and raw_selected and not state.query and len(state.selected):
            # Confirming an empty input finishes a multi-selection as is
            return self._finish("")

        try:
            resolved = resolve_commit(
                state.refined_candidates,
                index,
                query=state.query,
                require_match=state.require_match,
                default_candidate=state.default_candidate,
            )
        except NarrowError as e:
            return self._reject(e)
        return self._finish(resolved)

    def on_submit_exact_input(self) -> Union[CommitResult, Pending]:
        """Commit the literal typed text, ignoring the cursor."""
        self._ensure_open()
        try:
            resolved = resolve_exact_input(
                self.state.refined_candidates,
                query=self.state.query,
                require_match=self.state.require_match,
            )
        except NarrowError as e:
            return self._reject(e)
        return self._finish(resolved)

    def on_cancel(self) -> None:
        """Abandon the session."""
        if self.closed:
            return
        self.closed = True
        self.cancelled = True
        self._remember()
        logger.info(f"Session {self.prompt!r} cancelled")

    def open_history_session(self) -> NarrowingSession:
        """Start a sub-session over the recorded history.

        Committing the sub-session replaces this session's query with the
        chosen entry.

        Raises:
            EmptyHistory: If there is no history or it has no entries
        """
        self._ensure_open()
        entries = self.history.entries() if self.history is not None else []
        if not entries:
            error = EmptyHistory()
            logger.warning(f"History requested for {self.prompt!r} but none recorded")
            self._feedback(error)
            raise error

        child = NarrowingSession(
            "History: ",
            StaticSource([Candidate(entry) for entry in entries]),
            SessionOptions(page_size=self.page_size),
            self.config,
            self.pipeline.replace(preprocess=keep_order),
        )
        child.events.subscribe(CandidateSelected, self._accept_history_entry)
        return child

    def _accept_history_entry(self, event: CandidateSelected) -> None:
        if isinstance(event.value, str) and not self.closed:
            self.on_query_changed(event.value)

    # ------------------------------------------------------------------
    # Ending
    # ------------------------------------------------------------------

    def _reject(self, error: NarrowError) -> Pending:
        logger.warning(f"Commit rejected for {self.prompt!r}: {error.message}")
        self._feedback(error)
        return Pending(error=error)

    def _finish(self, resolved: str) -> CommitResult:
        state = self.state
        value = assemble_result(resolved, state.selected if state.multi_select else None)
        values = value if isinstance(value, list) else [value]

        self.closed = True
        self.result = CommitResult(value=value)
        self.view = self._build_view()

        recorded = [item for item in values if item]
        if recorded:
            self.events.publish(HistoryAppendRequested(values=recorded))
            if self.history is not None:
                for item in recorded:
                    self.history.append(item)
        self.events.publish(CandidateSelected(value=value, call_args=self.call_args))
        self._remember()
        logger.info(f"Session {self.prompt!r} committed {value!r}")
        return self.result

    def _remember(self) -> None:
        if self.memo is None:
            return
        self.memo.record(
            SessionRecord(
                prompt=self.prompt,
                source=self.source,
                options=self.options,
                query=self.state.query,
                cursor_index=self.state.cursor.index,
                pipeline=self.pipeline,
                call_args=self.call_args,
                last_command=self.last_command,
                last_prefix_arg=self.last_prefix_arg,
            )
        )

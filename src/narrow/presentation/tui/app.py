"""
NarrowApp - Textual front end driving a NarrowingSession.
"""

from __future__ import annotations

from typing import Optional, Union

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Input, Static

from narrow.core.cursor import NavKind
from narrow.core.session import CommitResult, NarrowingSession, Pending
from narrow.core.view import ViewSnapshot
from narrow.domain.errors import NarrowError
from narrow.domain.events import FeedbackMessage
from narrow.logger import get_logger
from narrow.presentation.formatters import format_prompt_text
from narrow.presentation.widgets import CandidateList

logger = get_logger("narrow_tui")

CommitValue = Union[str, list[str]]


class NarrowApp(App[CommitValue]):
    """
    Interactive picker.

    Layout:
    ┌──────────────────────────────────────┐
    │ 3/120 Pick:  (default foo)           │  prompt line
    │ > typed query                        │  input
    │   candidate rows (page_size)         │  candidate list
    │ feedback                             │
    └──────────────────────────────────────┘

    The app exits with the commit value, or ``None`` when cancelled.
    """

    CSS = """
    #prompt-line {
        height: 1;
    }
    #query {
        border: none;
        height: 1;
        padding: 0 1;
    }
    #feedback {
        height: auto;
        color: $warning;
    }
    """

    BINDINGS = [
        Binding("up", "navigate('prev')", "Previous", show=False, priority=True),
        Binding("down", "navigate('next')", "Next", show=False, priority=True),
        Binding("pageup", "navigate('prev_page')", "Page up", show=False, priority=True),
        Binding("pagedown", "navigate('next_page')", "Page down", show=False, priority=True),
        Binding("ctrl+home", "navigate('beginning')", "First", show=False, priority=True),
        Binding("ctrl+end", "navigate('end')", "Last", show=False, priority=True),
        Binding("tab", "insert", "Insert", priority=True),
        Binding("ctrl+t", "toggle_select", "Toggle", priority=True),
        Binding("ctrl+j", "submit_exact", "Submit input", priority=True),
        Binding("ctrl+r", "history", "History", priority=True),
        Binding("escape", "cancel", "Cancel", priority=True),
        Binding("ctrl+c", "cancel", "Cancel", show=False, priority=True),
    ]

    def __init__(self, session: NarrowingSession, count_format: Optional[str] = None) -> None:
        super().__init__()
        self.session = session
        self.count_format = count_format or session.config.count_format
        self._outer_sessions: list[NarrowingSession] = []
        self._subscribe(session)

    def compose(self) -> ComposeResult:
        yield Static("", id="prompt-line")
        yield Input(value=self.session.query, placeholder="Type to narrow", id="query")
        yield CandidateList(id="candidates")
        yield Static("", id="feedback")

    def on_mount(self) -> None:
        self.query_one("#query", Input).focus()
        self._render_view(self.session.view)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _subscribe(self, session: NarrowingSession) -> None:
        session.events.subscribe(FeedbackMessage, self._on_feedback)

    def _on_feedback(self, event: FeedbackMessage) -> None:
        if self.is_running:
            self.query_one("#feedback", Static).update(event.message)

    def _render_view(self, view: ViewSnapshot) -> None:
        self.query_one("#prompt-line", Static).update(format_prompt_text(view, self.count_format))
        self.query_one("#candidates", CandidateList).show_view(view)

    def _set_query(self, text: str) -> None:
        query_input = self.query_one("#query", Input)
        if query_input.value != text:
            query_input.value = text
            query_input.cursor_position = len(text)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        self.query_one("#feedback", Static).update("")
        try:
            view = self.session.on_query_changed(event.value)
        except NarrowError as e:
            # Feedback already published; the previous view stays on screen
            logger.debug(f"Query change rejected: {e.code}")
            return
        self._render_view(view)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._handle_commit(self.session.on_commit())

    def action_navigate(self, kind: str) -> None:
        self._render_view(self.session.on_navigate(NavKind(kind)))

    def action_toggle_select(self) -> None:
        self._render_view(self.session.on_toggle_select())

    def action_insert(self) -> None:
        try:
            view = self.session.on_insert()
        except NarrowError as e:
            logger.debug(f"Insert rejected: {e.code}")
            return
        self._set_query(view.query)
        self._render_view(view)

    def action_submit_exact(self) -> None:
        self._handle_commit(self.session.on_submit_exact_input())

    def action_history(self) -> None:
        try:
            child = self.session.open_history_session()
        except NarrowError as e:
            logger.debug(f"History unavailable: {e.code}")
            return
        self._outer_sessions.append(self.session)
        self._switch_to(child)

    def action_cancel(self) -> None:
        self.session.on_cancel()
        if self._outer_sessions:
            self._switch_to(self._outer_sessions.pop())
            return
        self.exit(None)

    def _switch_to(self, session: NarrowingSession) -> None:
        self.session = session
        self._subscribe(session)
        self._set_query(session.query)
        self._render_view(session.view)

    def _handle_commit(self, outcome: Union[CommitResult, Pending]) -> None:
        if isinstance(outcome, Pending):
            self._render_view(self.session.view)
            return
        if self._outer_sessions:
            # History sub-session: its selection became the outer query
            self._switch_to(self._outer_sessions.pop())
            return
        self.exit(outcome.value)

"""Hook events for host collaborators.

A narrowing session publishes events on its own :class:`EventBus` so
hosts can react to commits and inserts (for example to record history or
refresh a mode line) without the engine knowing about them.

Example:
    ```python
    from narrow.domain.events import CandidateSelected, EventBus

    bus = EventBus()

    def on_selected(event: CandidateSelected):
        print(f"picked {event.value!r}")

    bus.subscribe(CandidateSelected, on_selected)
    ```
"""

from .bus import EventBus
from .types import (
    CandidateInserted,
    CandidateSelected,
    Event,
    FeedbackMessage,
    HistoryAppendRequested,
)

__all__ = [
    "EventBus",
    "Event",
    "CandidateSelected",
    "CandidateInserted",
    "FeedbackMessage",
    "HistoryAppendRequested",
]

"""Event bus used for session hooks.

Each narrowing session owns one bus. Hosts subscribe to the event types
they care about; the session publishes synchronously, in the middle of
the event that caused them, so a handler always sees the session in the
state that produced the event.

Handler Contract:
    Handlers MUST be synchronous. A session event runs to completion before
    the next one is accepted, and an awaited handler would break that.
"""

import inspect
from typing import Callable, Type, TypeVar

from narrow.logger import get_logger

from .types import Event

logger = get_logger("events.bus")

T = TypeVar("T", bound=Event)

EventHandler = Callable[[Event], None]


class EventBus:
    """Publish/subscribe registry keyed by event type.

    Example:
        ```python
        bus = EventBus()
        bus.subscribe(CandidateSelected, lambda event: history.append(event.value))
        bus.publish(CandidateSelected(value="apple"))
        ```

    Thread safety:
        Not thread-safe. Sessions are single-threaded by construction.
    """

    def __init__(self):
        self._handlers: dict[Type[Event], list[Callable[[Event], None]]] = {}
        """Registry of event handlers by event type."""

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Subscribe ``handler`` to events of ``event_type``.

        Subscribing the same handler twice is a no-op.

        Raises:
            TypeError: If handler is a coroutine function
        """
        if inspect.iscoroutinefunction(handler):
            raise TypeError(
                f"Event handlers must be synchronous functions. "
                f"Handler {handler.__name__} is a coroutine function."
            )

        handlers = self._handlers.setdefault(event_type, [])
        if handler in handlers:
            logger.debug(f"Handler already subscribed for {event_type.__name__}, skipping")
            return
        handlers.append(handler)
        logger.debug(f"Subscribed handler for {event_type.__name__}")

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """Remove ``handler``; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)
            logger.debug(f"Unsubscribed handler for {event_type.__name__}")

    def publish(self, event: Event) -> None:
        """
        Call every handler subscribed to the exact type of ``event``.

        Handlers run in subscription order. A handler that raises is logged
        and does not prevent the remaining handlers from running.
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug(f"No handlers subscribed for {event_type.__name__}")
            return

        logger.debug(f"Publishing {event_type.__name__} to {len(handlers)} handler(s)")
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.opt(exception=e).error(f"Error in event handler for {event_type.__name__}: {e}")

    def clear(self) -> None:
        """Drop all subscriptions."""
        self._handlers.clear()
        logger.debug("Event bus cleared")

    def has_subscribers(self, event_type: Type[Event]) -> bool:
        """Return True if at least one handler is subscribed to ``event_type``."""
        return bool(self._handlers.get(event_type))

# src/touchpos/core/events/bus.py
"""
Explicit event bus owned by the application coordinator.

- Producers hold a reference to the bus instead of broadcasting globally
- Handlers run in the publisher's turn, in subscription order
- Every published event is appended to an optional event log
"""

from __future__ import annotations

import inspect
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, List, Optional, Union

from .events import DomainEvent, EventKind

if TYPE_CHECKING:
    from touchpos.application.ports.event_log_port import EventLogPort

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], Union[None, Awaitable[Any]]]


class EventBus:
    """Typed dispatcher for domain events."""

    def __init__(self, event_log: "Optional[EventLogPort]" = None):
        self._handlers: Dict[EventKind, List[EventHandler]] = {}
        self._event_log = event_log
        self._seq = 0

    # ------------------ subscriptions ------------------
    def subscribe(self, kind: EventKind, handler: EventHandler) -> None:
        """Register a handler for one event kind."""
        self._handlers.setdefault(EventKind(kind), []).append(handler)

    def unsubscribe(self, kind: EventKind, handler: EventHandler) -> None:
        handlers = self._handlers.get(EventKind(kind), [])
        if handler in handlers:
            handlers.remove(handler)

    def handler_count(self, kind: EventKind) -> int:
        return len(self._handlers.get(EventKind(kind), []))

    # ------------------ dispatch ------------------
    async def publish(self, event: DomainEvent) -> int:
        """
        Deliver an event to its handlers.

        Coroutine handlers are awaited before the next handler runs. A failing
        handler is logged and does not reach the producer.

        Returns:
            Number of handlers invoked.
        """
        self._seq += 1
        self._record(event)

        handlers = list(self._handlers.get(event.kind, []))
        if not handlers:
            logger.debug(f"No handlers for {event.kind.value}")
            return 0

        for handler in handlers:
            try:
                outcome = handler(event)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception as e:
                logger.error(f"Handler error for {event.kind.value}: {e}", exc_info=True)
        return len(handlers)

    def _record(self, event: DomainEvent) -> None:
        if not self._event_log:
            return
        try:
            self._event_log.append(
                {
                    "seq": self._seq,
                    "type": event.kind.value,
                    "payload": event.payload(),
                    "ts": datetime.now(timezone.utc).isoformat(),
                }
            )
        except Exception as e:
            logger.debug(f"Event log append failed: {e}")

    @property
    def event_log(self) -> "Optional[EventLogPort]":
        return self._event_log

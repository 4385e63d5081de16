from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class EventLogPort(Protocol):
    """
    Minimal event log port.

    Implementations may keep events in memory, write them to the logger,
    or persist them elsewhere.
    """

    def append(self, event: dict) -> None:
        """Append an event envelope."""

    def stream(self, event_type: str) -> Iterable[dict]:
        """Stream recorded envelopes of one event type (may be empty)."""

    def close(self) -> None:
        """Close underlying resources (optional)."""

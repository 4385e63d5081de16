from __future__ import annotations

from typing import Iterable, List

from touchpos.application.ports.event_log_port import EventLogPort


class InMemoryEventLog(EventLogPort):
    """Simple in-memory event log (useful for tests and the CLI summary)."""

    def __init__(self) -> None:
        self.events: List[dict] = []

    def append(self, event: dict) -> None:
        self.events.append(dict(event))

    def stream(self, event_type: str) -> Iterable[dict]:
        return (e for e in self.events if e.get("type") == event_type)

    def close(self) -> None:
        return None

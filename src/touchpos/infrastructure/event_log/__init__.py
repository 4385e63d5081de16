from __future__ import annotations

from typing import Optional

from touchpos.application.ports.event_log_port import EventLogPort

from .memory_event_log import InMemoryEventLog
from .logging_event_log import LoggingEventLog


def create_event_log(kind: str) -> Optional[EventLogPort]:
    """Map the ``app.event_log`` config value to a backend."""
    if kind == "memory":
        return InMemoryEventLog()
    if kind == "logging":
        return LoggingEventLog()
    return None


__all__ = ["InMemoryEventLog", "LoggingEventLog", "create_event_log"]

from __future__ import annotations

import json
import logging
from typing import Iterable, Optional

from touchpos.application.ports.event_log_port import EventLogPort


class LoggingEventLog(EventLogPort):
    """
    Emit event envelopes as JSON lines to the Python logger.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self._logger = logger or logging.getLogger("touchpos.eventlog")
        self._level = level

    def append(self, event: dict) -> None:
        try:
            payload = json.dumps(event, ensure_ascii=False, default=str)
        except (TypeError, ValueError):
            payload = str(event)
        self._logger.log(self._level, payload)

    def stream(self, event_type: str) -> Iterable[dict]:
        # Logging backend cannot stream retrospectively.
        return iter(())

    def close(self) -> None:
        return None

"""
Logging setup for the TouchPOS entry points.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from touchpos.config import LoggingConfig

_configured = False


def setup_logger(config: Optional[LoggingConfig] = None, *, force: bool = False) -> logging.Logger:
    """
    Configure the ``touchpos`` logger once.

    Args:
        config: level/format/file settings (defaults when omitted)
        force: reconfigure even if already set up

    Returns:
        The package logger
    """
    global _configured
    config = config or LoggingConfig()
    root = logging.getLogger("touchpos")
    if _configured and not force:
        return root

    for handler in list(root.handlers):
        root.removeHandler(handler)

    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter = logging.Formatter(config.format)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if config.file:
        log_path = Path(config.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_path, maxBytes=10485760, backupCount=5, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    root.setLevel(level)
    _configured = True
    return root

"""
Unified error module.
"""

from .errors import (
    ErrorSeverity,
    TouchPosError,
    InitializationError,
    NavigationError,
    ThemeLoadError,
    StorageError,
    CartError,
    ScreenError,
    ScreenNotFoundError,
    EventError,
    ConfigError,
    Result,
)

__all__ = [
    "ErrorSeverity",
    "TouchPosError",
    "InitializationError",
    "NavigationError",
    "ThemeLoadError",
    "StorageError",
    "CartError",
    "ScreenError",
    "ScreenNotFoundError",
    "EventError",
    "ConfigError",
    "Result",
]

"""
Unified errors and a Result wrapper so coordinator operations report failure
without raising into UI callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Generic, Optional, TypeVar, Union, cast


class ErrorSeverity(Enum):
    WARNING = "warning"      # recoverable, keep going
    ERROR = "error"          # operation failed
    CRITICAL = "critical"    # application cannot start


@dataclass
class TouchPosError(Exception):
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    code: str = "UNKNOWN"
    context: Dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


@dataclass
class InitializationError(TouchPosError):
    severity: ErrorSeverity = ErrorSeverity.CRITICAL
    code: str = "INIT_ERROR"


@dataclass
class NavigationError(TouchPosError):
    code: str = "NAVIGATION_ERROR"


@dataclass
class ThemeLoadError(TouchPosError):
    code: str = "THEME_LOAD_ERROR"


@dataclass
class StorageError(TouchPosError):
    code: str = "STORAGE_ERROR"


@dataclass
class CartError(TouchPosError):
    code: str = "CART_ERROR"
    severity: ErrorSeverity = ErrorSeverity.WARNING


@dataclass
class ScreenError(TouchPosError):
    code: str = "SCREEN_ERROR"


@dataclass
class ScreenNotFoundError(ScreenError):
    code: str = "SCREEN_NOT_FOUND"


@dataclass
class EventError(TouchPosError):
    code: str = "EVENT_ERROR"
    severity: ErrorSeverity = ErrorSeverity.WARNING


@dataclass
class ConfigError(TouchPosError):
    code: str = "CONFIG_ERROR"
    severity: ErrorSeverity = ErrorSeverity.CRITICAL


T = TypeVar("T")
E = TypeVar("E", bound=TouchPosError)


@dataclass
class Result(Generic[T, E]):
    """Functional result wrapper instead of scattered status dicts."""

    _value: Union[T, E]
    _is_ok: bool

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        return cls(_value=value, _is_ok=True)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        return cls(_value=error, _is_ok=False)

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    @property
    def error(self) -> Optional[E]:
        return None if self._is_ok else cast(E, self._value)

    def unwrap(self) -> T:
        if not self._is_ok:
            raise cast(E, self._value)
        return cast(T, self._value)

    def unwrap_or(self, default: T) -> T:
        return cast(T, self._value) if self._is_ok else default

    def map(self, fn: Callable[[T], Any]) -> "Result[Any, E]":
        if self._is_ok:
            return Result.ok(fn(cast(T, self._value)))
        return self

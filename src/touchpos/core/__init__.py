"""
Core layer: errors, domain events, staged execution, application state.
"""

from .errors import (
    ErrorSeverity,
    TouchPosError,
    InitializationError,
    NavigationError,
    ThemeLoadError,
    Result,
)
from .events import (
    EventBus,
    EventKind,
    DomainEvent,
    Navigate,
    AddToCart,
    UpdateCart,
    RemoveFromCart,
    ClearCart,
)
from .pipeline import Pipeline, PipelineStage, PipelineResult, StageResult
from .state import ApplicationState

__all__ = [
    # errors
    "ErrorSeverity",
    "TouchPosError",
    "InitializationError",
    "NavigationError",
    "ThemeLoadError",
    "Result",
    # events
    "EventBus",
    "EventKind",
    "DomainEvent",
    "Navigate",
    "AddToCart",
    "UpdateCart",
    "RemoveFromCart",
    "ClearCart",
    # pipeline
    "Pipeline",
    "PipelineStage",
    "PipelineResult",
    "StageResult",
    # state
    "ApplicationState",
]

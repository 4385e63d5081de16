"""
Domain events and the event bus that routes them to the coordinator.
"""

from .events import (
    EventKind,
    DomainEvent,
    Navigate,
    AddToCart,
    UpdateCart,
    RemoveFromCart,
    ClearCart,
    EVENT_TYPES,
    event_from_dict,
)
from .bus import EventBus, EventHandler

__all__ = [
    "EventKind",
    "DomainEvent",
    "Navigate",
    "AddToCart",
    "UpdateCart",
    "RemoveFromCart",
    "ClearCart",
    "EVENT_TYPES",
    "event_from_dict",
    "EventBus",
    "EventHandler",
]

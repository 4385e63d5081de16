# src/touchpos/core/events/events.py
"""
Domain events produced by screens and widgets.

Every event is an immutable value with a fixed payload shape. The ``kind``
class attribute carries the wire name used by the event bus and by event
scripts (``{"type": "pos:addToCart", "product": {...}}``).
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Type

from touchpos.core.errors import EventError


class EventKind(str, Enum):
    NAVIGATE = "pos:navigate"
    ADD_TO_CART = "pos:addToCart"
    UPDATE_CART = "pos:updateCart"
    REMOVE_FROM_CART = "pos:removeFromCart"
    CLEAR_CART = "pos:clearCart"


@dataclass(frozen=True)
class DomainEvent:
    """Base class; concrete events set ``kind``."""

    kind: ClassVar[EventKind]

    def payload(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind.value, **self.payload()}


@dataclass(frozen=True)
class Navigate(DomainEvent):
    kind: ClassVar[EventKind] = EventKind.NAVIGATE

    screen: str
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AddToCart(DomainEvent):
    kind: ClassVar[EventKind] = EventKind.ADD_TO_CART

    product: Dict[str, Any]


@dataclass(frozen=True)
class UpdateCart(DomainEvent):
    kind: ClassVar[EventKind] = EventKind.UPDATE_CART

    item_id: str
    quantity: int


@dataclass(frozen=True)
class RemoveFromCart(DomainEvent):
    kind: ClassVar[EventKind] = EventKind.REMOVE_FROM_CART

    item_id: str


@dataclass(frozen=True)
class ClearCart(DomainEvent):
    kind: ClassVar[EventKind] = EventKind.CLEAR_CART


EVENT_TYPES: Dict[EventKind, Type[DomainEvent]] = {
    EventKind.NAVIGATE: Navigate,
    EventKind.ADD_TO_CART: AddToCart,
    EventKind.UPDATE_CART: UpdateCart,
    EventKind.REMOVE_FROM_CART: RemoveFromCart,
    EventKind.CLEAR_CART: ClearCart,
}

# camelCase keys accepted from scripts written against the browser payloads
_PAYLOAD_ALIASES = {"itemId": "item_id"}


def event_from_dict(data: Mapping[str, Any]) -> DomainEvent:
    """Build a domain event from ``{"type": <wire name>, **payload}``."""
    if not isinstance(data, Mapping):
        raise EventError(message=f"Event must be an object, got {type(data).__name__}")
    raw_type = data.get("type")
    try:
        kind = EventKind(raw_type)
    except ValueError:
        raise EventError(message=f"Unknown event type: {raw_type!r}") from None

    event_cls = EVENT_TYPES[kind]
    allowed = {f.name for f in fields(event_cls)}
    payload = {}
    for key, value in data.items():
        if key == "type":
            continue
        name = _PAYLOAD_ALIASES.get(key, key)
        if name not in allowed:
            raise EventError(
                message=f"Unexpected field {key!r} for {kind.value}",
                context={"type": kind.value},
            )
        payload[name] = value

    try:
        return event_cls(**payload)
    except TypeError as e:
        raise EventError(message=f"Invalid payload for {kind.value}: {e}") from e

"""
Contracts the coordinator consumes.

The coordinator only depends on these shapes; the default implementations
live under ``touchpos.infrastructure`` and tests substitute their own.
"""

from __future__ import annotations

from typing import Any, Awaitable, Dict, Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class StoragePort(Protocol):
    """Durable key/value persistence."""

    async def init(self) -> None: ...

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


@runtime_checkable
class CartPort(Protocol):
    """Cart state; mutations are synchronous."""

    async def init(self, storage: StoragePort) -> None: ...

    def add_item(self, product: Dict[str, Any]) -> Any: ...

    def update_quantity(self, item_id: str, quantity: int) -> Any: ...

    def remove_item(self, item_id: str) -> Any: ...

    def clear(self) -> Any: ...


@runtime_checkable
class ScreenManagerPort(Protocol):
    """Resolves a screen name and mounts it."""

    def init(self, app: Any) -> Union[None, Awaitable[None]]: ...

    async def show_screen(self, name: str, data: Optional[Dict[str, Any]] = None) -> None: ...


@runtime_checkable
class ScreenPort(Protocol):
    """A mountable unit of UI."""

    async def render(self) -> str: ...

    async def after_render(self) -> None: ...

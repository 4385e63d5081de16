# touchpos/__init__.py
"""
TouchPOS - coordination core of a touch point-of-sale front end.

- Ordered asynchronous startup of storage, cart and screens
- Domain events routed to the cart and to navigation
- Navigation state and theme variants (evolution / restaurant / express / oblivion)
"""

from __future__ import annotations

__version__ = "1.0.0"


# Lazy imports avoid circular dependencies between layers
def __getattr__(name: str):
    if name == "AppCoordinator":
        from touchpos.application.coordinator import AppCoordinator
        return AppCoordinator
    if name == "ThemeVariant":
        from touchpos.application.registries import ThemeVariant
        return ThemeVariant
    if name == "TouchPosConfig":
        from touchpos.config import TouchPosConfig
        return TouchPosConfig
    if name == "load_config":
        from touchpos.config import load_config
        return load_config
    if name in (
        "Navigate",
        "AddToCart",
        "UpdateCart",
        "RemoveFromCart",
        "ClearCart",
        "EventBus",
    ):
        from touchpos.core import events
        return getattr(events, name)
    if name == "Result":
        from touchpos.core.errors import Result
        return Result

    raise AttributeError(f"module 'touchpos' has no attribute '{name}'")


__all__ = [
    "__version__",
    "AppCoordinator",
    "ThemeVariant",
    "TouchPosConfig",
    "load_config",
    "Navigate",
    "AddToCart",
    "UpdateCart",
    "RemoveFromCart",
    "ClearCart",
    "EventBus",
    "Result",
]

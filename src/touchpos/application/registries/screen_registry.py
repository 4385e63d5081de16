from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .theme_registry import lazy_screen


@dataclass
class ScreenDescriptor:
    name: str
    title: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)


class ScreenRegistry:
    """
    Screen name -> descriptor + lazily resolved screen class.
    """

    def __init__(self) -> None:
        self._screens: Dict[str, ScreenDescriptor] = {}
        self._factories: Dict[str, Callable[[], Any]] = {}

    def register(self, desc: ScreenDescriptor, factory: Callable[[], Any]) -> None:
        self._screens[desc.name] = desc
        self._factories[desc.name] = factory

    def get(self, name: str) -> Optional[ScreenDescriptor]:
        return self._screens.get(name)

    def resolve(self, name: str) -> Any:
        if name not in self._factories:
            raise KeyError(f"Screen factory not registered: {name}")
        return self._factories[name]()

    def names(self) -> List[str]:
        return list(self._screens.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._screens


DEFAULT_SCREENS = {
    "home": ("Home", "touchpos.presentation.screens.home:HomeScreen"),
    "products": ("Products", "touchpos.presentation.screens.products:ProductsScreen"),
    "cart": ("Cart", "touchpos.presentation.screens.cart:CartScreen"),
    "payment": ("Payment", "touchpos.presentation.screens.payment:PaymentScreen"),
}


def default_screen_registry() -> ScreenRegistry:
    registry = ScreenRegistry()
    for name, (title, path) in DEFAULT_SCREENS.items():
        registry.register(ScreenDescriptor(name=name, title=title), lazy_screen(path))
    return registry

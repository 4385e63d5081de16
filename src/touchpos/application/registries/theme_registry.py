from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union


class ThemeVariant(str, Enum):
    evolution = "evolution"
    restaurant = "restaurant"
    express = "express"
    oblivion = "oblivion"


@dataclass
class ThemeDescriptor:
    variant: ThemeVariant
    title: str = ""
    # Themes without a dedicated screen fall back to a regular navigation
    uses_navigation: bool = False
    home_screen: str = "home"
    metadata: Dict[str, Any] = field(default_factory=dict)


def lazy_screen(path: str) -> Callable[[], Any]:
    """
    Build a factory that imports ``"package.module:ClassName"`` on first use.
    """
    module_name, _, attr = path.partition(":")

    def factory() -> Any:
        module = importlib.import_module(module_name)
        return getattr(module, attr)

    return factory


class ThemeRegistry:
    """
    Closed set of theme variants mapped to screen factories.

    A factory returns the screen class; the coordinator constructs it.
    """

    def __init__(self) -> None:
        self._themes: Dict[ThemeVariant, ThemeDescriptor] = {}
        self._factories: Dict[ThemeVariant, Callable[[], Any]] = {}

    def register(self, desc: ThemeDescriptor, factory: Optional[Callable[[], Any]] = None) -> None:
        self._themes[desc.variant] = desc
        if factory:
            self._factories[desc.variant] = factory

    def get(self, variant: Union[ThemeVariant, str]) -> Optional[ThemeDescriptor]:
        try:
            return self._themes.get(ThemeVariant(variant))
        except ValueError:
            return None

    def resolve(self, variant: Union[ThemeVariant, str]) -> Any:
        """Return the screen class of a screen-backed theme."""
        key = ThemeVariant(variant)
        if key not in self._factories:
            raise KeyError(f"Theme factory not registered: {key.value}")
        return self._factories[key]()

    def all(self) -> Dict[ThemeVariant, ThemeDescriptor]:
        return dict(self._themes)


_THEME_SCREENS = {
    ThemeVariant.restaurant: "touchpos.presentation.screens.themes:RestaurantHomeScreen",
    ThemeVariant.express: "touchpos.presentation.screens.themes:ExpressHomeScreen",
    ThemeVariant.oblivion: "touchpos.presentation.screens.themes:OblivionHomeScreen",
}


def default_theme_registry() -> ThemeRegistry:
    registry = ThemeRegistry()
    registry.register(ThemeDescriptor(ThemeVariant.evolution, title="Evolution", uses_navigation=True))
    registry.register(
        ThemeDescriptor(ThemeVariant.restaurant, title="Restaurant"),
        lazy_screen(_THEME_SCREENS[ThemeVariant.restaurant]),
    )
    registry.register(
        ThemeDescriptor(ThemeVariant.express, title="Express"),
        lazy_screen(_THEME_SCREENS[ThemeVariant.express]),
    )
    registry.register(
        ThemeDescriptor(ThemeVariant.oblivion, title="Oblivion"),
        lazy_screen(_THEME_SCREENS[ThemeVariant.oblivion]),
    )
    return registry

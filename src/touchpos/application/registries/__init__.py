from .theme_registry import (
    ThemeVariant,
    ThemeDescriptor,
    ThemeRegistry,
    default_theme_registry,
    lazy_screen,
)
from .screen_registry import ScreenDescriptor, ScreenRegistry, default_screen_registry

__all__ = [
    "ThemeVariant",
    "ThemeDescriptor",
    "ThemeRegistry",
    "default_theme_registry",
    "lazy_screen",
    "ScreenDescriptor",
    "ScreenRegistry",
    "default_screen_registry",
]

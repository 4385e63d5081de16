"""
Application layer: coordinator, collaborator ports and registries.
"""

from __future__ import annotations


# Lazy to keep infrastructure -> application.ports imports acyclic
def __getattr__(name: str):
    if name == "AppCoordinator":
        from touchpos.application.coordinator import AppCoordinator
        return AppCoordinator
    if name in ("ThemeVariant", "ThemeRegistry", "default_theme_registry"):
        from touchpos.application import registries
        return getattr(registries, name)
    raise AttributeError(f"module 'touchpos.application' has no attribute '{name}'")


__all__ = [
    "AppCoordinator",
    "ThemeVariant",
    "ThemeRegistry",
    "default_theme_registry",
]

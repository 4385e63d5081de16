"""
Screen manager: resolves screen names and runs the mount lifecycle.
"""

from __future__ import annotations

import html
import inspect
import logging
from typing import Any, Callable, Dict, Optional

from touchpos.application.registries.screen_registry import (
    ScreenDescriptor,
    ScreenRegistry,
    default_screen_registry,
)
from touchpos.core.errors import ScreenError, ScreenNotFoundError

from .container import AppContainer

logger = logging.getLogger(__name__)

LOADING_MARKUP = (
    '<div class="loading-screen">'
    '<div class="loading-spinner"></div>'
    '<div class="loading-text">Loading...</div>'
    "</div>"
)

ERROR_MARKUP = (
    '<div class="error-screen">'
    '<div class="error-icon">!</div>'
    '<div class="error-message">{message}</div>'
    '<button class="touch-button error-retry" data-action="reload">Reload</button>'
    "</div>"
)


class ScreenManager:
    """
    Mounts screens into the application container.

    Lifecycle of ``show_screen``: loading markup -> construct -> render ->
    replace container -> after_render -> title. Failures leave the error
    markup in the container and are re-raised as ``ScreenError``.
    """

    def __init__(
        self,
        container: Optional[AppContainer] = None,
        *,
        registry: Optional[ScreenRegistry] = None,
        title_suffix: str = "POS System",
    ):
        self.app: Any = None
        self.container = container
        self.registry = registry or ScreenRegistry()
        self.title_suffix = title_suffix
        self._current_screen: Any = None
        self._use_defaults = registry is None

    def init(self, app: Any) -> None:
        self.app = app
        if self.container is None:
            raise ScreenError(message="POS app container not found")
        if self._use_defaults:
            self.register_default_screens()

    def register_default_screens(self) -> None:
        defaults = default_screen_registry()
        for name in defaults.names():
            if name not in self.registry:
                desc = defaults.get(name)
                self.registry.register(desc, lambda n=name: defaults.resolve(n))

    def register(self, name: str, factory: Callable[[], Any], title: str = "") -> None:
        """Register a screen; ``factory`` returns the screen class."""
        self.registry.register(ScreenDescriptor(name=name, title=title or name.title()), factory)

    def has_screen(self, name: str) -> bool:
        return name in self.registry

    async def show_screen(self, name: str, data: Optional[Dict[str, Any]] = None) -> None:
        if self.container is None:
            raise ScreenError(message="ScreenManager used before init()")

        desc = self.registry.get(name)
        if desc is None:
            self.show_error(f"Screen loading error: {name}")
            raise ScreenNotFoundError(message=f"Screen not found: {name}", context={"screen": name})

        self.show_loading()
        try:
            screen_cls = self.registry.resolve(name)
            if screen_cls is None:
                raise ScreenError(message=f"Screen class not found for: {name}")

            screen = screen_cls(self.app, dict(data or {}))
            markup = await screen.render()
            self.container.replace(markup)
            self._current_screen = screen

            after_render = getattr(screen, "after_render", None)
            if after_render is not None:
                outcome = after_render()
                if inspect.isawaitable(outcome):
                    await outcome

            self.update_title(desc.title)
        except Exception as e:
            logger.error(f"Failed to show screen {name}: {e}")
            self.show_error(f"Screen loading error: {name}")
            if isinstance(e, ScreenError):
                raise
            raise ScreenError(message=f"Failed to show screen {name}: {e}", context={"screen": name}) from e

    def show_loading(self) -> None:
        self.container.replace(LOADING_MARKUP)

    def show_error(self, message: str) -> None:
        self.container.replace(ERROR_MARKUP.format(message=html.escape(message)))

    def update_title(self, title: str) -> None:
        self.container.title = f"{title} - {self.title_suffix}"

    def get_current_screen(self) -> Any:
        return self._current_screen

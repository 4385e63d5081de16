"""
Base class for mountable screens.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from touchpos.core.events import Navigate

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

THEME_BUTTONS = ["evolution", "restaurant", "express", "oblivion"]


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def format_price(value: Any, currency: str = "USD") -> str:
    symbol = "$" if currency == "USD" else f"{currency} "
    return f"{symbol}{value}"


class BaseScreen:
    """
    A screen renders markup from a template and may publish domain events
    through the coordinator it was constructed with.
    """

    template_name: str = ""
    theme: str = "evolution"

    def __init__(self, app: Any, data: Optional[Dict[str, Any]] = None):
        self.app = app
        self.data = dict(data or {})
        self.cart_manager = app.get_cart_manager()
        self.storage_manager = app.get_storage_manager()
        self.mounted = False

    def context(self) -> Dict[str, Any]:
        return {}

    def _settings(self) -> Dict[str, Any]:
        getter = getattr(self.storage_manager, "get_settings", None)
        return getter() if callable(getter) else {}

    def _base_context(self) -> Dict[str, Any]:
        settings = self._settings()
        return {
            "theme": self.theme,
            "theme_buttons": THEME_BUTTONS,
            "store_name": settings.get("store_name", "TouchPOS"),
            "currency": settings.get("currency", "USD"),
            "price": format_price,
        }

    async def render(self) -> str:
        template = get_environment().get_template(self.template_name)
        return template.render(**self._base_context(), **self.context())

    async def after_render(self) -> None:
        self.mounted = True

    async def navigate(self, screen: str, data: Optional[Dict[str, Any]] = None) -> int:
        return await self.app.dispatch(Navigate(screen=screen, data=dict(data or {})))

    async def switch_theme(self, theme: str):
        return await self.app.load_theme(theme)

    def _cart_lines(self) -> List[Dict[str, Any]]:
        return [item.to_dict() | {"total": str(item.total_price)} for item in self.cart_manager.get_items()]

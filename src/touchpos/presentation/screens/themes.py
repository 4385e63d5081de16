"""
Theme home screens. Each replaces the whole container when loaded.
"""

from __future__ import annotations

from typing import Any, Dict

from touchpos.core.events import AddToCart

from .base import BaseScreen


class ThemeHomeScreen(BaseScreen):
    template_name = "theme_home.html"
    headline = ""

    def context(self) -> Dict[str, Any]:
        return {
            "headline": self.headline,
            "categories": self.storage_manager.get_categories(),
            "products": self.storage_manager.get_products(self.data.get("category")),
            "lines": self._cart_lines(),
            "total": self.cart_manager.get_total(),
        }

    async def add_product(self, product_id: str) -> bool:
        product = self.storage_manager.get_product(product_id)
        if product is None:
            return False
        await self.app.dispatch(AddToCart(product=product))
        return True


class RestaurantHomeScreen(ThemeHomeScreen):
    theme = "restaurant"
    headline = "Table Service"


class ExpressHomeScreen(ThemeHomeScreen):
    theme = "express"
    headline = "./express_pos --execute"


class OblivionHomeScreen(ThemeHomeScreen):
    theme = "oblivion"
    headline = "Oblivion Terminal"

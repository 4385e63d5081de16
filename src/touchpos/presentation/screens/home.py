from __future__ import annotations

from typing import Any, Dict, List

from .base import BaseScreen

# tile action -> (label, target screen, navigation data)
GRID_TILES = [
    ("products", "Products", "products", {}),
    ("cart", "Cart", "cart", {}),
    ("payment", "Pay", "payment", {}),
]


class HomeScreen(BaseScreen):
    """Default (evolution) home screen with the navigation grid."""

    template_name = "home.html"

    def context(self) -> Dict[str, Any]:
        return {
            "tiles": [{"action": a, "label": label} for a, label, _, _ in GRID_TILES],
            "categories": self.storage_manager.get_categories(),
            "item_count": self.cart_manager.get_item_count(),
        }

    def tile_actions(self) -> List[str]:
        return [a for a, _, _, _ in GRID_TILES]

    async def open_tile(self, action: str) -> bool:
        for tile_action, _, screen, data in GRID_TILES:
            if tile_action == action:
                await self.navigate(screen, data)
                return True
        return False

    async def search(self, query: str) -> bool:
        if not query or not query.strip():
            return False
        await self.navigate("products", {"search": query.strip()})
        return True

    async def open_category(self, category: str) -> None:
        await self.navigate("products", {"category": category})

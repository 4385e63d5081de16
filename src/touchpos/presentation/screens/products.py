from __future__ import annotations

import logging
from typing import Any, Dict, List

from touchpos.core.events import AddToCart

from .base import BaseScreen

logger = logging.getLogger(__name__)


class ProductsScreen(BaseScreen):
    """Product grid filtered by ``category`` or ``search`` navigation data."""

    template_name = "products.html"

    def filtered_products(self) -> List[Dict[str, Any]]:
        products = self.storage_manager.get_products(self.data.get("category"))
        query = (self.data.get("search") or "").lower()
        if query:
            products = [
                p
                for p in products
                if query in p.get("name", "").lower()
                or query in p.get("category", "").lower()
                or query in p.get("barcode", "")
            ]
        return products

    def context(self) -> Dict[str, Any]:
        return {
            "products": self.filtered_products(),
            "categories": self.storage_manager.get_categories(),
            "current_category": self.data.get("category"),
            "item_count": self.cart_manager.get_item_count(),
        }

    async def select_product(self, product_id: str) -> bool:
        product = self.storage_manager.get_product(product_id)
        if product is None:
            logger.warning(f"Unknown product selected: {product_id}")
            return False
        await self.app.dispatch(AddToCart(product=product))
        return True

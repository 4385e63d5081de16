from __future__ import annotations

from typing import Any, Dict

from touchpos.core.events import ClearCart, RemoveFromCart, UpdateCart

from .base import BaseScreen


class CartScreen(BaseScreen):
    template_name = "cart.html"

    def context(self) -> Dict[str, Any]:
        return {
            "lines": self._cart_lines(),
            "is_empty": self.cart_manager.is_empty(),
            "subtotal": self.cart_manager.get_subtotal(),
            "tax": self.cart_manager.get_tax(),
            "total": self.cart_manager.get_total(),
        }

    async def change_quantity(self, item_id: str, delta: int) -> None:
        item = self.cart_manager.get_item(item_id)
        current = item.quantity if item else 0
        await self.app.dispatch(UpdateCart(item_id=item_id, quantity=current + delta))

    async def remove(self, item_id: str) -> None:
        await self.app.dispatch(RemoveFromCart(item_id=item_id))

    async def clear(self) -> None:
        await self.app.dispatch(ClearCart())

    async def checkout(self) -> bool:
        if self.cart_manager.is_empty():
            return False
        await self.navigate("payment")
        return True

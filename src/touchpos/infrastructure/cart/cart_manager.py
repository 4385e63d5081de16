"""In-memory cart persisted through the storage manager."""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional

from touchpos.application.ports.collaborators import StoragePort
from touchpos.core.errors import CartError

from .models import CartItem, round_money, to_decimal

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "cart"


def _as_quantity(value: Any, item_id: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise CartError(
            message=f"quantity must be an integer, got {value!r}",
            context={"item_id": item_id},
        ) from e


class CartManager:
    """
    Cart lines keyed by product id.

    Every mutation is written back to storage and reported to listeners.
    """

    def __init__(self, default_tax_rate: float = 0.1):
        self._items: Dict[str, CartItem] = {}
        self._storage: Optional[StoragePort] = None
        self._listeners: List[Callable[["CartManager"], None]] = []
        self._default_tax_rate = to_decimal(default_tax_rate)

    async def init(self, storage: StoragePort) -> None:
        """Restore persisted lines; corrupted entries are dropped."""
        self._storage = storage
        self._items = {}
        for raw in storage.get(CART_STORAGE_KEY, []) or []:
            try:
                item = CartItem.from_dict(raw)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Dropping corrupted cart line {raw!r}: {e}")
                continue
            self._items[item.item_id] = item

        settings_getter = getattr(storage, "get_settings", None)
        if callable(settings_getter):
            rate = settings_getter().get("tax_rate")
            if rate is not None:
                self._default_tax_rate = to_decimal(rate)
        logger.info(f"Cart restored with {len(self._items)} line(s)")

    # ------------------ mutations ------------------
    def add_item(self, product: Dict[str, Any]) -> CartItem:
        if not product or not product.get("id"):
            raise CartError(message="product must carry an 'id'")
        quantity = _as_quantity(product.get("quantity", 1), product["id"])
        if quantity < 1:
            raise CartError(message="quantity must be a positive integer", context={"item_id": product["id"]})

        item_id = str(product["id"])
        existing = self._items.get(item_id)
        if existing:
            existing.quantity += quantity
            item = existing
        else:
            item = CartItem.from_product(product)
            self._items[item_id] = item

        self._changed()
        return item

    def update_quantity(self, item_id: str, quantity: int) -> Optional[CartItem]:
        """Set a line's quantity; zero or less removes the line."""
        if item_id not in self._items:
            raise CartError(message=f"Item not in cart: {item_id}", context={"item_id": item_id})
        quantity = _as_quantity(quantity, item_id)
        if quantity <= 0:
            self.remove_item(item_id)
            return None

        item = self._items[item_id]
        item.quantity = quantity
        self._changed()
        return item

    def remove_item(self, item_id: str) -> bool:
        removed = self._items.pop(item_id, None) is not None
        if removed:
            self._changed()
        return removed

    def clear(self) -> None:
        self._items.clear()
        self._changed()

    # ------------------ queries ------------------
    def get_items(self) -> List[CartItem]:
        return list(self._items.values())

    def get_item(self, item_id: str) -> Optional[CartItem]:
        return self._items.get(item_id)

    def get_item_count(self) -> int:
        return sum(item.quantity for item in self._items.values())

    def is_empty(self) -> bool:
        return not self._items

    def get_subtotal(self) -> Decimal:
        return round_money(sum((item.total_price for item in self._items.values()), Decimal("0")))

    def get_tax(self, rate: Optional[float] = None) -> Decimal:
        tax_rate = self._default_tax_rate if rate is None else to_decimal(rate)
        return round_money(self.get_subtotal() * tax_rate)

    def get_total(self, rate: Optional[float] = None) -> Decimal:
        return round_money(self.get_subtotal() + self.get_tax(rate))

    def generate_receipt_data(self, rate: Optional[float] = None) -> Dict[str, Any]:
        tax_rate = self._default_tax_rate if rate is None else to_decimal(rate)
        return {
            "items": [
                {
                    "item_id": item.item_id,
                    "name": item.name,
                    "quantity": item.quantity,
                    "unit_price": str(item.unit_price),
                    "total": str(item.total_price),
                }
                for item in self._items.values()
            ],
            "item_count": self.get_item_count(),
            "subtotal": str(self.get_subtotal()),
            "tax_rate": str(tax_rate),
            "tax": str(self.get_tax(tax_rate)),
            "total": str(self.get_total(tax_rate)),
        }

    # ------------------ listeners ------------------
    def add_listener(self, callback: Callable[["CartManager"], None]) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[["CartManager"], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _changed(self) -> None:
        if self._storage is not None:
            self._storage.set(CART_STORAGE_KEY, [item.to_dict() for item in self._items.values()])
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logger.error(f"Cart listener error: {e}")

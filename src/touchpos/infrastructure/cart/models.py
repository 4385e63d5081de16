"""Cart line model with Decimal-based pricing."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, Union

MONEY_PRECISION = Decimal("0.01")


def to_decimal(value: Union[str, int, float, Decimal, None]) -> Decimal:
    """Convert via string to avoid float artifacts; invalid input becomes 0."""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Union[str, int, float, Decimal]) -> Decimal:
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


@dataclass
class CartItem:
    """Single line in the cart."""
    item_id: str
    name: str
    unit_price: Decimal
    quantity: int = 1
    category: str = ""
    added_at: str = field(default="")

    def __post_init__(self):
        if not self.added_at:
            self.added_at = datetime.now(timezone.utc).isoformat()
        self.unit_price = round_money(self.unit_price)

    @property
    def total_price(self) -> Decimal:
        return round_money(self.unit_price * self.quantity)

    @classmethod
    def from_product(cls, product: Dict[str, Any]) -> "CartItem":
        return cls(
            item_id=str(product["id"]),
            name=str(product.get("name", product["id"])),
            unit_price=to_decimal(product.get("price", 0)),
            quantity=int(product.get("quantity", 1)),
            category=str(product.get("category", "")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item_id": self.item_id,
            "name": self.name,
            "unit_price": str(self.unit_price),
            "quantity": self.quantity,
            "category": self.category,
            "added_at": self.added_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartItem":
        return cls(
            item_id=data["item_id"],
            name=data.get("name", data["item_id"]),
            unit_price=to_decimal(data.get("unit_price")),
            quantity=int(data.get("quantity", 1)),
            category=data.get("category", ""),
            added_at=data.get("added_at", ""),
        )

"""Cart package: line model and manager."""
from .models import CartItem, to_decimal, round_money
from .cart_manager import CartManager, CART_STORAGE_KEY

__all__ = [
    "CartItem",
    "CartManager",
    "CART_STORAGE_KEY",
    "to_decimal",
    "round_money",
]

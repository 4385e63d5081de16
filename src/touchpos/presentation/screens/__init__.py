from .base import BaseScreen, get_environment, format_price
from .home import HomeScreen
from .products import ProductsScreen
from .cart import CartScreen
from .payment import PaymentScreen
from .themes import RestaurantHomeScreen, ExpressHomeScreen, OblivionHomeScreen

__all__ = [
    "BaseScreen",
    "get_environment",
    "format_price",
    "HomeScreen",
    "ProductsScreen",
    "CartScreen",
    "PaymentScreen",
    "RestaurantHomeScreen",
    "ExpressHomeScreen",
    "OblivionHomeScreen",
]

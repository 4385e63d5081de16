"""
Screen rendering and screen actions against a fully wired coordinator
"""

from decimal import Decimal

import pytest

from touchpos.presentation.screens import (
    CartScreen,
    HomeScreen,
    PaymentScreen,
    ProductsScreen,
    RestaurantHomeScreen,
    format_price,
)
from touchpos.presentation.screens.payment import LAST_RECEIPT_KEY


@pytest.fixture
async def app(real_coordinator):
    result = await real_coordinator.init()
    assert result.is_ok()
    return real_coordinator


def test_format_price():
    assert format_price(Decimal("2.50")) == "$2.50"
    assert format_price("3.10", "EUR") == "EUR 3.10"


class TestHomeScreen:

    async def test_initial_mount(self, app):
        html = app.container.inner_html
        assert "home-screen" in html
        assert "evolution-theme" in html
        assert 'data-category="coffee"' in html
        assert app.container.title == "Home - POS System"

    async def test_open_tile_navigates(self, app):
        screen = HomeScreen(app)

        assert await screen.open_tile("cart") is True
        assert app.get_current_screen() == "cart"
        assert await screen.open_tile("teleport") is False

    async def test_search_navigates_with_query(self, app):
        screen = HomeScreen(app)

        assert await screen.search("  latte ") is True
        assert app.get_current_screen() == "products"
        assert app.screen_manager.get_current_screen().data == {"search": "latte"}
        assert await screen.search("   ") is False

    async def test_open_category(self, app):
        await HomeScreen(app).open_category("bakery")
        html = app.container.inner_html
        assert "Croissant" in html
        assert "Espresso" not in html


class TestProductsScreen:

    async def test_search_filters_by_name_and_barcode(self, app):
        by_name = ProductsScreen(app, {"search": "MUFFIN"})
        by_barcode = ProductsScreen(app, {"search": "400300"})

        assert [p["id"] for p in by_name.filtered_products()] == ["p-muffin"]
        assert [p["id"] for p in by_barcode.filtered_products()] == ["p-lemonade"]

    async def test_empty_result_renders_empty_state(self, app):
        html = await ProductsScreen(app, {"search": "pizza"}).render()
        assert "No products found" in html

    async def test_select_product_adds_to_cart(self, app):
        screen = ProductsScreen(app)

        assert await screen.select_product("p-latte") is True
        assert await screen.select_product("p-latte") is True

        assert app.cart_manager.get_item("p-latte").quantity == 2

    async def test_select_unknown_product(self, app):
        assert await ProductsScreen(app).select_product("p-ghost") is False
        assert app.cart_manager.is_empty()


class TestCartScreen:

    async def test_render_shows_totals(self, app):
        await ProductsScreen(app).select_product("p-espresso")

        html = await CartScreen(app).render()

        assert "Espresso" in html
        assert "$2.50" in html
        assert "$0.25" in html
        assert "$2.75" in html

    async def test_change_quantity_and_remove(self, app):
        await ProductsScreen(app).select_product("p-espresso")
        screen = CartScreen(app)

        await screen.change_quantity("p-espresso", 2)
        assert app.cart_manager.get_item("p-espresso").quantity == 3

        await screen.change_quantity("p-espresso", -3)
        assert app.cart_manager.is_empty()

    async def test_clear(self, app):
        await ProductsScreen(app).select_product("p-espresso")
        await CartScreen(app).clear()
        assert app.cart_manager.is_empty()

    async def test_checkout_requires_items(self, app):
        screen = CartScreen(app)
        assert await screen.checkout() is False
        assert app.get_current_screen() == "home"

        await ProductsScreen(app).select_product("p-croissant")
        assert await screen.checkout() is True
        assert app.get_current_screen() == "payment"
        assert "payment-screen" in app.container.inner_html


class TestPaymentScreen:

    async def test_complete_payment(self, app):
        await ProductsScreen(app).select_product("p-lemonade")
        screen = PaymentScreen(app)

        receipt = await screen.complete_payment("cash")

        assert receipt["method"] == "cash"
        assert receipt["total"] == "3.41"
        assert app.storage_manager.get(LAST_RECEIPT_KEY)["total"] == "3.41"
        assert app.cart_manager.is_empty()
        assert app.get_current_screen() == "home"

    async def test_rejects_unknown_method(self, app):
        await ProductsScreen(app).select_product("p-lemonade")
        assert await PaymentScreen(app).complete_payment("barter") is None
        assert not app.cart_manager.is_empty()

    async def test_empty_cart_cannot_be_paid(self, app):
        assert await PaymentScreen(app).complete_payment() is None


class TestThemeScreens:

    async def test_theme_screen_marks_active_button(self, app):
        html = await RestaurantHomeScreen(app).render()
        assert "restaurant-theme" in html
        assert 'class="theme-btn active" data-theme="restaurant"' in html

    async def test_switch_theme_from_screen(self, app):
        result = await HomeScreen(app).switch_theme("express")

        assert result.is_ok()
        assert "express-theme" in app.container.inner_html
        assert app.state.active_theme == "express"

    async def test_theme_add_product(self, app):
        screen = RestaurantHomeScreen(app)
        assert await screen.add_product("p-muffin") is True
        assert await screen.add_product("nope") is False
        assert app.cart_manager.get_item_count() == 1

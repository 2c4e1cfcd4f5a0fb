"""Unit tests for the Cart working set."""

import pytest

from shopbook.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    OutOfStockError,
    ValidationError,
)
from shopbook.domain.model.cart import Cart
from shopbook.domain.model.product import Product
from shopbook.domain.model.value_objects import Money


def _catalog() -> list[Product]:
    return [
        Product(id="A", name="Alpha", sku="A", price=Money(1000), stock=2),
        Product(id="B", name="Beta", sku="B", price=Money(500), stock=0),
        Product(id="C", name="Gamma", sku="C", price=Money(200), stock=50),
    ]


class TestAddProduct:

    def test_new_line_starts_at_one(self):
        cart = Cart()
        cart.add_product("A", _catalog())
        assert len(cart) == 1
        assert cart.lines[0].product_id == "A"
        assert cart.lines[0].quantity == 1

    def test_adding_twice_increments_up_to_stock(self):
        products = _catalog()
        cart = Cart()
        cart.add_product("A", products)
        cart.add_product("A", products)
        assert len(cart) == 1
        assert cart.lines[0].quantity == 2

    def test_increment_beyond_stock_rejected(self):
        products = _catalog()
        cart = Cart()
        cart.add_product("A", products)
        cart.add_product("A", products)
        with pytest.raises(InsufficientStockError):
            cart.add_product("A", products)
        assert cart.lines[0].quantity == 2

    def test_out_of_stock_rejected(self):
        cart = Cart()
        with pytest.raises(OutOfStockError, match="Beta is out of stock"):
            cart.add_product("B", _catalog())
        assert cart.is_empty

    def test_unknown_product_rejected(self):
        with pytest.raises(EntityNotFoundError):
            Cart().add_product("Z", _catalog())

    def test_does_not_touch_stock(self):
        products = _catalog()
        cart = Cart()
        cart.add_product("A", products)
        assert products[0].stock == 2

    def test_lines_keep_insertion_order(self):
        products = _catalog()
        cart = Cart()
        cart.add_product("C", products)
        cart.add_product("A", products)
        assert [line.product_id for line in cart.lines] == ["C", "A"]


class TestSetQuantity:

    def test_sets_quantity_within_stock(self):
        products = _catalog()
        cart = Cart()
        cart.add_product("C", products)
        cart.set_quantity(0, 40, products)
        assert cart.lines[0].quantity == 40

    def test_above_stock_rejected_and_unchanged(self):
        products = _catalog()
        cart = Cart()
        cart.add_product("A", products)
        with pytest.raises(InsufficientStockError, match="Only 2"):
            cart.set_quantity(0, 3, products)
        assert cart.lines[0].quantity == 1

    @pytest.mark.parametrize("qty", [0, -4])
    def test_below_one_is_silent_noop(self, qty):
        products = _catalog()
        cart = Cart()
        cart.add_product("C", products)
        cart.set_quantity(0, 5, products)
        cart.set_quantity(0, qty, products)
        assert cart.lines[0].quantity == 5
        assert len(cart) == 1

    def test_bad_index_rejected(self):
        with pytest.raises(ValidationError, match="No cart line"):
            Cart().set_quantity(0, 1, _catalog())

    def test_uses_current_stock(self):
        products = _catalog()
        cart = Cart()
        cart.add_product("C", products)
        products[2].stock = 3
        with pytest.raises(InsufficientStockError):
            cart.set_quantity(0, 4, products)


class TestRemoveLine:

    def test_removes_line(self):
        products = _catalog()
        cart = Cart()
        cart.add_product("A", products)
        cart.add_product("C", products)
        removed = cart.remove_line(0)
        assert removed.product_id == "A"
        assert [line.product_id for line in cart.lines] == ["C"]

    def test_bad_index_rejected(self):
        with pytest.raises(ValidationError):
            Cart().remove_line(3)


class TestEstimatedTotal:

    def test_uses_current_prices(self):
        products = _catalog()
        cart = Cart()
        cart.add_product("A", products)
        cart.add_product("C", products)
        cart.set_quantity(1, 5, products)
        assert cart.estimated_total(products) == 1000 + 5 * 200

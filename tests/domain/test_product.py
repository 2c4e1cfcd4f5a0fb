"""Unit tests for the Product aggregate."""

import pytest

from shopbook.domain.exceptions import InsufficientStockError, ValidationError
from shopbook.domain.model.product import Product
from shopbook.domain.model.value_objects import Money


def _product(stock: int = 10, price: int = 1000) -> Product:
    return Product(id="1", name="Widget", sku="W-1", price=Money(price), stock=stock)


class TestProductCreate:

    def test_create_strips_text_fields(self):
        p = Product.create("1", "  Widget ", " W-1 ", Money(500), 3)
        assert p.name == "Widget"
        assert p.sku == "W-1"

    def test_create_requires_name(self):
        with pytest.raises(ValidationError, match="Product name is required"):
            Product.create("1", "", "W-1", Money(500), 3)

    def test_create_requires_sku(self):
        with pytest.raises(ValidationError, match="SKU is required"):
            Product.create("1", "Widget", " ", Money(500), 3)

    def test_create_rejects_negative_stock(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create("1", "Widget", "W-1", Money(500), -1)


class TestProductStock:

    def test_remove_stock(self):
        p = _product(stock=10)
        p.remove_stock(4)
        assert p.stock == 6

    def test_remove_all_stock(self):
        p = _product(stock=2)
        p.remove_stock(2)
        assert p.stock == 0

    def test_remove_more_than_stock_rejected(self):
        p = _product(stock=2)
        with pytest.raises(InsufficientStockError, match="need 3, have 2"):
            p.remove_stock(3)
        assert p.stock == 2

    def test_remove_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _product().remove_stock(0)

    def test_set_stock_rejects_negative(self):
        with pytest.raises(ValidationError):
            _product().set_stock(-5)


class TestProductDerived:

    def test_inventory_value(self):
        assert _product(stock=3, price=250).inventory_value == Money(750)

    def test_low_stock_threshold(self):
        assert _product(stock=9).is_low_stock
        assert not _product(stock=10).is_low_stock

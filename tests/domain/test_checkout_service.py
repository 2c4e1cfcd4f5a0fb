"""Unit tests for the checkout domain service."""

import copy
from datetime import datetime, timezone

import pytest

from shopbook.domain.exceptions import (
    EmptyCartError,
    EntityNotFoundError,
    InsufficientStockError,
    UnknownCustomerError,
)
from shopbook.domain.model.cart import Cart, CartLine
from shopbook.domain.model.customer import Customer
from shopbook.domain.model.product import Product
from shopbook.domain.model.sale import SaleStatus
from shopbook.domain.model.value_objects import Money
from shopbook.domain.service.checkout_service import checkout

NOW = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


def _products() -> list[Product]:
    return [
        Product(id="A", name="Alpha", sku="A", price=Money(1000), stock=2),
        Product(id="B", name="Beta", sku="B", price=Money(300), stock=10),
        Product(id="C", name="Gamma", sku="C", price=Money(50), stock=7),
    ]


def _customers() -> list[Customer]:
    return [Customer(id="C1", name="John Doe")]


class TestCheckoutHappyPath:

    def test_scenario_two_units_sell_out_stock(self):
        cart = Cart([CartLine("A", 2)])
        result = checkout(cart, "C1", _customers(), _products(), "S1", NOW)

        assert result.sale.total_amount == Money(2000)
        alpha = next(p for p in result.products if p.id == "A")
        assert alpha.stock == 0

    def test_sale_fields(self):
        cart = Cart([CartLine("A", 1), CartLine("B", 3)])
        sale = checkout(cart, "C1", _customers(), _products(), "S1", NOW).sale

        assert sale.id == "S1"
        assert sale.status == SaleStatus.PENDING
        assert sale.date == NOW
        assert sale.customer_name == "John Doe"
        assert [i.product_id for i in sale.items] == ["A", "B"]
        assert sale.total_amount == sum(
            (i.price_at_sale * i.quantity.value for i in sale.items), Money(0)
        )

    def test_only_sold_products_change(self):
        cart = Cart([CartLine("B", 4)])
        result = checkout(cart, "C1", _customers(), _products(), "S1", NOW)
        assert [p.stock for p in result.products] == [2, 6, 7]

    def test_inputs_are_not_mutated(self):
        products = _products()
        before = copy.deepcopy(products)
        checkout(Cart([CartLine("B", 4)]), "C1", _customers(), products, "S1", NOW)
        assert products == before

    def test_price_taken_at_checkout(self):
        products = _products()
        cart = Cart()
        cart.add_product("B", products)
        products[1].update_price(Money(450))

        sale = checkout(cart, "C1", _customers(), products, "S1", NOW).sale
        assert sale.items[0].price_at_sale == Money(450)


class TestCheckoutRejections:

    def test_unknown_customer(self):
        with pytest.raises(UnknownCustomerError):
            checkout(Cart([CartLine("A", 1)]), "nope", _customers(), _products(), "S1", NOW)

    def test_empty_cart(self):
        with pytest.raises(EmptyCartError):
            checkout(Cart(), "C1", _customers(), _products(), "S1", NOW)

    def test_stale_cart_exceeding_stock(self):
        with pytest.raises(InsufficientStockError, match="Alpha"):
            checkout(Cart([CartLine("A", 3)]), "C1", _customers(), _products(), "S1", NOW)

    def test_duplicate_lines_are_summed_against_stock(self):
        cart = Cart([CartLine("A", 1), CartLine("A", 2)])
        with pytest.raises(InsufficientStockError, match="need 3, have 2"):
            checkout(cart, "C1", _customers(), _products(), "S1", NOW)

    def test_product_removed_from_catalog(self):
        with pytest.raises(EntityNotFoundError):
            checkout(Cart([CartLine("Z", 1)]), "C1", _customers(), _products(), "S1", NOW)

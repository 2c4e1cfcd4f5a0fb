"""Domain service: Checkout.

Turns a cart into a sale and the catalog that results from selling it.
It lives in the domain layer because the stock rule (never below zero)
is a core business rule, not just orchestration.

The two-phase approach (validate-then-build) ensures no product copy is
decremented unless every line in the cart can be satisfied. Inputs are
never mutated; the caller persists the returned sale and catalog
together.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from shopbook.domain.exceptions import (
    EmptyCartError,
    EntityNotFoundError,
    InsufficientStockError,
    UnknownCustomerError,
)
from shopbook.domain.model.cart import Cart
from shopbook.domain.model.customer import Customer
from shopbook.domain.model.product import Product
from shopbook.domain.model.sale import Sale, SaleItem


@dataclass(frozen=True)
class CheckoutResult:
    sale: Sale
    products: list[Product]


def find_customer(customer_id: str, customers: list[Customer]) -> Customer:
    for customer in customers:
        if customer.id == customer_id:
            return customer
    raise UnknownCustomerError(f"Customer with ID '{customer_id}' not found")


def checkout(
    cart: Cart,
    customer_id: str,
    customers: list[Customer],
    products: list[Product],
    sale_id: str,
    now: datetime,
) -> CheckoutResult:
    """Build the sale for ``cart`` and the post-sale catalog.

    Phase 1, resolve and validate: the customer must exist, the cart
    must not be empty, and every product must have enough stock for the
    quantity requested across all of its lines.
    Phase 2, build: snapshot current names and prices into sale items
    and decrement stock on copies of the affected products.
    """
    customer = find_customer(customer_id, customers)
    if cart.is_empty:
        raise EmptyCartError("Cart is empty")

    # Phase 1: resolve products and validate stock
    by_id = {p.id: p for p in products}
    requested: dict[str, int] = {}
    for line in cart.lines:
        if line.product_id not in by_id:
            raise EntityNotFoundError(
                f"Product with ID '{line.product_id}' not found"
            )
        requested[line.product_id] = requested.get(line.product_id, 0) + line.quantity

    for product_id, qty in requested.items():
        product = by_id[product_id]
        if product.stock - qty < 0:
            raise InsufficientStockError(
                f"Insufficient stock for {product.name} "
                f"(need {qty}, have {product.stock})"
            )

    # Phase 2: snapshot line items and decrement stock on copies
    items = [
        SaleItem.snapshot(by_id[line.product_id], line.quantity)
        for line in cart.lines
    ]
    sale = Sale.create(sale_id=sale_id, customer=customer, items=items, date=now)

    updated: list[Product] = []
    for product in products:
        copy = replace(product)
        if product.id in requested:
            copy.remove_stock(requested[product.id])
        updated.append(copy)

    return CheckoutResult(sale=sale, products=updated)

"""Application service: Build Cart use case.

Assembles a cart from a list of (product id, quantity) requests the way
a cashier would: add the product once, then set the requested quantity.
Every step runs the cart's stock checks against the current catalog.
"""

from __future__ import annotations

from shopbook.application.dto import CartItemSpec
from shopbook.domain.exceptions import ValidationError
from shopbook.domain.model.cart import Cart
from shopbook.domain.repository.product_repository import ProductRepository


class BuildCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, item_specs: list[CartItemSpec]) -> Cart:
        products = self._product_repo.list_all()
        cart = Cart()

        for spec in item_specs:
            if spec.quantity < 1:
                raise ValidationError(
                    f"Quantity for product '{spec.product_id}' must be positive"
                )
            line = cart.add_product(spec.product_id, products)
            index = cart.lines.index(line)
            # Repeated specs for one product accumulate on the same line
            cart.set_quantity(index, line.quantity - 1 + spec.quantity, products)

        return cart

"""Cart — the transient working set assembled before checkout.

A cart only records *which* products and *how many*. Names and prices are
read from the catalog at checkout, so a cart never carries stale prices
into a sale. Stock is checked on every change but never modified here.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopbook.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    OutOfStockError,
    ValidationError,
)
from shopbook.domain.model.product import Product


@dataclass
class CartLine:
    product_id: str
    quantity: int = 1


@dataclass
class Cart:
    """Ordered list of cart lines, at most one line per product."""

    lines: list[CartLine] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def add_product(self, product_id: str, products: list[Product]) -> CartLine:
        """Add one unit of a product.

        An existing line grows by one as long as it stays within stock;
        a new line starts at one unit and needs at least one in stock.
        """
        product = _find_product(product_id, products)
        line = self._find_line(product_id)

        if line is not None:
            if line.quantity + 1 > product.stock:
                raise InsufficientStockError(
                    f"Not enough stock for {product.name} "
                    f"(only {product.stock} available)"
                )
            line.quantity += 1
            return line

        if product.stock <= 0:
            raise OutOfStockError(f"{product.name} is out of stock")
        line = CartLine(product_id=product.id, quantity=1)
        self.lines.append(line)
        return line

    def set_quantity(self, index: int, quantity: int, products: list[Product]) -> None:
        """Set a line's quantity.

        Quantities below one are ignored; removing a line goes through
        ``remove_line``.
        """
        line = self._line_at(index)
        product = _find_product(line.product_id, products)
        if quantity > product.stock:
            raise InsufficientStockError(
                f"Only {product.stock} of {product.name} available"
            )
        if quantity < 1:
            return
        line.quantity = quantity

    def remove_line(self, index: int) -> CartLine:
        self._line_at(index)
        return self.lines.pop(index)

    def clear(self) -> None:
        self.lines.clear()

    def estimated_total(self, products: list[Product]) -> int:
        """Running total at current catalog prices, for display only."""
        return sum(
            _find_product(line.product_id, products).price.amount * line.quantity
            for line in self.lines
        )

    # --- Internal helpers -----------------------------------------------------

    def _find_line(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def _line_at(self, index: int) -> CartLine:
        if not 0 <= index < len(self.lines):
            raise ValidationError(f"No cart line at position {index}")
        return self.lines[index]


def _find_product(product_id: str, products: list[Product]) -> Product:
    for product in products:
        if product.id == product_id:
            return product
    raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

"""Product aggregate.

Products live independently of sales. They have their own lifecycle:
prices change, stock is counted, products are added and removed from
the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopbook.domain.exceptions import InsufficientStockError, ValidationError
from shopbook.domain.model.value_objects import Money, require_stock, require_text

LOW_STOCK_THRESHOLD = 10


@dataclass
class Product:
    """A product in the catalog.

    Invariant: ``stock`` is never negative. The only way stock goes down
    is ``remove_stock()``, which refuses to cross zero.
    """

    id: str
    name: str
    sku: str
    price: Money
    stock: int = 0

    @staticmethod
    def create(product_id: str, name: str, sku: str, price: Money, stock: int) -> Product:
        """Build a new catalog entry, validating every field."""
        return Product(
            id=product_id,
            name=require_text(name, "Product name"),
            sku=require_text(sku, "SKU"),
            price=price,
            stock=require_stock(stock),
        )

    @property
    def inventory_value(self) -> Money:
        return self.price * self.stock

    @property
    def is_low_stock(self) -> bool:
        return self.stock < LOW_STOCK_THRESHOLD

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing sales because sales
        capture a price snapshot at checkout time.
        """
        self.price = new_price

    def set_stock(self, quantity: int) -> None:
        self.stock = require_stock(quantity)

    def remove_stock(self, quantity: int) -> None:
        """Deduct sold units from stock."""
        if quantity <= 0:
            raise ValidationError("Stock deduction must be positive")
        if quantity > self.stock:
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(need {quantity}, have {self.stock})"
            )
        self.stock -= quantity

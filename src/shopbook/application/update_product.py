"""Application service: Update Product use case."""

from __future__ import annotations

import logging
import threading

from shopbook.domain.exceptions import EntityNotFoundError, ValidationError
from shopbook.domain.model.product import Product
from shopbook.domain.model.value_objects import Money, require_text
from shopbook.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        lock: threading.RLock | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._lock = lock or threading.RLock()

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        sku: str | None = None,
        price: str | int | None = None,
        stock: int | None = None,
    ) -> Product:
        """Edit a catalog entry.

        This does NOT affect any existing sales; they captured a
        name and price snapshot at checkout.
        """
        with self._lock:
            products = self._product_repo.list_all()
            product = _find(products, product_id)

            if name is not None:
                product.name = require_text(name, "Product name")
            if sku is not None:
                new_sku = require_text(sku, "SKU")
                if any(p.sku == new_sku and p.id != product_id for p in products):
                    raise ValidationError(f"SKU '{new_sku}' already exists")
                product.sku = new_sku
            if price is not None:
                product.update_price(Money.of(price))
            if stock is not None:
                product.set_stock(stock)

            self._product_repo.replace_all(products)

        logger.info("Product %s updated", product_id)
        return product


def _find(products: list[Product], product_id: str) -> Product:
    for product in products:
        if product.id == product_id:
            return product
    raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

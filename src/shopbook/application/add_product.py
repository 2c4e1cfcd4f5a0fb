"""Application service: Add Product use case."""

from __future__ import annotations

import logging
import threading

from shopbook.application.ids import next_numeric_id
from shopbook.domain.exceptions import ValidationError
from shopbook.domain.model.product import Product
from shopbook.domain.model.value_objects import Money
from shopbook.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        lock: threading.RLock | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._lock = lock or threading.RLock()

    def handle(self, name: str, sku: str, price: str | int, stock: int = 0) -> Product:
        """Add a new product to the catalog."""
        with self._lock:
            products = self._product_repo.list_all()

            # SKU comparison is case-sensitive
            if any(p.sku == sku.strip() for p in products):
                raise ValidationError(f"SKU '{sku.strip()}' already exists")

            product = Product.create(
                product_id=next_numeric_id(p.id for p in products),
                name=name,
                sku=sku,
                price=Money.of(price),
                stock=stock,
            )
            self._product_repo.replace_all([*products, product])

        logger.info("Product %s '%s' added", product.id, product.name)
        return product

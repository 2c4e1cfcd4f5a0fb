"""Application service: List Products use case (query)."""

from __future__ import annotations

from shopbook.domain.model.product import Product
from shopbook.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, search: str | None = None) -> list[Product]:
        """Every product, optionally filtered by a case-insensitive
        substring of its name or SKU."""
        products = self._product_repo.list_all()
        if not search:
            return products
        term = search.lower()
        return [
            p for p in products
            if term in p.name.lower() or term in p.sku.lower()
        ]

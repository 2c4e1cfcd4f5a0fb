"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer.

The catalog is read and written as a whole collection: callers load
everything, compute the new collection and hand it back in one piece.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopbook.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in stored order."""

    @abstractmethod
    def replace_all(self, products: list[Product]) -> None:
        """Replace the stored catalog with ``products``."""

"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pathlib import Path

from shopbook.domain.exceptions import ValidationError
from shopbook.domain.model.product import Product
from shopbook.domain.model.value_objects import Money, require_stock
from shopbook.domain.repository.product_repository import ProductRepository
from shopbook.infrastructure.persistence.json_file import JsonFile, StorageError
from shopbook.infrastructure.persistence.seed_data import SEED_PRODUCTS


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, default=SEED_PRODUCTS)

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def replace_all(self, products: list[Product]) -> None:
        self._file.save([self._to_raw(p) for p in products])

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "sku": product.sku,
            "price": product.price.amount,
            "stock": product.stock,
        }

    def _to_domain(self, raw: dict) -> Product:
        try:
            return Product(
                id=str(raw["id"]),
                name=raw["name"],
                sku=raw["sku"],
                price=Money(_whole_number(raw["price"])),
                stock=require_stock(_whole_number(raw["stock"])),
            )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise StorageError(f"Malformed product record in {self._file.path}: {raw!r}") from exc


def _whole_number(value: int | float | str) -> int:
    # 5.0 reads as 5; 5.5 is rejected
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{value!r} is not a whole number")
        return int(value)
    return int(value)

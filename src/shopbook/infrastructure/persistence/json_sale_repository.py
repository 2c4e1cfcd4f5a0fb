"""JSON-file-backed implementation of SaleRepository."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from shopbook.domain.exceptions import ValidationError
from shopbook.domain.model.sale import Sale, SaleItem, SaleStatus
from shopbook.domain.model.value_objects import Money, Quantity
from shopbook.domain.repository.sale_repository import SaleRepository
from shopbook.infrastructure.persistence.json_file import JsonFile, StorageError


class JsonSaleRepository(SaleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, default=[])

    # --- SaleRepository interface ---------------------------------------------

    def list_all(self) -> list[Sale]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def replace_all(self, sales: list[Sale]) -> None:
        self._file.save([self._to_raw(s) for s in sales])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(sale: Sale) -> dict:
        return {
            "id": sale.id,
            "customerId": sale.customer_id,
            "customerName": sale.customer_name,
            "date": sale.date.isoformat(),
            "items": [
                {
                    "productId": item.product_id,
                    "productName": item.product_name,
                    "quantity": item.quantity.value,
                    "priceAtSale": item.price_at_sale.amount,
                    "total": item.total.amount,
                }
                for item in sale.items
            ],
            "totalAmount": sale.total_amount.amount,
            "status": sale.status.value,
        }

    def _to_domain(self, raw: dict) -> Sale:
        try:
            items = tuple(
                SaleItem(
                    product_id=str(i["productId"]),
                    product_name=i["productName"],
                    quantity=Quantity(int(i["quantity"])),
                    price_at_sale=Money(int(i["priceAtSale"])),
                )
                for i in raw["items"]
            )
            return Sale(
                id=str(raw["id"]),
                customer_id=str(raw["customerId"]),
                customer_name=raw["customerName"],
                items=items,
                total_amount=Money(int(raw["totalAmount"])),
                status=SaleStatus(raw["status"]),
                date=_parse_timestamp(raw["date"]),
            )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise StorageError(f"Malformed sale record in {self._file.path}: {raw!r}") from exc


def _parse_timestamp(value: str) -> datetime:
    # Accept the "Z" suffix written by JavaScript's toISOString()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment

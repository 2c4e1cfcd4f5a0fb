"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

from pathlib import Path

from shopbook.domain.model.customer import Customer
from shopbook.domain.repository.customer_repository import CustomerRepository
from shopbook.infrastructure.persistence.json_file import JsonFile, StorageError
from shopbook.infrastructure.persistence.seed_data import SEED_CUSTOMERS


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, default=SEED_CUSTOMERS)

    def list_all(self) -> list[Customer]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def replace_all(self, customers: list[Customer]) -> None:
        self._file.save([self._to_raw(c) for c in customers])

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "id": customer.id,
            "name": customer.name,
            "email": customer.email,
            "phone": customer.phone,
            "address": customer.address,
        }

    def _to_domain(self, raw: dict) -> Customer:
        try:
            return Customer(
                id=str(raw["id"]),
                name=raw["name"],
                email=raw.get("email", ""),
                phone=raw.get("phone", ""),
                address=raw.get("address", ""),
            )
        except (KeyError, TypeError) as exc:
            raise StorageError(f"Malformed customer record in {self._file.path}: {raw!r}") from exc

"""Customer aggregate.

Customers are referenced by sales through their id, but sales keep their
own copy of the customer name, so editing or deleting a customer never
rewrites history.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopbook.domain.model.value_objects import require_text


@dataclass
class Customer:

    id: str
    name: str
    email: str = ""
    phone: str = ""
    address: str = ""

    @staticmethod
    def create(
        customer_id: str,
        name: str,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> Customer:
        """Create a customer; only the name is mandatory."""
        return Customer(
            id=customer_id,
            name=require_text(name, "Customer name"),
            email=(email or "").strip(),
            phone=(phone or "").strip(),
            address=(address or "").strip(),
        )

    def rename(self, name: str) -> None:
        self.name = require_text(name, "Customer name")

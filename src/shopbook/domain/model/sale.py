"""Sale aggregate — the invoice record produced by checkout.

A Sale owns its line items. Items carry snapshots of the product name and
price taken at checkout, and the sale carries a snapshot of the customer
name, so a sale reads the same no matter what later happens to the
catalog or the customer roster.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from shopbook.domain.exceptions import EmptyCartError, ValidationError
from shopbook.domain.model.customer import Customer
from shopbook.domain.model.product import Product
from shopbook.domain.model.value_objects import Money, Quantity, require_text


class SaleStatus(Enum):
    PENDING = "PENDING"
    PAID = "PAID"

    def toggled(self) -> SaleStatus:
        return SaleStatus.PAID if self is SaleStatus.PENDING else SaleStatus.PENDING


@dataclass(frozen=True)
class SaleItem:
    """One invoiced line. Never changes once the sale exists."""

    product_id: str
    product_name: str
    quantity: Quantity
    price_at_sale: Money  # locked at checkout time

    @staticmethod
    def snapshot(product: Product, quantity: int) -> SaleItem:
        return SaleItem(
            product_id=product.id,
            product_name=product.name,
            quantity=Quantity(quantity),
            price_at_sale=product.price,
        )

    @property
    def total(self) -> Money:
        return self.price_at_sale * self.quantity.value


@dataclass
class Sale:
    """Aggregate root for sales invoices.

    Use ``Sale.create()`` for new sales; it computes the total from the
    line items. The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted sales (including ones whose
    total was corrected by hand) without re-validating.
    """

    id: str
    customer_id: str
    customer_name: str
    items: tuple[SaleItem, ...]
    total_amount: Money
    status: SaleStatus = SaleStatus.PENDING
    date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW sales only) ------------------------------------

    @staticmethod
    def create(
        sale_id: str,
        customer: Customer,
        items: list[SaleItem],
        date: datetime,
    ) -> Sale:
        """Create a new pending sale; the total is the sum of line totals."""
        if not items:
            raise EmptyCartError("Cannot create a sale without items")

        total = Money.zero()
        for item in items:
            total = total + item.total

        return Sale(
            id=require_text(sale_id, "Sale id"),
            customer_id=customer.id,
            customer_name=customer.name,
            items=tuple(items),
            total_amount=total,
            status=SaleStatus.PENDING,
            date=date,
        )

    # --- State transitions ----------------------------------------------------

    def toggle_status(self) -> None:
        """PENDING -> PAID or PAID -> PENDING."""
        self.status = self.status.toggled()

    def amend(
        self,
        *,
        sale_id: str | None = None,
        date: datetime | None = None,
        customer: Customer | None = None,
        total_amount: Money | None = None,
        status: SaleStatus | None = None,
    ) -> None:
        """Override scalar fields for an administrative correction.

        Line items are left alone and the total is *not* reconciled
        against them; whatever the caller supplies is recorded as-is.
        """
        if sale_id is not None:
            self.id = require_text(sale_id, "Sale id")
        if date is not None:
            self.date = date
        if customer is not None:
            self.customer_id = customer.id
            self.customer_name = customer.name
        if total_amount is not None:
            self.total_amount = total_amount
        if status is not None:
            self.status = status

    # --- Computed properties --------------------------------------------------

    @property
    def items_total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.total
        return result

    @property
    def is_paid(self) -> bool:
        return self.status is SaleStatus.PAID

    def quantities_by_product(self) -> dict[str, int]:
        """Units sold per product id, merged across lines."""
        result: dict[str, int] = {}
        for item in self.items:
            result[item.product_id] = result.get(item.product_id, 0) + item.quantity.value
        return result


def parse_status(raw: str) -> SaleStatus:
    try:
        return SaleStatus(raw.strip().upper())
    except ValueError as exc:
        raise ValidationError(
            f"Unknown sale status {raw!r} (expected PENDING or PAID)"
        ) from exc

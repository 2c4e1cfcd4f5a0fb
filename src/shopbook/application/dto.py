"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Amounts stay integers
and dates stay ``datetime``; formatting is the presentation layer's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from shopbook.domain.model.sale import Sale


@dataclass(frozen=True)
class CartItemSpec:
    """Input: a product id and how many units the customer wants."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class SalePatch:
    """Input: administrative overrides for an existing sale.

    ``None`` means "leave unchanged".
    """

    sale_id: str | None = None
    date: datetime | None = None
    customer_id: str | None = None
    total_amount: int | None = None
    status: str | None = None


@dataclass(frozen=True)
class SaleItemDTO:
    product_id: str
    product_name: str
    quantity: int
    price_at_sale: int
    total: int


@dataclass(frozen=True)
class SaleDTO:
    id: str
    customer_id: str
    customer_name: str
    date: datetime
    items: list[SaleItemDTO]
    total_amount: int
    status: str


def sale_to_dto(sale: Sale) -> SaleDTO:
    return SaleDTO(
        id=sale.id,
        customer_id=sale.customer_id,
        customer_name=sale.customer_name,
        date=sale.date,
        items=[
            SaleItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                price_at_sale=item.price_at_sale.amount,
                total=item.total.amount,
            )
            for item in sale.items
        ],
        total_amount=sale.total_amount.amount,
        status=sale.status.value,
    )

"""Domain service: sales statistics.

Derived views over the product, customer and sale collections. Every
function here is pure: it reads its arguments, never mutates them, and
returns fresh value objects. Results depend only on the *contents* of the
collections, so reordering products, customers or sales never changes a
sum (only the tie order of ``compute_top_inventory_by_value``, which
follows input order).

Calendar questions ("which day", "which month") are answered in the
timezone of the reference instant, or in the machine's local timezone
when no timezone is given.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Iterable, Sequence

from shopbook.domain.model.customer import Customer
from shopbook.domain.model.product import Product
from shopbook.domain.model.sale import Sale, SaleStatus
from shopbook.domain.model.value_objects import Money

TOP_INVENTORY_LIMIT = 5
RECENT_SALES_LIMIT = 7


@dataclass(frozen=True)
class DashboardStats:
    total_products: int
    total_customers: int
    monthly_sales: Money
    low_stock_count: int


@dataclass(frozen=True)
class RevenuePoint:
    day: date
    amount: Money


@dataclass(frozen=True)
class InventoryValue:
    product_id: str
    name: str
    value: Money


@dataclass(frozen=True)
class RevenueTotals:
    total_revenue: Money  # PAID sales
    total_pending: Money  # PENDING sales


@dataclass(frozen=True)
class RecentSalePoint:
    label: str
    amount: Money


def compute_dashboard_stats(
    products: Sequence[Product],
    customers: Sequence[Customer],
    sales: Iterable[Sale],
    now: datetime,
) -> DashboardStats:
    """Headline numbers for the dashboard.

    ``monthly_sales`` covers sales in the same calendar month *and year*
    as ``now``.
    """
    current = _in_zone(now, now.tzinfo)
    monthly = _sum_amounts(
        sale for sale in sales
        if _same_month(_in_zone(sale.date, now.tzinfo), current)
    )
    return DashboardStats(
        total_products=len(products),
        total_customers=len(customers),
        monthly_sales=monthly,
        low_stock_count=sum(1 for p in products if p.is_low_stock),
    )


def compute_revenue_by_date(
    sales: Iterable[Sale],
    tz: tzinfo | None = None,
) -> list[RevenuePoint]:
    """Total sale amounts per calendar day, oldest day first.

    Sales on the same day at different times merge into one point.
    """
    totals: dict[date, int] = {}
    for sale in sales:
        day = _in_zone(sale.date, tz).date()
        totals[day] = totals.get(day, 0) + sale.total_amount.amount
    return [
        RevenuePoint(day=day, amount=Money(amount))
        for day, amount in sorted(totals.items())
    ]


def compute_top_inventory_by_value(
    products: Iterable[Product],
    n: int = TOP_INVENTORY_LIMIT,
) -> list[InventoryValue]:
    """The ``n`` products holding the most stock value (price x stock).

    ``sorted`` is stable, so equal values keep their input order.
    """
    values = [
        InventoryValue(product_id=p.id, name=p.name, value=p.inventory_value)
        for p in products
    ]
    ranked = sorted(values, key=lambda v: v.value.amount, reverse=True)
    return ranked[:max(n, 0)]


def compute_revenue_totals(sales: Iterable[Sale]) -> RevenueTotals:
    paid = 0
    pending = 0
    for sale in sales:
        if sale.status is SaleStatus.PAID:
            paid += sale.total_amount.amount
        else:
            pending += sale.total_amount.amount
    return RevenueTotals(total_revenue=Money(paid), total_pending=Money(pending))


def compute_inventory_value(products: Iterable[Product]) -> Money:
    return Money(sum(p.inventory_value.amount for p in products))


def recent_sales(
    sales: Sequence[Sale],
    limit: int = RECENT_SALES_LIMIT,
) -> list[RecentSalePoint]:
    """The last ``limit`` sales in stored order, labelled for a chart."""
    tail = list(sales)[-limit:] if limit > 0 else []
    return [
        RecentSalePoint(label=f"Sale #{i}", amount=sale.total_amount)
        for i, sale in enumerate(tail, start=1)
    ]


# --- Internal helpers ---------------------------------------------------------


def _sum_amounts(sales: Iterable[Sale]) -> Money:
    return Money(sum(sale.total_amount.amount for sale in sales))


def _in_zone(moment: datetime, tz: tzinfo | None) -> datetime:
    # astimezone(None) converts to the machine's local zone
    return moment.astimezone(tz)


def _same_month(a: datetime, b: datetime) -> bool:
    return (a.year, a.month) == (b.year, b.month)

"""Application service: Show Reports use case (query).

Bundles every report view computed from one consistent read of the
product and sale collections.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo

from shopbook.domain.model.value_objects import Money
from shopbook.domain.repository.product_repository import ProductRepository
from shopbook.domain.repository.sale_repository import SaleRepository
from shopbook.domain.service.sales_statistics import (
    TOP_INVENTORY_LIMIT,
    InventoryValue,
    RevenuePoint,
    RevenueTotals,
    compute_inventory_value,
    compute_revenue_by_date,
    compute_revenue_totals,
    compute_top_inventory_by_value,
)


@dataclass(frozen=True)
class ReportsDTO:
    revenue_by_date: list[RevenuePoint]
    top_inventory: list[InventoryValue]
    totals: RevenueTotals
    inventory_value: Money


class ShowReportsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        sale_repo: SaleRepository,
        tz: tzinfo | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._sale_repo = sale_repo
        self._tz = tz

    def handle(self, top: int = TOP_INVENTORY_LIMIT) -> ReportsDTO:
        products = self._product_repo.list_all()
        sales = self._sale_repo.list_all()
        return ReportsDTO(
            revenue_by_date=compute_revenue_by_date(sales, self._tz),
            top_inventory=compute_top_inventory_by_value(products, top),
            totals=compute_revenue_totals(sales),
            inventory_value=compute_inventory_value(products),
        )

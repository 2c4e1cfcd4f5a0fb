"""Application service: Show Dashboard use case (query)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from shopbook.domain.repository.customer_repository import CustomerRepository
from shopbook.domain.repository.product_repository import ProductRepository
from shopbook.domain.repository.sale_repository import SaleRepository
from shopbook.domain.service.sales_statistics import (
    DashboardStats,
    RecentSalePoint,
    compute_dashboard_stats,
    recent_sales,
)


@dataclass(frozen=True)
class DashboardDTO:
    stats: DashboardStats
    recent: list[RecentSalePoint]


class ShowDashboardHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        sale_repo: SaleRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc).astimezone(),
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._sale_repo = sale_repo
        self._clock = clock

    def handle(self) -> DashboardDTO:
        sales = self._sale_repo.list_all()
        stats = compute_dashboard_stats(
            products=self._product_repo.list_all(),
            customers=self._customer_repo.list_all(),
            sales=sales,
            now=self._clock(),
        )
        return DashboardDTO(stats=stats, recent=recent_sales(sales))

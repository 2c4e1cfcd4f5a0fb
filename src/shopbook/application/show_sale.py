"""Application service: Show / List Sales use cases (queries)."""

from __future__ import annotations

from shopbook.application.dto import SaleDTO, sale_to_dto
from shopbook.domain.exceptions import SaleNotFoundError
from shopbook.domain.repository.sale_repository import SaleRepository


class ShowSaleHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def handle(self, sale_id: str) -> SaleDTO:
        for sale in self._sale_repo.list_all():
            if sale.id == sale_id:
                return sale_to_dto(sale)
        raise SaleNotFoundError(f"Sale #{sale_id} not found")


class ListSalesHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def handle(self) -> list[SaleDTO]:
        """Every sale, newest first."""
        return [sale_to_dto(s) for s in reversed(self._sale_repo.list_all())]

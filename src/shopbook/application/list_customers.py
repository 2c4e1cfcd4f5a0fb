"""Application service: customer roster queries."""

from __future__ import annotations

from shopbook.application.dto import SaleDTO, sale_to_dto
from shopbook.domain.exceptions import EntityNotFoundError
from shopbook.domain.model.customer import Customer
from shopbook.domain.repository.customer_repository import CustomerRepository
from shopbook.domain.repository.sale_repository import SaleRepository


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, search: str | None = None) -> list[Customer]:
        customers = self._customer_repo.list_all()
        if not search:
            return customers
        term = search.lower()
        return [c for c in customers if term in c.name.lower()]


class CustomerHistoryHandler:
    """Sales recorded against one customer, in stored order."""

    def __init__(
        self,
        customer_repo: CustomerRepository,
        sale_repo: SaleRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._sale_repo = sale_repo

    def handle(self, customer_id: str) -> tuple[Customer, list[SaleDTO]]:
        customer = next(
            (c for c in self._customer_repo.list_all() if c.id == customer_id), None
        )
        if customer is None:
            raise EntityNotFoundError(f"Customer with ID '{customer_id}' not found")
        history = [
            sale_to_dto(s) for s in self._sale_repo.list_all()
            if s.customer_id == customer_id
        ]
        return customer, history

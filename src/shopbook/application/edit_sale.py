"""Application service: Edit Sale use case.

An administrative correction path. Scalar fields (id, date, customer,
total, status) may be overridden; line items are never touched and the
total is recorded as given, without checking it against the items.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace

from shopbook.application.dto import SaleDTO, SalePatch, sale_to_dto
from shopbook.domain.exceptions import SaleNotFoundError, ValidationError
from shopbook.domain.model.sale import parse_status
from shopbook.domain.model.value_objects import Money
from shopbook.domain.repository.customer_repository import CustomerRepository
from shopbook.domain.repository.sale_repository import SaleRepository
from shopbook.domain.service.checkout_service import find_customer

logger = logging.getLogger(__name__)


class EditSaleHandler:

    def __init__(
        self,
        sale_repo: SaleRepository,
        customer_repo: CustomerRepository,
        lock: threading.RLock | None = None,
    ) -> None:
        self._sale_repo = sale_repo
        self._customer_repo = customer_repo
        self._lock = lock or threading.RLock()

    def handle(self, sale_id: str, patch: SalePatch) -> SaleDTO:
        with self._lock:
            sales = self._sale_repo.list_all()
            index = _index_of(sales, sale_id)

            customer = None
            if patch.customer_id is not None:
                customer = find_customer(patch.customer_id, self._customer_repo.list_all())

            if patch.sale_id is not None and patch.sale_id != sale_id:
                if any(s.id == patch.sale_id for s in sales):
                    raise ValidationError(f"Sale #{patch.sale_id} already exists")

            # Amend a copy so a failed validation leaves the list untouched
            amended = replace(sales[index])
            amended.amend(
                sale_id=patch.sale_id,
                date=patch.date,
                customer=customer,
                total_amount=Money(patch.total_amount) if patch.total_amount is not None else None,
                status=parse_status(patch.status) if patch.status is not None else None,
            )
            sales[index] = amended
            self._sale_repo.replace_all(sales)

        logger.info("Sale %s edited (now %s)", sale_id, amended.id)
        return sale_to_dto(amended)


def _index_of(sales, sale_id: str) -> int:
    for i, sale in enumerate(sales):
        if sale.id == sale_id:
            return i
    raise SaleNotFoundError(f"Sale #{sale_id} not found")

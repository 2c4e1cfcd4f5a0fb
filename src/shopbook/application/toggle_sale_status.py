"""Application service: Toggle Sale Status use case."""

from __future__ import annotations

import logging
import threading

from shopbook.application.dto import SaleDTO, sale_to_dto
from shopbook.domain.exceptions import SaleNotFoundError
from shopbook.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class ToggleSaleStatusHandler:

    def __init__(
        self,
        sale_repo: SaleRepository,
        lock: threading.RLock | None = None,
    ) -> None:
        self._sale_repo = sale_repo
        self._lock = lock or threading.RLock()

    def handle(self, sale_id: str) -> SaleDTO:
        """Flip a sale between PENDING and PAID."""
        with self._lock:
            sales = self._sale_repo.list_all()
            for sale in sales:
                if sale.id == sale_id:
                    break
            else:
                raise SaleNotFoundError(f"Sale #{sale_id} not found")

            sale.toggle_status()
            self._sale_repo.replace_all(sales)

        logger.info("Sale %s marked %s", sale.id, sale.status.value)
        return sale_to_dto(sale)

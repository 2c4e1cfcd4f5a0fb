"""Application service: Delete Sale use case.

Deleting a sale only removes the historical record. Stock deducted at
checkout is NOT returned to the catalog; this is not an undo of checkout.
"""

from __future__ import annotations

import logging
import threading

from shopbook.domain.exceptions import SaleNotFoundError
from shopbook.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class DeleteSaleHandler:

    def __init__(
        self,
        sale_repo: SaleRepository,
        lock: threading.RLock | None = None,
    ) -> None:
        self._sale_repo = sale_repo
        self._lock = lock or threading.RLock()

    def handle(self, sale_id: str) -> None:
        with self._lock:
            sales = self._sale_repo.list_all()
            remaining = [s for s in sales if s.id != sale_id]
            if len(remaining) == len(sales):
                raise SaleNotFoundError(f"Sale #{sale_id} not found")
            self._sale_repo.replace_all(remaining)

        logger.info("Sale %s deleted; stock left unchanged", sale_id)

"""Application service: Delete Customer use case.

There is no cascade: sales referencing the customer stay as they are,
still showing the customer name captured at checkout.
"""

from __future__ import annotations

import logging
import threading

from shopbook.domain.exceptions import EntityNotFoundError
from shopbook.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class DeleteCustomerHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        lock: threading.RLock | None = None,
    ) -> None:
        self._customer_repo = customer_repo
        self._lock = lock or threading.RLock()

    def handle(self, customer_id: str) -> None:
        with self._lock:
            customers = self._customer_repo.list_all()
            remaining = [c for c in customers if c.id != customer_id]
            if len(remaining) == len(customers):
                raise EntityNotFoundError(f"Customer with ID '{customer_id}' not found")
            self._customer_repo.replace_all(remaining)

        logger.info("Customer %s deleted", customer_id)

"""Application service: Update Customer use case.

Existing sales keep the customer name they were created with.
"""

from __future__ import annotations

import logging
import threading

from shopbook.domain.exceptions import EntityNotFoundError
from shopbook.domain.model.customer import Customer
from shopbook.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class UpdateCustomerHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        lock: threading.RLock | None = None,
    ) -> None:
        self._customer_repo = customer_repo
        self._lock = lock or threading.RLock()

    def handle(
        self,
        customer_id: str,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> Customer:
        with self._lock:
            customers = self._customer_repo.list_all()
            customer = next((c for c in customers if c.id == customer_id), None)
            if customer is None:
                raise EntityNotFoundError(f"Customer with ID '{customer_id}' not found")

            if name is not None:
                customer.rename(name)
            if email is not None:
                customer.email = email.strip()
            if phone is not None:
                customer.phone = phone.strip()
            if address is not None:
                customer.address = address.strip()

            self._customer_repo.replace_all(customers)

        logger.info("Customer %s updated", customer_id)
        return customer

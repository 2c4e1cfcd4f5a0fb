"""Application service: Add Customer use case."""

from __future__ import annotations

import logging
import threading

from shopbook.application.ids import next_numeric_id
from shopbook.domain.model.customer import Customer
from shopbook.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class AddCustomerHandler:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        lock: threading.RLock | None = None,
    ) -> None:
        self._customer_repo = customer_repo
        self._lock = lock or threading.RLock()

    def handle(
        self,
        name: str,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> Customer:
        with self._lock:
            customers = self._customer_repo.list_all()
            customer = Customer.create(
                customer_id=next_numeric_id(c.id for c in customers),
                name=name,
                email=email,
                phone=phone,
                address=address,
            )
            self._customer_repo.replace_all([*customers, customer])

        logger.info("Customer %s '%s' added", customer.id, customer.name)
        return customer

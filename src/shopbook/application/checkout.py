"""Application service: Checkout use case.

Commits a cart as a new PENDING sale and deducts the sold units from the
catalog. The sale append and the stock deduction land together or not
at all:

1. Under the commit lock, load customers, products and sales.
2. Let the checkout domain service validate and build the new sale and
   the post-sale catalog (no writes yet).
3. Write the sales collection, then the product collection. If the
   product write fails, the previous sales collection is written back
   before the error propagates.
"""

from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable

from shopbook.application.dto import SaleDTO, sale_to_dto
from shopbook.domain.exceptions import DomainException
from shopbook.domain.model.cart import Cart
from shopbook.domain.repository.customer_repository import CustomerRepository
from shopbook.domain.repository.product_repository import ProductRepository
from shopbook.domain.repository.sale_repository import SaleRepository
from shopbook.domain.service import checkout_service

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_sale_id() -> str:
    return uuid.uuid4().hex


class CheckoutHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        sale_repo: SaleRepository,
        clock: Clock = utc_now,
        id_factory: IdFactory = new_sale_id,
        lock: threading.RLock | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._sale_repo = sale_repo
        self._clock = clock
        self._id_factory = id_factory
        self._lock = lock or threading.RLock()

    def handle(self, cart: Cart, customer_id: str) -> SaleDTO:
        """Check out ``cart`` for ``customer_id`` and return the new sale."""
        with self._lock:
            customers = self._customer_repo.list_all()
            products = self._product_repo.list_all()
            sales = self._sale_repo.list_all()

            try:
                result = checkout_service.checkout(
                    cart=cart,
                    customer_id=customer_id,
                    customers=customers,
                    products=products,
                    sale_id=self._unique_id({s.id for s in sales}),
                    now=self._clock(),
                )
            except DomainException as exc:
                logger.warning("Checkout for customer %s rejected: %s", customer_id, exc)
                raise

            self._sale_repo.replace_all([*sales, result.sale])
            try:
                self._product_repo.replace_all(result.products)
            except Exception:
                logger.error(
                    "Stock update failed for sale %s; restoring previous sales",
                    result.sale.id,
                )
                try:
                    self._sale_repo.replace_all(sales)
                except Exception:
                    logger.exception(
                        "Restoring sales after failed sale %s also failed; "
                        "sales and stock are now out of step",
                        result.sale.id,
                    )
                    raise
                raise

        logger.info(
            "Sale %s created for %s: %d line(s), total %s",
            result.sale.id,
            result.sale.customer_name,
            len(result.sale.items),
            result.sale.total_amount,
        )
        cart.clear()
        return sale_to_dto(result.sale)

    def _unique_id(self, taken: set[str]) -> str:
        sale_id = self._id_factory()
        while sale_id in taken:
            sale_id = self._id_factory()
        return sale_id

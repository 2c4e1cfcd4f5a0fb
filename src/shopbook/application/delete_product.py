"""Application service: Delete Product use case.

Sales that sold the product keep their snapshot lines.
"""

from __future__ import annotations

import logging
import threading

from shopbook.domain.exceptions import EntityNotFoundError
from shopbook.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        lock: threading.RLock | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._lock = lock or threading.RLock()

    def handle(self, product_id: str) -> None:
        with self._lock:
            products = self._product_repo.list_all()
            remaining = [p for p in products if p.id != product_id]
            if len(remaining) == len(products):
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            self._product_repo.replace_all(remaining)

        logger.info("Product %s deleted", product_id)

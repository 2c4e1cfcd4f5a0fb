"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from shopbook.infrastructure.config import Settings
from shopbook.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from shopbook.infrastructure.persistence.json_preference_repository import (
    JsonPreferenceRepository,
)
from shopbook.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from shopbook.infrastructure.persistence.json_sale_repository import (
    JsonSaleRepository,
)


@dataclass
class Container:
    """Repositories for one data directory plus the lock that serializes
    every read-modify-write cycle against them."""

    settings: Settings
    lock: threading.RLock = field(default_factory=threading.RLock)

    def product_repository(self) -> JsonProductRepository:
        return JsonProductRepository(self.settings.products_file)

    def customer_repository(self) -> JsonCustomerRepository:
        return JsonCustomerRepository(self.settings.customers_file)

    def sale_repository(self) -> JsonSaleRepository:
        return JsonSaleRepository(self.settings.sales_file)

    def preference_repository(self) -> JsonPreferenceRepository:
        return JsonPreferenceRepository(self.settings.preferences_file)

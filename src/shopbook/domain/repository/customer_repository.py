"""Abstract repository for Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopbook.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer, in stored order."""

    @abstractmethod
    def replace_all(self, customers: list[Customer]) -> None:
        """Replace the stored roster with ``customers``."""

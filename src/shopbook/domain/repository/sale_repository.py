"""Abstract repository for Sale aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopbook.domain.model.sale import Sale


class SaleRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Sale]:
        """Return every sale, oldest first."""

    @abstractmethod
    def replace_all(self, sales: list[Sale]) -> None:
        """Replace the stored sales with ``sales``."""

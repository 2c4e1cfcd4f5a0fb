"""Display helpers for the command-line presentation layer."""

from __future__ import annotations

from datetime import datetime

from shopbook.domain.exceptions import DomainException
from shopbook.domain.model.value_objects import Money
from shopbook.infrastructure.persistence.json_file import StorageError

# Failures reported as a one-line error message (exit code 1)
EXPECTED_ERRORS = (DomainException, StorageError)


def rupiah(amount: int | Money) -> str:
    """Format an amount as Indonesian Rupiah, e.g. ``Rp 1.360.000``."""
    value = amount.amount if isinstance(amount, Money) else amount
    return "Rp " + f"{value:,}".replace(",", ".")


def local_date(moment: datetime) -> str:
    return moment.astimezone().strftime("%Y-%m-%d")

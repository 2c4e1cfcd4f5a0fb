"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopbook.domain.exceptions import ValidationError


@dataclass(frozen=True, order=True)
class Money:
    """Non-negative amount in whole currency units.

    The shop works in a single currency without minor units, so amounts
    are plain integers. Formatting for display belongs to the
    presentation layer.
    """

    amount: int

    def __post_init__(self) -> None:
        # bool is an int subclass; reject it explicitly
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise ValidationError(
                f"Money amount must be an integer, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __sub__(self, other: Money) -> Money:
        result = self.amount - other.amount
        if result < 0:
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return str(self.amount)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | int) -> Money:
        """Convenient factory that coerces user input to an integer amount."""
        try:
            value = int(str(amount).strip())
        except ValueError as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(value)

    @staticmethod
    def zero() -> Money:
        return Money(0)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot sell zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


def require_text(value: str | None, label: str) -> str:
    """Return ``value`` stripped, or raise if it is blank."""
    if value is None or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def require_stock(value: int) -> int:
    """Validate a stock level: a non-negative integer."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"Stock must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"Stock cannot be negative, got {value}")
    return value

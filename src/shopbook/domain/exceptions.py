"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class OutOfStockError(ValidationError):
    """A product with zero stock was added to a cart."""


class InsufficientStockError(ValidationError):
    """A requested quantity exceeds the product's current stock."""


class EmptyCartError(ValidationError):
    """Checkout was attempted on a cart with no lines."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UnknownCustomerError(EntityNotFoundError):
    """A sale references a customer id that is not in the roster."""


class SaleNotFoundError(EntityNotFoundError):
    """A sale id is not present in the sales collection."""

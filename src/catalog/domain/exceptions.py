"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so outer layers can catch them uniformly and map them to user-facing errors.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument or invariant was violated."""


class NullArgumentError(ValidationError):
    """A required value was not supplied."""


class InvalidAmountError(ValidationError):
    """A monetary amount is outside the accepted range."""


class InsufficientStockError(DomainException):
    """A stock adjustment would take the counter below zero.

    The product's stock is left untouched when this is raised.
    """

    def __init__(self, product_id: object, stock: int, delta: int) -> None:
        super().__init__(f"Insufficient stock for product: {product_id}")
        self.product_id = product_id
        self.stock = stock
        self.delta = delta


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """Raised by lookups when no product matches the given id."""

    def __init__(self, product_id: object) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class DuplicateSkuError(DomainException):
    """Raised by collaborators when a SKU is already taken.

    The domain model never raises this itself; uniqueness is checked
    before ``Product.create`` is called.
    """

    def __init__(self, sku: str) -> None:
        super().__init__(f"Duplicate SKU: {sku}")
        self.sku = sku

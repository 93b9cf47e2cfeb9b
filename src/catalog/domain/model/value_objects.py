"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from uuid import UUID, uuid4

from catalog.domain.exceptions import (
    InvalidAmountError,
    NullArgumentError,
    ValidationError,
)


def _is_currency_code(code: object) -> bool:
    """ISO 4217 alphabetic codes are three upper-case ASCII letters."""
    return (
        isinstance(code, str)
        and len(code) == 3
        and code.isascii()
        and code.isalpha()
        and code.isupper()
    )


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal so the amount is kept exactly as supplied: no rounding,
    no quantization, no currency inference.
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        if self.amount is None:
            raise NullArgumentError("Amount cannot be null")
        if self.currency is None:
            raise NullArgumentError("Currency cannot be null")
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidAmountError(f"Amount must be a finite number, but got: {self.amount}")
        if not _is_currency_code(self.currency):
            raise ValidationError(f"Invalid ISO 4217 currency code: {self.currency!r}")
        if self.amount < Decimal("0"):
            raise InvalidAmountError(
                f"Amount must be non-negative, but got: {self.amount}"
            )

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if amount is None:
            raise NullArgumentError("Amount cannot be null")
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(value, currency)


@dataclass(frozen=True)
class ProductId:
    """Opaque 128-bit product identity."""

    value: UUID

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullArgumentError("ProductId value cannot be null")
        if not isinstance(self.value, UUID):
            raise ValidationError(
                f"ProductId value must be a UUID, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def generate() -> ProductId:
        return ProductId(uuid4())

    @staticmethod
    def of(value: UUID) -> ProductId:
        """Wrap an existing identifier, e.g. one loaded from storage."""
        return ProductId(value)

    @staticmethod
    def parse(text: str) -> ProductId:
        """Build an id from its canonical string form."""
        if text is None:
            raise NullArgumentError("ProductId value cannot be null")
        try:
            return ProductId(UUID(str(text).strip()))
        except ValueError as exc:
            raise ValidationError(f"Invalid product id: {text!r}") from exc

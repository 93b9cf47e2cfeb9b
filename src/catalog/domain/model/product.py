"""Product aggregate.

A product owns its identity, descriptive details, a price and a stock
counter. Business invariants are enforced on every mutation.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.exceptions import (
    InsufficientStockError,
    NullArgumentError,
    ValidationError,
)
from catalog.domain.model.value_objects import Money, ProductId


def _check_details(name: str | None, price: Money | None) -> None:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Product name cannot be blank")
    if price is None:
        raise NullArgumentError("Price cannot be null")


@dataclass
class Product:
    """Aggregate root for catalog products.

    Use ``Product.create()`` for new products; it validates the details
    and assigns a fresh identity with zero stock.  ``reconstitute()`` (and
    the plain ``__init__``) rebuild a product from trusted, previously
    persisted state and validate nothing.

    Invariants:
    - ``name`` is never blank once created or updated
    - ``stock`` never goes below zero through ``adjust_stock``
    """

    id: ProductId
    name: str
    description: str | None
    price: Money
    stock: int = 0

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(name: str, description: str | None, price: Money) -> Product:
        """Create a new catalog product with a generated id and no stock."""
        _check_details(name, price)
        return Product(
            id=ProductId.generate(),
            name=name,
            description=description,
            price=price,
        )

    @staticmethod
    def reconstitute(
        id: ProductId,
        name: str,
        description: str | None,
        price: Money,
        stock: int,
    ) -> Product:
        return Product(
            id=id,
            name=name,
            description=description,
            price=price,
            stock=stock,
        )

    # --- Mutations ------------------------------------------------------------

    def adjust_stock(self, delta: int) -> None:
        """Add *delta* to the stock counter.

        Positive deltas record receipts, negative ones sales.  Raises
        InsufficientStockError, leaving stock as it was, when the result
        would be negative.
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValidationError(
                f"Stock delta must be an integer, got {type(delta).__name__}"
            )
        if self.stock + delta < 0:
            raise InsufficientStockError(self.id, self.stock, delta)
        self.stock += delta

    def update_details(
        self, name: str, description: str | None, price: Money
    ) -> None:
        """Replace name, description and price together.

        Nothing is assigned if validation fails.  Stock and id are untouched.
        """
        _check_details(name, price)
        self.name = name
        self.description = description
        self.price = price

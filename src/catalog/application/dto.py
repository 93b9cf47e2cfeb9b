"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data out of the application layer without exposing domain
internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: str
    name: str
    description: str | None
    price: str  # formatted, e.g. "100.00 USD"
    amount: str
    currency: str
    stock: int

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=str(product.price),
            amount=str(product.price.amount),
            currency=product.price.currency,
            stock=product.stock,
        )

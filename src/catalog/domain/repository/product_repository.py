"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductId


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: ProductId) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by name, ignoring case and surrounding whitespace."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def remove(self, product_id: ProductId) -> None:
        """Delete a product; a missing id is ignored."""

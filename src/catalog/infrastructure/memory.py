"""In-process implementation of ProductRepository.

Products are kept as plain snapshots and rebuilt on every read, so a
caller mutating an entity it loaded does not change the stored state
until it calls ``save``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, ProductId
from catalog.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self) -> None:
        self._rows: dict[ProductId, dict[str, Any]] = {}

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: ProductId) -> Product | None:
        row = self._rows.get(product_id)
        return None if row is None else self._to_product(row)

    def get_by_name(self, name: str) -> Product | None:
        for row in self._rows.values():
            if row["name"].strip().lower() == name.strip().lower():
                return self._to_product(row)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_product(row) for row in self._rows.values()]

    def save(self, product: Product) -> None:
        self._rows[product.id] = self._to_row(product)

    def remove(self, product_id: ProductId) -> None:
        self._rows.pop(product_id, None)

    def clear(self) -> None:
        self._rows.clear()

    # --- Snapshot helpers -----------------------------------------------------

    @staticmethod
    def _to_row(product: Product) -> dict[str, Any]:
        return {
            "id": str(product.id),
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
        }

    @staticmethod
    def _to_product(row: dict[str, Any]) -> Product:
        return Product.reconstitute(
            id=ProductId.parse(row["id"]),
            name=row["name"],
            description=row["description"],
            price=Money(Decimal(row["price"]), row["currency"]),
            stock=row["stock"],
        )

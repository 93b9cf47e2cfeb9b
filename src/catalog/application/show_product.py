"""Application services: read-only product queries."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        pid = ProductId.parse(product_id)
        product = self._product_repo.get_by_id(pid)
        if product is None:
            raise ProductNotFoundError(pid)
        return ProductDTO.from_product(product)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        """Return every product, ordered by name."""
        products = sorted(self._product_repo.list_all(), key=lambda p: p.name.lower())
        return [ProductDTO.from_product(p) for p in products]

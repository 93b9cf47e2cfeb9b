"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import DuplicateSkuError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        description: str | None,
        price: str,
        currency: str,
    ) -> ProductDTO:
        """Add a new product to the catalog.

        The product name doubles as its SKU, so it must be unique.
        """
        if isinstance(name, str) and self._product_repo.get_by_name(name) is not None:
            logger.warning("duplicate_sku_rejected", sku=name)
            raise DuplicateSkuError(name)

        product = Product.create(name, description, Money.of(price, currency))
        self._product_repo.save(product)

        logger.info(
            "product_added",
            product_id=str(product.id),
            name=product.name,
            price=str(product.price),
        )
        return ProductDTO.from_product(product)

"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import DuplicateSkuError, ProductNotFoundError
from catalog.domain.model.value_objects import Money, ProductId
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str,
        description: str | None,
        price: str,
        currency: str,
    ) -> ProductDTO:
        """Replace a product's name, description and price.

        Stock is left as it is.  Renaming onto a name already used by
        another product is rejected as a duplicate SKU.
        """
        pid = ProductId.parse(product_id)
        product = self._product_repo.get_by_id(pid)
        if product is None:
            logger.warning("product_lookup_failed", product_id=product_id)
            raise ProductNotFoundError(pid)

        if isinstance(name, str):
            clash = self._product_repo.get_by_name(name)
            if clash is not None and clash.id != product.id:
                logger.warning("duplicate_sku_rejected", sku=name)
                raise DuplicateSkuError(name)

        product.update_details(name, description, Money.of(price, currency))
        self._product_repo.save(product)

        logger.info(
            "product_updated",
            product_id=str(product.id),
            name=product.name,
            price=str(product.price),
        )
        return ProductDTO.from_product(product)

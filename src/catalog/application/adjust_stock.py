"""Application service: Adjust Stock use case.

Loads the product, lets the aggregate apply the delta, and saves it.
When the aggregate rejects the adjustment nothing is persisted.
"""

from __future__ import annotations

import structlog

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import InsufficientStockError, ProductNotFoundError
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AdjustStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, delta: int) -> ProductDTO:
        """Apply a signed stock delta (receipt > 0, sale < 0)."""
        pid = ProductId.parse(product_id)
        product = self._product_repo.get_by_id(pid)
        if product is None:
            logger.warning("product_lookup_failed", product_id=product_id)
            raise ProductNotFoundError(pid)

        try:
            product.adjust_stock(delta)
        except InsufficientStockError as exc:
            logger.warning(
                "stock_adjustment_rejected",
                product_id=str(pid),
                stock=exc.stock,
                delta=exc.delta,
            )
            raise

        self._product_repo.save(product)
        logger.info(
            "stock_adjusted",
            product_id=str(pid),
            delta=delta,
            stock=product.stock,
        )
        return ProductDTO.from_product(product)

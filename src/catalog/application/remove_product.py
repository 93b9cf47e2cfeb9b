"""Application service: Remove Product use case."""

from __future__ import annotations

import structlog

from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        """Drop a product from the catalog."""
        pid = ProductId.parse(product_id)
        if self._product_repo.get_by_id(pid) is None:
            logger.warning("product_lookup_failed", product_id=product_id)
            raise ProductNotFoundError(pid)

        self._product_repo.remove(pid)
        logger.info("product_removed", product_id=str(pid))

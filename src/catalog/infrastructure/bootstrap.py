"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.application.add_product import AddProductHandler
from catalog.application.adjust_stock import AdjustStockHandler
from catalog.application.remove_product import RemoveProductHandler
from catalog.application.show_product import ListProductsHandler, ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.infrastructure.memory import InMemoryProductRepository

# One catalog per process; callers own any locking across threads.
_PRODUCTS = InMemoryProductRepository()


def product_repository() -> InMemoryProductRepository:
    return _PRODUCTS


def reset() -> None:
    """Empty the process-wide catalog."""
    _PRODUCTS.clear()


def add_product_handler() -> AddProductHandler:
    return AddProductHandler(product_repo=product_repository())


def update_product_handler() -> UpdateProductHandler:
    return UpdateProductHandler(product_repo=product_repository())


def adjust_stock_handler() -> AdjustStockHandler:
    return AdjustStockHandler(product_repo=product_repository())


def show_product_handler() -> ShowProductHandler:
    return ShowProductHandler(product_repo=product_repository())


def list_products_handler() -> ListProductsHandler:
    return ListProductsHandler(product_repo=product_repository())


def remove_product_handler() -> RemoveProductHandler:
    return RemoveProductHandler(product_repo=product_repository())

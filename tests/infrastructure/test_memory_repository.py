"""Tests for the in-memory ProductRepository adapter and composition root."""

from decimal import Decimal

import pytest
import structlog

from catalog.domain.exceptions import InsufficientStockError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.infrastructure import bootstrap
from catalog.infrastructure.logging_setup import configure_logging
from catalog.infrastructure.memory import InMemoryProductRepository


@pytest.fixture
def repo() -> InMemoryProductRepository:
    return InMemoryProductRepository()


def _widget() -> Product:
    return Product.create("Widget", "desc", Money(Decimal("100.00"), "USD"))


class TestInMemoryProductRepository:

    def test_save_and_get_by_id(self, repo):
        product = _widget()
        repo.save(product)
        assert repo.get_by_id(product.id) == product

    def test_get_returns_a_copy(self, repo):
        product = _widget()
        repo.save(product)

        loaded = repo.get_by_id(product.id)
        loaded.adjust_stock(5)

        assert loaded is not product
        assert repo.get_by_id(product.id).stock == 0

    def test_save_overwrites(self, repo):
        product = _widget()
        repo.save(product)
        product.adjust_stock(3)
        repo.save(product)
        assert repo.get_by_id(product.id).stock == 3

    def test_get_by_name_is_case_insensitive(self, repo):
        product = _widget()
        repo.save(product)
        assert repo.get_by_name("WIDGET").id == product.id
        assert repo.get_by_name("Gadget") is None

    def test_get_by_name_ignores_surrounding_whitespace(self, repo):
        product = _widget()
        repo.save(product)
        assert repo.get_by_name("  widget\t").id == product.id

    def test_list_and_remove(self, repo):
        a, b = _widget(), Product.create("Gadget", None, Money.of("1", "USD"))
        repo.save(a)
        repo.save(b)
        assert {p.id for p in repo.list_all()} == {a.id, b.id}

        repo.remove(a.id)
        repo.remove(a.id)
        assert [p.id for p in repo.list_all()] == [b.id]


class TestBootstrap:

    def setup_method(self):
        bootstrap.reset()

    def teardown_method(self):
        bootstrap.reset()

    def test_handlers_share_one_catalog(self):
        dto = bootstrap.add_product_handler().handle("Widget", "desc", "100.00", "USD")

        bootstrap.adjust_stock_handler().handle(dto.id, 10)
        with pytest.raises(InsufficientStockError):
            bootstrap.adjust_stock_handler().handle(dto.id, -15)
        bootstrap.update_product_handler().handle(dto.id, "Widget", None, "90.00", "USD")

        shown = bootstrap.show_product_handler().handle(dto.id)
        assert shown.stock == 10
        assert shown.price == "90.00 USD"
        assert [p.id for p in bootstrap.list_products_handler().handle()] == [dto.id]

        bootstrap.remove_product_handler().handle(dto.id)
        assert bootstrap.list_products_handler().handle() == []


class TestConfigureLogging:

    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_output(self, capsys):
        configure_logging("INFO", json=True)
        structlog.get_logger("test").info("product_added", sku="Widget")
        err = capsys.readouterr().err
        assert '"event": "product_added"' in err
        assert '"sku": "Widget"' in err

    def test_level_filters_lower_events(self, capsys):
        configure_logging("WARNING", json=True)
        structlog.get_logger("test").info("product_added")
        assert capsys.readouterr().err == ""

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("LOUD")

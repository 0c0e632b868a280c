import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the Protean environment before any domain module is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def catalogue_domain():
    """Initialize the catalogue domain once per session."""
    from catalogue.domain import catalogue

    catalogue.init()
    return catalogue


@pytest.fixture(scope="session")
def ordering_domain(catalogue_domain):
    """Initialize the ordering domain once per session (needs catalogue products)."""
    from ordering.domain import ordering

    ordering.init()
    return ordering


@pytest.fixture()
def make_product():
    """Factory for catalog products with sensible defaults."""
    from catalogue.product.product import Product

    def _make(product_id="prod-001", **overrides):
        data = {
            "product_id": product_id,
            "name": f"Product {product_id}",
            "description": "A product",
            "category": "Electronics",
            "price": 10.0,
            "stock": 10,
        }
        data.update(overrides)
        return Product(**data)

    return _make

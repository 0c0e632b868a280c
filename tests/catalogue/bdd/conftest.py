"""Shared BDD fixtures for the Catalogue domain."""

import pytest


@pytest.fixture()
def catalog():
    return []


@pytest.fixture()
def shown():
    """Container for the products the last browse displayed."""
    return {"products": []}

import pytest


@pytest.fixture(autouse=True)
def run_around_tests(catalogue_domain):
    """Push domain context before each test, reset adapters after."""
    ctx = catalogue_domain.domain_context()
    ctx.push()

    yield

    from catalogue.service import reset_catalog_service

    reset_catalog_service()
    ctx.pop()

import pytest


@pytest.fixture(autouse=True)
def run_around_tests(ordering_domain):
    """Push domain context before each test, cleanup after."""
    ctx = ordering_domain.domain_context()
    ctx.push()

    yield

    from catalogue.service import reset_catalog_service
    from ordering.submission import reset_submitter
    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    reset_catalog_service()
    reset_submitter()
    ctx.pop()

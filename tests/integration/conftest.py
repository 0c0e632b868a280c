"""Fixtures for cross-context storefront tests.

The journey runs through the catalogue pipeline and the ordering cart, so
both domains are initialized; the ordering context is the active one.
"""

import pytest


@pytest.fixture(autouse=True)
def run_around_tests(catalogue_domain, ordering_domain):
    ctx = ordering_domain.domain_context()
    ctx.push()

    yield

    from catalogue.service import reset_catalog_service
    from ordering.submission import reset_submitter

    reset_catalog_service()
    reset_submitter()
    ctx.pop()

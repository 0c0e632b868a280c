"""Shared BDD fixtures for the Ordering domain."""

import pytest
from ordering.checkout.flow import Checkout
from ordering.submission import set_submitter
from ordering.submission.fake_adapter import FakeOrderSubmitter


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def catalog():
    """Products the scenario's catalog snapshot is built from."""
    return []


@pytest.fixture()
def submitter():
    fake = FakeOrderSubmitter()
    set_submitter(fake)
    return fake


@pytest.fixture()
def checkout(submitter):
    return Checkout()

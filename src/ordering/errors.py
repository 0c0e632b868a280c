"""Recoverable ordering errors surfaced to the shopper as messages."""

from protean.exceptions import ValidationError


class OutOfStockError(ValidationError):
    """A product with zero stock was added to the cart."""


class EmptyCartError(ValidationError):
    """An order was requested for a cart with no lines."""


class MissingAddressError(ValidationError):
    """An order was requested without a shipping address."""


class OrderSubmissionError(ValidationError):
    """The order-placement collaborator rejected the order."""

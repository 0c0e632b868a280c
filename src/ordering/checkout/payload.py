"""Order-submission payload built from a priced cart.

The payload is the contract handed to the order-placement collaborator.
Building it validates the checkout form; sending it is someone else's job.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from ordering.cart.contents import CartEntry
from ordering.cart.pricing import SHIPPING_COST, TAX_RATE, total
from ordering.errors import EmptyCartError, MissingAddressError
from shared.money import quantize_money


class PaymentMethod(Enum):
    CREDIT_CARD = "Credit Card"
    PAYPAL = "PayPal"
    CASH_ON_DELIVERY = "Cash on Delivery"


@dataclass(frozen=True)
class OrderPayloadItem:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderPayload:
    """Immutable order-placement request."""

    items: tuple[OrderPayloadItem, ...]
    total_amount: Decimal
    shipping_address: str
    payment_method: str

    def to_dict(self) -> dict:
        """Submission body; the total is rendered to cents."""
        return {
            "items": [{"product_id": item.product_id, "quantity": item.quantity} for item in self.items],
            "total_amount": str(quantize_money(self.total_amount)),
            "shipping_address": self.shipping_address,
            "payment_method": self.payment_method,
        }


def build_order_payload(
    lines: Iterable[CartEntry],
    shipping_address: str | None,
    payment_method: PaymentMethod | str = PaymentMethod.CREDIT_CARD,
    shipping_cost=SHIPPING_COST,
    tax_rate=TAX_RATE,
) -> OrderPayload:
    """Validate checkout input and freeze it into an ``OrderPayload``.

    Raises:
        EmptyCartError: there are no lines to order.
        MissingAddressError: the shipping address is missing or blank.
    """
    entries = tuple(lines)
    if not entries:
        raise EmptyCartError({"cart": ["Your cart is empty"]})

    address = (shipping_address or "").strip()
    if not address:
        raise MissingAddressError({"shipping_address": ["Please enter a shipping address"]})

    if isinstance(payment_method, PaymentMethod):
        payment_method = payment_method.value

    priced = total(entries, shipping_cost=shipping_cost, tax_rate=tax_rate)

    return OrderPayload(
        items=tuple(OrderPayloadItem(product_id=entry.product_id, quantity=entry.quantity) for entry in entries),
        total_amount=priced.grand_total,
        shipping_address=address,
        payment_method=payment_method,
    )

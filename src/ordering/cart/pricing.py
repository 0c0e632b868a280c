"""Cart pricing: the single place where order totals are computed.

All figures are ``Decimal``. Nothing here rounds; ``PricedOrder.display``
rounds to cents for the presentation layer without touching the stored
figures.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from ordering.cart.contents import CartEntry
from shared.money import format_money, to_decimal

SHIPPING_COST = Decimal("5.99")
TAX_RATE = Decimal("0.10")


@dataclass(frozen=True)
class PricedOrder:
    """Monetary breakdown of a cart."""

    subtotal: Decimal
    shipping_cost: Decimal
    tax: Decimal
    grand_total: Decimal

    def display(self) -> dict[str, str]:
        return {
            "subtotal": format_money(self.subtotal),
            "shipping_cost": format_money(self.shipping_cost),
            "tax": format_money(self.tax),
            "grand_total": format_money(self.grand_total),
        }


def subtotal_of(lines: Iterable[CartEntry]) -> Decimal:
    return sum((entry.line_total for entry in lines), Decimal("0"))


def total(lines: Iterable[CartEntry], shipping_cost=SHIPPING_COST, tax_rate=TAX_RATE) -> PricedOrder:
    """Price a set of cart lines.

    ``subtotal`` is the sum of price x quantity, ``tax`` is subtotal x rate,
    and ``grand_total`` adds subtotal, flat shipping and tax.
    """
    subtotal = subtotal_of(lines)
    shipping = to_decimal(shipping_cost)
    tax = subtotal * to_decimal(tax_rate)

    return PricedOrder(
        subtotal=subtotal,
        shipping_cost=shipping,
        tax=tax,
        grand_total=subtotal + shipping + tax,
    )

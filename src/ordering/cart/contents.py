"""Read-only view of a cart's lines joined with product data.

The cart stores product ids and quantities; prices and names come from
whatever product lookup the caller supplies. Iterating a ``CartContents``
reads the cart's current lines and resolves each product on the way, so
the view can be iterated any number of times and always reflects the
latest cart state. Lines whose product the lookup cannot resolve are
skipped.
"""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from decimal import Decimal

from catalogue.product.product import Product
from shared.money import to_decimal


@dataclass(frozen=True)
class CartEntry:
    """One cart line with its product."""

    product: Product
    quantity: int

    @property
    def product_id(self) -> str:
        return self.product.product_id

    @property
    def unit_price(self) -> Decimal:
        return to_decimal(self.product.price)

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


class CartContents:
    """Lazy, restartable sequence of ``CartEntry`` for one cart."""

    def __init__(self, cart, lookup: Callable[[str], Product | None] | Mapping[str, Product]) -> None:
        self._cart = cart
        self._lookup = lookup.get if isinstance(lookup, Mapping) else lookup

    def __iter__(self) -> Iterator[CartEntry]:
        for line in list(self._cart.items):
            product = self._lookup(str(line.product_id))
            if product is None:
                continue
            yield CartEntry(product=product, quantity=line.quantity)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"CartContents(cart_id={self._cart.id!s}, lines={len(self._cart.items)})"

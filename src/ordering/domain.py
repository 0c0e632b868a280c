"""Ordering bounded context: shopping cart, pricing and checkout.

The cart is a CQRS aggregate owned by the shopper's session. Pricing and
order-payload building are pure functions over the cart's joined lines.
"""

from protean.domain import Domain

ordering = Domain(name="ordering")

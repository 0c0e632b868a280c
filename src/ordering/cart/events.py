"""Domain events for the ShoppingCart aggregate."""

from protean.fields import Boolean, Identifier, Integer

from ordering.domain import ordering


@ordering.event(part_of="ShoppingCart")
class CartItemAdded:
    """A product line was created in the cart."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    requested_quantity = Integer(required=True)
    clamped = Boolean(default=False)


@ordering.event(part_of="ShoppingCart")
class CartQuantityUpdated:
    """The quantity of an existing line changed (or was held at the stock limit)."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
    requested_quantity = Integer(required=True)
    clamped = Boolean(default=False)


@ordering.event(part_of="ShoppingCart")
class CartItemRemoved:
    """A product line was removed from the cart."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)


@ordering.event(part_of="ShoppingCart")
class CartCleared:
    """All lines were removed, typically after an order was placed."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    lines_removed = Integer(required=True)

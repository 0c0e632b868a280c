"""Cart line management: commands and handler.

Each command carries the stock the caller read from its latest catalog
snapshot; the aggregate clamps against it.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from ordering.cart.cart import ShoppingCart
from ordering.domain import ordering


@ordering.command(part_of="ShoppingCart")
class AddToCart:
    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    current_stock = Integer(required=True, min_value=0)


@ordering.command(part_of="ShoppingCart")
class SetCartQuantity:
    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    new_quantity = Integer(required=True)
    current_stock = Integer(required=True, min_value=0)


@ordering.command(part_of="ShoppingCart")
class RemoveFromCart:
    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)


@ordering.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        quantity = cart.add_or_increment(
            product_id=command.product_id,
            requested_quantity=command.quantity,
            current_stock=command.current_stock,
        )
        repo.add(cart)
        return quantity

    @handle(SetCartQuantity)
    def set_cart_quantity(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        quantity = cart.set_quantity(
            product_id=command.product_id,
            new_quantity=command.new_quantity,
            current_stock=command.current_stock,
        )
        repo.add(cart)
        return quantity

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.get(command.cart_id)
        cart.remove(product_id=command.product_id)
        repo.add(cart)

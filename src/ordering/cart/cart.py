"""Shopping Cart aggregate (CQRS): one line per product, bounded by live stock.

The cart owns quantities only. Product data (price, stock, names) belongs
to the Catalog Service, so every mutation takes the caller's latest known
stock and clamps against it. Clamping is silent for the caller; the
emitted event records whether it happened.

Line lifecycle::

    absent --add--> present(qty >= 1) --increment/decrement/clamp--> present(qty')
    present --remove / decrement to 0--> absent
"""

from collections.abc import Callable, Mapping
from datetime import UTC, datetime

import structlog
from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from ordering.cart.contents import CartContents
from ordering.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated
from ordering.domain import ordering
from ordering.errors import OutOfStockError

logger = structlog.get_logger(__name__)


@ordering.entity(part_of="ShoppingCart")
class CartLine:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@ordering.aggregate
class ShoppingCart:
    session_id = String(max_length=255)
    items = HasMany(CartLine)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [str(line.product_id) for line in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in the cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, session_id=None):
        now = datetime.now(UTC)
        return cls(session_id=session_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def _find_line(self, product_id):
        return next((line for line in self.items if str(line.product_id) == str(product_id)), None)

    def quantity_of(self, product_id) -> int:
        line = self._find_line(product_id)
        return line.quantity if line else 0

    def is_empty(self) -> bool:
        return not self.items

    def lines(self, lookup: Callable | Mapping) -> CartContents:
        """Lines joined with product data from ``lookup`` (callable or mapping of id -> Product)."""
        return CartContents(self, lookup)

    # -------------------------------------------------------------------
    # Line management
    # -------------------------------------------------------------------
    def add_or_increment(self, product_id, requested_quantity, current_stock) -> int:
        """Add a product, or increase its quantity, never beyond current stock.

        Returns the line's resulting quantity.
        """
        if requested_quantity < 1:
            raise ValidationError({"quantity": ["Requested quantity must be at least 1"]})
        if current_stock <= 0:
            raise OutOfStockError({"product_id": [f"Product {product_id} is out of stock"]})

        line = self._find_line(product_id)
        now = datetime.now(UTC)

        if line is None:
            wanted = requested_quantity
            quantity = min(wanted, current_stock)
            self.add_items(CartLine(product_id=product_id, quantity=quantity, added_at=now))
            self.raise_(
                CartItemAdded(
                    cart_id=str(self.id),
                    product_id=str(product_id),
                    quantity=quantity,
                    requested_quantity=wanted,
                    clamped=quantity < wanted,
                )
            )
        else:
            previous_quantity = line.quantity
            wanted = previous_quantity + requested_quantity
            quantity = min(wanted, current_stock)
            line.quantity = quantity
            self.raise_(
                CartQuantityUpdated(
                    cart_id=str(self.id),
                    product_id=str(product_id),
                    previous_quantity=previous_quantity,
                    new_quantity=quantity,
                    requested_quantity=wanted,
                    clamped=quantity < wanted,
                )
            )

        self.updated_at = now
        if quantity < wanted:
            logger.debug("cart_quantity_clamped", cart_id=str(self.id), product_id=str(product_id), stock=current_stock)
        return quantity

    def set_quantity(self, product_id, new_quantity, current_stock) -> int:
        """Set a line's quantity, clamped to stock. Zero or less removes the line.

        Returns the line's resulting quantity (0 when the line is gone).
        """
        quantity = min(new_quantity, current_stock)
        if new_quantity <= 0 or quantity <= 0:
            self.remove(product_id)
            return 0

        line = self._find_line(product_id)
        now = datetime.now(UTC)

        if line is None:
            self.add_items(CartLine(product_id=product_id, quantity=quantity, added_at=now))
            self.raise_(
                CartItemAdded(
                    cart_id=str(self.id),
                    product_id=str(product_id),
                    quantity=quantity,
                    requested_quantity=new_quantity,
                    clamped=quantity < new_quantity,
                )
            )
        else:
            previous_quantity = line.quantity
            line.quantity = quantity
            self.raise_(
                CartQuantityUpdated(
                    cart_id=str(self.id),
                    product_id=str(product_id),
                    previous_quantity=previous_quantity,
                    new_quantity=quantity,
                    requested_quantity=new_quantity,
                    clamped=quantity < new_quantity,
                )
            )

        self.updated_at = now
        return quantity

    def remove(self, product_id) -> None:
        """Remove a product's line. Removing an absent product does nothing."""
        line = self._find_line(product_id)
        if line is None:
            return

        self.remove_items(line)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                product_id=str(product_id),
            )
        )

    def clear(self) -> None:
        """Remove every line."""
        if not self.items:
            return

        lines_removed = len(self.items)
        for line in list(self.items):
            self.remove_items(line)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartCleared(cart_id=str(self.id), lines_removed=lines_removed))

    # -------------------------------------------------------------------
    # Stock reconciliation
    # -------------------------------------------------------------------
    def reconcile(self, lookup: Callable | Mapping) -> dict[str, int]:
        """Bring every line within the latest stock.

        Lines whose product vanished or sold out are dropped; lines above
        stock are clamped. Returns ``{product_id: new_quantity}`` for each
        adjusted line, with 0 meaning dropped.
        """
        find = lookup.get if isinstance(lookup, Mapping) else lookup
        adjustments = {}

        for line in list(self.items):
            product_id = str(line.product_id)
            product = find(product_id)
            stock = product.stock if product is not None else 0

            if not stock:
                self.remove(product_id)
                adjustments[product_id] = 0
            elif line.quantity > stock:
                adjustments[product_id] = self.set_quantity(product_id, stock, stock)

        if adjustments:
            logger.info("cart_reconciled", cart_id=str(self.id), adjustments=adjustments)
        return adjustments

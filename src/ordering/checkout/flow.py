"""Checkout flow: one shopper's catalog snapshot and cart.

``Checkout`` is what a presentation layer holds for a session. It keeps the
latest product snapshot so every cart mutation clamps against current stock,
derives browse views and totals on demand, and at checkout reconciles the
cart, builds the payload and hands it to the order submitter.

Cart events are raised on the aggregate, so an initialized ordering domain
context must be active.
"""

import structlog

from catalogue.browsing.filter_spec import FilterSpec
from catalogue.browsing.pipeline import apply_filters
from catalogue.product.product import Product, index_by_id
from catalogue.service import get_catalog_service
from catalogue.service.port import CatalogService
from ordering.cart.cart import ShoppingCart
from ordering.cart.contents import CartContents
from ordering.cart.pricing import SHIPPING_COST, TAX_RATE, PricedOrder, total
from ordering.checkout.payload import PaymentMethod, build_order_payload
from ordering.errors import OrderSubmissionError
from ordering.submission import get_submitter
from ordering.submission.port import OrderSubmitter, SubmissionResult

logger = structlog.get_logger(__name__)


class Checkout:
    def __init__(
        self,
        cart: ShoppingCart | None = None,
        catalog: CatalogService | None = None,
        submitter: OrderSubmitter | None = None,
        shipping_cost=SHIPPING_COST,
        tax_rate=TAX_RATE,
    ) -> None:
        self.cart = cart if cart is not None else ShoppingCart.create()
        self.shipping_cost = shipping_cost
        self.tax_rate = tax_rate
        self._catalog = catalog
        self._submitter = submitter
        self._snapshot: list[Product] = []
        self._products: dict[str, Product] = {}

    # -------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------
    def refresh(self, products: list[Product] | None = None) -> list[Product]:
        """Replace the product snapshot, fetching from the catalog service when none is given."""
        if products is None:
            products = (self._catalog or get_catalog_service()).list_products()

        self._snapshot = list(products)
        self._products = index_by_id(self._snapshot)
        return list(self._snapshot)

    def product(self, product_id) -> Product | None:
        return self._products.get(str(product_id))

    def browse(self, spec: FilterSpec | None = None) -> list[Product]:
        return apply_filters(self._snapshot, spec if spec is not None else FilterSpec())

    def _stock_of(self, product_id) -> int:
        product = self.product(product_id)
        return product.stock if product is not None else 0

    # -------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------
    def add_to_cart(self, product_id, quantity: int = 1) -> int:
        return self.cart.add_or_increment(product_id, quantity, self._stock_of(product_id))

    def set_quantity(self, product_id, quantity: int) -> int:
        return self.cart.set_quantity(product_id, quantity, self._stock_of(product_id))

    def remove(self, product_id) -> None:
        self.cart.remove(product_id)

    def lines(self) -> CartContents:
        return self.cart.lines(self._products)

    def priced_order(self) -> PricedOrder:
        return total(self.lines(), shipping_cost=self.shipping_cost, tax_rate=self.tax_rate)

    # -------------------------------------------------------------------
    # Order placement
    # -------------------------------------------------------------------
    def place_order(
        self,
        shipping_address: str | None,
        payment_method: PaymentMethod | str = PaymentMethod.CREDIT_CARD,
    ) -> SubmissionResult:
        """Reconcile, build the payload and submit it.

        On success the cart is emptied. On rejection the cart is kept and
        ``OrderSubmissionError`` carries the submitter's reason.
        """
        self.cart.reconcile(self._products)

        payload = build_order_payload(
            self.lines(),
            shipping_address,
            payment_method,
            shipping_cost=self.shipping_cost,
            tax_rate=self.tax_rate,
        )

        result = (self._submitter or get_submitter()).submit(payload)
        if not result.success:
            logger.warning(
                "order_submission_failed",
                cart_id=str(self.cart.id),
                reason=result.failure_reason,
            )
            raise OrderSubmissionError({"order": [result.failure_reason or "Failed to place order"]})

        self.cart.clear()
        logger.info(
            "order_placed",
            cart_id=str(self.cart.id),
            order_id=result.order_id,
            total_amount=str(payload.total_amount),
            line_count=len(payload.items),
        )
        return result

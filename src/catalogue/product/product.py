"""Product value object as supplied by the Catalog Service.

The storefront never edits product data. Text fields are kept verbatim;
HTML escaping belongs to the presentation layer. A catalog refresh replaces
the whole snapshot; the cart reads stock from the latest snapshot before
every quantity change.
"""

from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, Integer, String, Text

from catalogue.domain import catalogue

LOW_STOCK_THRESHOLD = 5


class ProductCategory(Enum):
    """Fixed set of catalog categories."""

    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    HOME_AND_GARDEN = "Home & Garden"
    SPORTS = "Sports"
    BOOKS = "Books"
    TOYS = "Toys"
    BEAUTY = "Beauty"
    FOOD = "Food"


class StockStatus(Enum):
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"


@catalogue.value_object
class Product:
    """A catalog entry: identity, display data, price and live stock."""

    product_id = String(required=True, max_length=255, sanitize=False)
    name = String(required=True, max_length=255, sanitize=False)
    description = Text(sanitize=False)
    category = String(required=True, choices=ProductCategory, sanitize=False)
    price = Float(required=True, min_value=0.0)
    stock = Integer(default=0, min_value=0)
    rating = Float(min_value=0.0, max_value=5.0)
    review_count = Integer(default=0, min_value=0)
    image_url = String(max_length=1024, sanitize=False)

    @invariant.post
    def product_id_must_not_be_blank(self):
        if self.product_id is not None and not self.product_id.strip():
            raise ValidationError({"product_id": ["Product id must not be blank"]})


def stock_status(product: Product) -> StockStatus:
    """Badge shown on product cards."""
    if not product.stock:
        return StockStatus.OUT_OF_STOCK
    if product.stock < LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def index_by_id(products) -> dict[str, Product]:
    """Map product ids to products; a later duplicate replaces an earlier one."""
    return {product.product_id: product for product in products}

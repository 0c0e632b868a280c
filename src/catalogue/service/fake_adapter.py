"""In-memory catalog service for development and testing.

Holds a list of products in the order they were loaded. Tests replace the
list wholesale to simulate a catalog refresh (price changes, stock
depletion, delisted products).
"""

from catalogue.product.product import Product, index_by_id
from catalogue.service.port import CatalogService


class InMemoryCatalogService(CatalogService):
    """Catalog service backed by a Python list."""

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = list(products or [])
        self.calls: list[dict] = []

    def load(self, products: list[Product]) -> None:
        """Replace the whole catalog."""
        self._products = list(products)

    def list_products(self) -> list[Product]:
        self.calls.append({"method": "list_products"})
        return list(self._products)

    def get_product(self, product_id: str) -> Product | None:
        self.calls.append({"method": "get_product", "product_id": product_id})
        return index_by_id(self._products).get(product_id)

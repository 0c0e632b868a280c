"""Catalog Service port (abstract interface).

The storefront reads products through this contract. Adapters own the
transport, timeouts and caching; the browse pipeline and the cart only ever
see the snapshot an adapter returned.
"""

from abc import ABC, abstractmethod

from catalogue.product.product import Product


class CatalogService(ABC):
    """Abstract catalog source."""

    @abstractmethod
    def list_products(self) -> list[Product]:
        """Return the current catalog snapshot in server order."""
        ...

    @abstractmethod
    def get_product(self, product_id: str) -> Product | None:
        """Return a single product, or None if it no longer exists."""
        ...

"""Where the storefront gets its catalog snapshot from.

``Checkout.refresh()`` asks ``get_catalog_service()`` for products when the
caller does not hand a list in. Until a real adapter is installed with
``set_catalog_service()``, the catalog is an empty in-memory one.
"""

from catalogue.service.fake_adapter import InMemoryCatalogService
from catalogue.service.port import CatalogService

_current_service: CatalogService | None = None


def get_catalog_service() -> CatalogService:
    global _current_service
    if _current_service is None:
        _current_service = InMemoryCatalogService()
    return _current_service


def set_catalog_service(service: CatalogService) -> None:
    """Install the adapter every subsequent catalog refresh reads from."""
    global _current_service
    _current_service = service


def reset_catalog_service() -> None:
    """Forget the installed adapter; the next lookup starts from an empty catalog."""
    global _current_service
    _current_service = None

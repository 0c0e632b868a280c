"""Catalog filter/sort pipeline.

``apply_filters`` derives the displayed product list from a catalog
snapshot. The five stages always run, in this order::

    category -> min price -> max price -> search text -> sort

Filtering happens before sorting so the sort only sees the reduced set.
Every stage returns a new list; the input sequence is never mutated.
"""

from collections.abc import Iterable

import structlog

from catalogue.browsing.filter_spec import FilterSpec, SortKey, is_all_categories
from catalogue.product.product import Product
from shared.money import parse_amount, to_decimal

logger = structlog.get_logger(__name__)


def filter_by_category(products: Iterable[Product], category: str | None) -> list[Product]:
    if is_all_categories(category):
        return list(products)
    return [p for p in products if p.category == category]


def filter_by_min_price(products: Iterable[Product], min_price) -> list[Product]:
    bound = parse_amount(min_price)
    if bound is None:
        return list(products)
    return [p for p in products if to_decimal(p.price) >= bound]


def filter_by_max_price(products: Iterable[Product], max_price) -> list[Product]:
    bound = parse_amount(max_price)
    if bound is None:
        return list(products)
    return [p for p in products if to_decimal(p.price) <= bound]


def filter_by_search_text(products: Iterable[Product], search_text: str | None) -> list[Product]:
    if not search_text:
        return list(products)

    needle = search_text.lower()
    return [
        p for p in products if needle in (p.name or "").lower() or needle in (p.description or "").lower()
    ]


def sort_products(products: Iterable[Product], sort_key) -> list[Product]:
    """Stable sort by the selected key; ``none`` keeps catalog order."""
    key = SortKey(sort_key) if sort_key else SortKey.NONE

    if key == SortKey.PRICE_ASC:
        return sorted(products, key=lambda p: to_decimal(p.price))
    if key == SortKey.PRICE_DESC:
        return sorted(products, key=lambda p: to_decimal(p.price), reverse=True)
    if key == SortKey.RATING:
        return sorted(products, key=lambda p: p.rating or 0, reverse=True)
    return list(products)


def apply_filters(products: Iterable[Product], spec: FilterSpec) -> list[Product]:
    """Run the full pipeline for one browse request."""
    snapshot = list(products)
    result = filter_by_category(snapshot, spec.category)
    result = filter_by_min_price(result, spec.min_price)
    result = filter_by_max_price(result, spec.max_price)
    result = filter_by_search_text(result, spec.search_text)
    result = sort_products(result, spec.sort_key)

    logger.debug(
        "catalog_filtered",
        category=spec.category,
        sort_key=spec.sort_key,
        input_count=len(snapshot),
        result_count=len(result),
    )
    return result

"""Domain service: filtering, ordering and paging of products.

Pure functions over an in-memory sequence. They never touch storage, so
the same logic backs the JSON repository, the fakes used in tests, and
anything else that can hand over a list of products.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import (
    Page,
    PageInfo,
    SearchCriteria,
    SortField,
    SortOrder,
)

T = TypeVar("T")


def search_products(
    products: Iterable[Product], criteria: SearchCriteria
) -> list[Product]:
    """Apply every set filter in ``criteria`` (logical AND), then sort."""
    results = list(products)

    if criteria.category:
        needle = criteria.category.lower()
        results = [p for p in results if needle in p.category.lower()]

    if criteria.min_price is not None:
        results = [p for p in results if p.price >= criteria.min_price]

    if criteria.max_price is not None:
        results = [p for p in results if p.price <= criteria.max_price]

    if criteria.text:
        needle = criteria.text.lower()
        results = [
            p
            for p in results
            if needle in p.name.lower() or needle in (p.description or "").lower()
        ]

    if criteria.sort_by is not None:
        results = sort_products(results, criteria.sort_by, criteria.sort_order)

    return results


def sort_products(
    products: Iterable[Product],
    sort_by: SortField,
    order: SortOrder = SortOrder.ASC,
) -> list[Product]:
    """Stable sort: products with equal keys keep their relative order,
    in both directions."""

    def key(product: Product) -> Any:
        value = getattr(product, sort_by.attribute)
        return value.lower() if isinstance(value, str) else value

    return sorted(products, key=key, reverse=order is SortOrder.DESC)


def paginate(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    """Slice one 1-indexed page out of ``items``.

    A page past the end is not an error: it comes back empty with the
    metadata still describing the whole result set.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    total = len(items)
    offset = (page - 1) * page_size
    return Page(
        items=list(items[offset : offset + page_size]),
        info=PageInfo(
            current_page=page,
            total_pages=math.ceil(total / page_size),
            total_items=total,
            items_per_page=page_size,
            has_next_page=offset + page_size < total,
            has_prev_page=page > 1,
        ),
    )


def distinct_categories(products: Iterable[Product]) -> list[str]:
    return sorted({p.category for p in products})

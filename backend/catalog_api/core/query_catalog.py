"""Catalog Queries - pure filtering, search, pagination and aggregation.

Invariants:
    - Inputs are never mutated; every function returns new lists/dicts
    - Category filter and name search are case-insensitive; stored casing preserved
    - paginate() past the last page yields an empty slice, not an error
    - Stats keys use the stored category spelling
"""

import math
from collections import Counter
from collections.abc import Sequence
from typing import TypeVar

from catalog_api.core.domain_types import PageRequest
from catalog_api.core.repository_protocols import ProductLike

P = TypeVar("P", bound=ProductLike)


def filter_by_category(products: Sequence[P], category: str | None) -> list[P]:
    if not category:
        return list(products)
    wanted = category.lower()
    return [p for p in products if p.category.lower() == wanted]


def search_by_name(products: Sequence[P], term: str) -> list[P]:
    needle = term.lower()
    return [p for p in products if needle in p.name.lower()]


def paginate(items: Sequence[P], window: PageRequest) -> tuple[list[P], int]:
    """Return (page slice, total page count)."""
    total_pages = math.ceil(len(items) / window.limit)
    return list(items[window.start:window.end]), total_pages


def count_by_category(products: Sequence[ProductLike]) -> dict[str, int]:
    return dict(Counter(p.category for p in products))

"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId wraps int, always positive once assigned by the store
    - ProductField values are the JSON (wire) names, not Python attribute names
    - PageRequest page and limit are always >= 1

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", int)


# ─── Enums ───────────────────────────────────────────────────────

class ProductField(str, Enum):
    """Client-writable product fields, in the order validation checks them."""
    NAME = "name"
    DESCRIPTION = "description"
    PRICE = "price"
    CATEGORY = "category"
    IN_STOCK = "inStock"


TEXT_FIELDS = (ProductField.NAME, ProductField.DESCRIPTION, ProductField.CATEGORY)


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class PageRequest:
    """Resolved pagination window over a filtered product list."""
    page: int
    limit: int

    @property
    def start(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def end(self) -> int:
        return self.page * self.limit

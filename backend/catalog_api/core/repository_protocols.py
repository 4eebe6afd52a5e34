"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - Routes and app assembly reach storage through CatalogRepository only
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: the in-memory store never suspends, so a handler's
      read-then-write against it cannot interleave with another request
"""

from typing import Any, Protocol

from catalog_api.core.domain_types import ProductId


class ProductLike(Protocol):
    """Structural contract for product records consumed by core queries."""
    id: int
    name: str
    category: str


class CatalogRepository(Protocol):
    """Contract for product storage - implemented by shell (CatalogStore)."""
    def __len__(self) -> int: ...
    def list(self) -> list: ...
    def find_by_id(self, product_id: ProductId) -> Any | None: ...
    def insert(self, draft: dict[str, Any]) -> Any: ...
    def update(self, product_id: ProductId, changes: dict[str, Any]) -> Any | None: ...
    def delete(self, product_id: ProductId) -> Any | None: ...

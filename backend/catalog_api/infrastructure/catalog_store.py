"""Catalog Store - owned, in-memory product storage.

Invariants:
    - Product ids are unique and strictly increasing; deleted ids are never reused
    - Listing order is insertion order
    - Callers receive copies: mutating a returned Product never touches the store
    - No method awaits, so each call is atomic on the event loop

Design Decisions:
    - One instance per app (app.state.catalog_store) instead of a module-level
      list: each test builds a fresh store, no shared global state
    - _last_id tracked separately from max(ids): deleting the newest product
      must not let its id be handed out again
"""

import logging
from collections.abc import Iterable
from typing import Any

from catalog_api.core.domain_types import ProductId
from catalog_api.schemas.product import Product

logger = logging.getLogger(__name__)

SEED_PRODUCTS: tuple[dict[str, Any], ...] = (
    {"id": 1, "name": "Laptop", "description": "15-inch screen",
     "price": 18999.99, "category": "Electronics", "inStock": True},
    {"id": 2, "name": "Mouse", "description": "Wireless mouse",
     "price": 399.99, "category": "Accessories", "inStock": True},
    {"id": 3, "name": "Keyboard", "description": "Mechanical RGB keyboard",
     "price": 1299.99, "category": "Accessories", "inStock": True},
    {"id": 4, "name": "Headphones", "description": "Noise cancelling",
     "price": 2599.99, "category": "Electronics", "inStock": False},
    {"id": 5, "name": "Monitor", "description": "27-inch display",
     "price": 3499.99, "category": "Electronics", "inStock": True},
)


class CatalogStore:
    """In-memory product table keyed by id."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: dict[ProductId, Product] = {}
        self._last_id = 0
        for product in products:
            if product.id in self._products:
                raise ValueError(f"Duplicate product id {product.id}")
            self._products[ProductId(product.id)] = product.model_copy()
            self._last_id = max(self._last_id, product.id)

    @classmethod
    def seeded(cls) -> "CatalogStore":
        return cls(Product.model_validate(p) for p in SEED_PRODUCTS)

    def __len__(self) -> int:
        return len(self._products)

    def list(self) -> list[Product]:
        return [p.model_copy() for p in self._products.values()]

    def find_by_id(self, product_id: ProductId) -> Product | None:
        product = self._products.get(product_id)
        return product.model_copy() if product else None

    def insert(self, draft: dict[str, Any]) -> Product:
        """Assign the next id and store. draft uses wire names (inStock)."""
        product_id = ProductId(self._last_id + 1)
        product = Product.model_validate({**draft, "id": product_id})
        self._products[product_id] = product
        self._last_id = product_id
        logger.info(f"Product {product_id} created", extra={"product_id": product_id})
        return product.model_copy()

    def update(
        self, product_id: ProductId, changes: dict[str, Any],
    ) -> Product | None:
        """Overlay changes on the stored record. id is never overwritten."""
        current = self._products.get(product_id)
        if current is None:
            return None
        merged = {**current.model_dump(by_alias=True), **changes, "id": product_id}
        product = Product.model_validate(merged)
        self._products[product_id] = product
        logger.info(f"Product {product_id} updated", extra={"product_id": product_id})
        return product.model_copy()

    def delete(self, product_id: ProductId) -> Product | None:
        product = self._products.pop(product_id, None)
        if product is not None:
            logger.info(
                f"Product {product_id} deleted", extra={"product_id": product_id},
            )
        return product

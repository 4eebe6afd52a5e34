"""Product Routes - list, search, stats and per-item CRUD over the catalog store.

Invariants:
    - Every route requires the API key (router-level dependency)
    - Registration order is dispatch order: /search and /stats are declared
      before /{product_id}, otherwise the parameter route would swallow them
    - Handlers never await between reading and writing the store
    - Failure paths raise typed errors; the store is untouched when they do

Design Decisions:
    - product_id taken as str and parsed by parse_product_id: a non-numeric id
      is simply a product that does not exist (404), not a 422
    - page/limit taken as str: unparseable values fall back to defaults
"""

from typing import Any

from fastapi import APIRouter, Depends, status

from catalog_api.api.dependencies import (
    get_app_settings,
    get_catalog_store,
    require_api_key,
    validated_product_changes,
    validated_product_draft,
)
from catalog_api.config import Settings
from catalog_api.core.domain_types import ProductId
from catalog_api.core.errors import NotFoundError, ValidationError
from catalog_api.core.parse_params import parse_page_request, parse_product_id
from catalog_api.core.query_catalog import (
    count_by_category,
    filter_by_category,
    paginate,
    search_by_name,
)
from catalog_api.core.repository_protocols import CatalogRepository
from catalog_api.schemas.product import (
    CatalogStats,
    Product,
    ProductDeleted,
    ProductPage,
    ProductSearchResult,
)

router = APIRouter(
    prefix="/api/products",
    tags=["products"],
    dependencies=[Depends(require_api_key)],
)

PRODUCT_NOT_FOUND = "Product not found"


def _require_product_id(raw: str) -> ProductId:
    product_id = parse_product_id(raw)
    if product_id is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return product_id


@router.get("", response_model=ProductPage)
async def list_products(
    category: str | None = None,
    page: str | None = None,
    limit: str | None = None,
    store: CatalogRepository = Depends(get_catalog_store),
    settings: Settings = Depends(get_app_settings),
):
    """List products, optionally filtered by category, one page at a time."""
    window = parse_page_request(page, limit, settings.default_page_size)
    matches = filter_by_category(store.list(), category)
    products, total_pages = paginate(matches, window)
    return ProductPage(
        page=window.page,
        limit=window.limit,
        total_pages=total_pages,
        total_items=len(matches),
        products=products,
    )


@router.get("/search", response_model=ProductSearchResult)
async def search_products(
    name: str | None = None,
    store: CatalogRepository = Depends(get_catalog_store),
):
    """Case-insensitive substring search on product name."""
    if not name:
        raise ValidationError("Please provide a search keyword")
    results = search_by_name(store.list(), name)
    if not results:
        raise NotFoundError("No products match your search")
    return ProductSearchResult(count=len(results), results=results)


@router.get("/stats", response_model=CatalogStats)
async def catalog_stats(store: CatalogRepository = Depends(get_catalog_store)):
    """Product counts over the whole, unfiltered catalog."""
    products = store.list()
    return CatalogStats(
        total_products=len(products),
        count_by_category=count_by_category(products),
    )


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str, store: CatalogRepository = Depends(get_catalog_store),
):
    product = store.find_by_id(_require_product_id(product_id))
    if product is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return product


@router.post(
    "", response_model=Product, status_code=status.HTTP_201_CREATED,
)
async def create_product(
    draft: dict[str, Any] = Depends(validated_product_draft),
    store: CatalogRepository = Depends(get_catalog_store),
):
    return store.insert(draft)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    changes: dict[str, Any] = Depends(validated_product_changes),
    store: CatalogRepository = Depends(get_catalog_store),
):
    """Partial update: absent or null fields keep their stored value."""
    product = store.update(_require_product_id(product_id), changes)
    if product is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return product


@router.delete("/{product_id}", response_model=ProductDeleted)
async def delete_product(
    product_id: str, store: CatalogRepository = Depends(get_catalog_store),
):
    deleted = store.delete(_require_product_id(product_id))
    if deleted is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return ProductDeleted(deleted_product=deleted)

"""Product Schemas - Pydantic models for stored records and API responses.

Invariants:
    - Wire names are camelCase (inStock, totalPages, ...); Python names snake_case
    - Product.id is assigned by the store, never taken from a request body
    - Request bodies are NOT parsed through these models: the validation gate in
      core/enforce_product.py owns payload rules and their error messages

Design Decisions:
    - alias_generator=to_camel over per-field aliases: one rule for every schema
    - price as int | float: smart union keeps 999 as 999, not 999.0
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Product(CamelModel):
    """A catalog product as stored and returned."""
    id: int
    name: str
    description: str
    price: int | float
    category: str
    in_stock: bool


class ProductPage(CamelModel):
    page: int
    limit: int
    total_pages: int
    total_items: int
    products: list[Product]


class ProductSearchResult(CamelModel):
    count: int
    results: list[Product]


class ProductDeleted(CamelModel):
    message: str = "Product deleted successfully"
    deleted_product: Product


class CatalogStats(CamelModel):
    total_products: int
    count_by_category: dict[str, int]

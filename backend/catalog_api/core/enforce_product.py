"""Product Payload Enforcement - pure validation gate for create and update bodies.

Invariants:
    - Every check returns None (pass) or a human-readable reason (fail)
    - First failing rule wins; violations are never aggregated
    - Never raises; the api layer turns a reason into ValidationError
    - bool is not a number: True/False are rejected as price
    - NaN and infinities are not numbers either: they cannot round-trip as JSON

Design Decisions:
    - Reason strings over exceptions: keeps core pure and trivially testable
    - Full mode (create) and partial mode (update) share the per-field type rules
"""

import math
from typing import Any

from catalog_api.core.domain_types import ProductField, TEXT_FIELDS

MISSING_FIELDS = "All product fields are required"
NOT_AN_OBJECT = "Request body must be a JSON object"
PRICE_NOT_NUMBER = "Price must be a number"
IN_STOCK_NOT_BOOL = "inStock must be boolean"


def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def is_non_empty_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def check_product_payload(payload: Any) -> str | None:
    """Full validation for create: every field present, non-null, well-typed."""
    if not isinstance(payload, dict):
        return NOT_AN_OBJECT
    for field in ProductField:
        if payload.get(field.value) is None:
            return MISSING_FIELDS
    for field in TEXT_FIELDS:
        if payload[field.value] == "":
            return MISSING_FIELDS
    return _check_field_types(payload)


def check_product_changes(payload: Any) -> str | None:
    """Partial validation for update: only supplied, non-null fields are checked."""
    if not isinstance(payload, dict):
        return NOT_AN_OBJECT
    supplied = {k: v for k, v in payload.items() if v is not None}
    return _check_field_types(supplied)


def extract_changes(payload: dict) -> dict[str, Any]:
    """Keep only writable, non-null fields. Drops id and unknown keys."""
    writable = {field.value for field in ProductField}
    return {
        key: value for key, value in payload.items()
        if key in writable and value is not None
    }


def _check_field_types(payload: dict) -> str | None:
    price = payload.get(ProductField.PRICE.value)
    if price is not None and not is_number(price):
        return PRICE_NOT_NUMBER
    in_stock = payload.get(ProductField.IN_STOCK.value)
    if in_stock is not None and not isinstance(in_stock, bool):
        return IN_STOCK_NOT_BOOL
    for field in TEXT_FIELDS:
        value = payload.get(field.value)
        if value is not None and not is_non_empty_text(value):
            return f"{field.value} must be a non-empty string"
    return None

"""Product Payload Enforcement - tests for the pure validation gate.

Tests cover:
    - check_product_payload passes a complete, well-typed payload
    - missing, null and empty fields report "All product fields are required"
    - price must be a finite number (bool, NaN, infinities rejected),
      inStock must be boolean
    - first failing rule wins
    - check_product_changes only checks supplied fields
    - extract_changes drops id, unknown keys and nulls
"""

import pytest

from catalog_api.core.enforce_product import (
    IN_STOCK_NOT_BOOL,
    MISSING_FIELDS,
    NOT_AN_OBJECT,
    PRICE_NOT_NUMBER,
    check_product_changes,
    check_product_payload,
    extract_changes,
)


def _valid_payload(**overrides) -> dict:
    payload = {
        "name": "Webcam",
        "description": "1080p USB camera",
        "price": 899.5,
        "category": "Accessories",
        "inStock": True,
    }
    payload.update(overrides)
    return payload


# ─── check_product_payload ───────────────────────────────────────

def test_complete_payload_passes():
    assert check_product_payload(_valid_payload()) is None


def test_integer_price_passes():
    assert check_product_payload(_valid_payload(price=999)) is None


def test_out_of_stock_passes():
    assert check_product_payload(_valid_payload(inStock=False)) is None


@pytest.mark.parametrize(
    "field", ["name", "description", "price", "category", "inStock"],
)
def test_missing_field_rejected(field):
    payload = _valid_payload()
    del payload[field]
    assert check_product_payload(payload) == MISSING_FIELDS


@pytest.mark.parametrize(
    "field", ["name", "description", "price", "category", "inStock"],
)
def test_null_field_rejected(field):
    assert check_product_payload(_valid_payload(**{field: None})) == MISSING_FIELDS


def test_empty_name_rejected():
    assert check_product_payload(_valid_payload(name="")) == MISSING_FIELDS


def test_zero_price_is_present():
    assert check_product_payload(_valid_payload(price=0)) is None


def test_string_price_rejected():
    assert check_product_payload(_valid_payload(price="12.50")) == PRICE_NOT_NUMBER


def test_bool_price_rejected():
    assert check_product_payload(_valid_payload(price=True)) == PRICE_NOT_NUMBER


@pytest.mark.parametrize("price", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_price_rejected(price):
    assert check_product_payload(_valid_payload(price=price)) == PRICE_NOT_NUMBER
    assert check_product_changes({"price": price}) == PRICE_NOT_NUMBER


def test_huge_integer_price_passes():
    assert check_product_payload(_valid_payload(price=10 ** 400)) is None


def test_string_in_stock_rejected():
    assert check_product_payload(_valid_payload(inStock="yes")) == IN_STOCK_NOT_BOOL


def test_integer_in_stock_rejected():
    assert check_product_payload(_valid_payload(inStock=1)) == IN_STOCK_NOT_BOOL


def test_non_string_name_rejected():
    error = check_product_payload(_valid_payload(name=42))
    assert error == "name must be a non-empty string"


def test_first_failing_rule_wins():
    payload = _valid_payload(price="free", inStock="maybe")
    assert check_product_payload(payload) == PRICE_NOT_NUMBER

    del payload["name"]
    assert check_product_payload(payload) == MISSING_FIELDS


@pytest.mark.parametrize("payload", [None, [], "product", 3])
def test_non_object_payload_rejected(payload):
    assert check_product_payload(payload) == NOT_AN_OBJECT


# ─── check_product_changes ───────────────────────────────────────

def test_partial_changes_pass():
    assert check_product_changes({"price": 999}) is None


def test_empty_changes_pass():
    assert check_product_changes({}) is None


def test_null_fields_ignored_in_changes():
    assert check_product_changes({"name": None, "inStock": None}) is None


def test_changes_type_checked():
    assert check_product_changes({"price": "999"}) == PRICE_NOT_NUMBER
    assert check_product_changes({"inStock": "false"}) == IN_STOCK_NOT_BOOL


def test_changes_reject_empty_text():
    assert check_product_changes({"category": ""}) == "category must be a non-empty string"


def test_changes_non_object_rejected():
    assert check_product_changes(["price", 999]) == NOT_AN_OBJECT


# ─── extract_changes ─────────────────────────────────────────────

def test_extract_changes_keeps_writable_fields_only():
    changes = extract_changes(
        {"id": 99, "price": 10, "name": None, "colour": "red", "inStock": False},
    )
    assert changes == {"price": 10, "inStock": False}

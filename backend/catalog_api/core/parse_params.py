"""Parameter Parsing - total conversions from raw path/query strings.

Invariants:
    - No function here raises; unparseable input yields None or the default
    - Results are always positive integers when not None

Design Decisions:
    - Strict int() over prefix parsing: "2abc" is rejected, not read as 2
"""

from catalog_api.core.domain_types import PageRequest, ProductId


def parse_positive_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value > 0 else None


def parse_product_id(raw: str) -> ProductId | None:
    """Path segment -> ProductId, or None when it cannot name a product."""
    value = parse_positive_int(raw)
    return ProductId(value) if value is not None else None


def parse_page_request(
    page: str | None, limit: str | None, default_limit: int = 2,
) -> PageRequest:
    """Resolve page/limit query values, falling back to 1 and default_limit."""
    return PageRequest(
        page=parse_positive_int(page) or 1,
        limit=parse_positive_int(limit) or default_limit,
    )

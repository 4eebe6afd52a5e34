"""Request Dependencies - auth gate, validation gate and store access for routes.

Invariants:
    - require_api_key is a router-level dependency: FastAPI resolves it before
      any endpoint parameter dependency, so a denied request never reaches
      validation or the handler (no partial side effects)
    - Validation dependencies raise ValidationError with the gate's first reason
    - Store and settings are read from app.state, never from module globals
"""

import logging
from typing import Any

from fastapi import Body, Request

from catalog_api.config import Settings
from catalog_api.core.enforce_auth import check_api_key
from catalog_api.core.enforce_product import (
    check_product_changes,
    check_product_payload,
    extract_changes,
)
from catalog_api.core.errors import UnauthorizedError, ValidationError
from catalog_api.core.repository_protocols import CatalogRepository

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog_store(request: Request) -> CatalogRepository:
    return request.app.state.catalog_store


async def require_api_key(request: Request) -> None:
    """Auth gate - shared-secret header check."""
    settings: Settings = request.app.state.settings
    supplied = request.headers.get(settings.api_key_header)
    reason = check_api_key(supplied, settings.api_key)
    if reason:
        logger.warning(
            "API key rejected",
            extra={"method": request.method, "path": request.url.path},
        )
        raise UnauthorizedError(reason)


async def validated_product_draft(payload: Any = Body(None)) -> dict[str, Any]:
    """Validation gate (create) - full payload, all fields required."""
    reason = check_product_payload(payload)
    if reason:
        raise ValidationError(reason)
    return extract_changes(payload)


async def validated_product_changes(payload: Any = Body(None)) -> dict[str, Any]:
    """Validation gate (update) - only supplied fields are checked and kept."""
    reason = check_product_changes(payload)
    if reason:
        raise ValidationError(reason)
    return extract_changes(payload)

"""Error Handlers - global exception handlers translating failures to the error envelope.

Invariants:
    - CatalogError -> its http_status with {status, errorType, message}
    - RequestValidationError (malformed JSON body) -> 400 ValidationError
    - Starlette 404/405 (no route matched) -> 404 NotFoundError "Route not found"
    - Other Starlette HTTP errors -> the matching typed error (400 body parse
      failure -> ValidationError), anything unmapped -> InternalError
    - Exception (catch-all) -> 500 InternalError, never leaks internal details

Design Decisions:
    - Four-layer handler: domain (CatalogError), framework validation,
      framework HTTP, catch-all (Exception)
    - Extracted from main.py: create_app stays a flat list of wiring steps
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.core.enforce_auth import INVALID_API_KEY
from catalog_api.core.errors import (
    CatalogError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"
MALFORMED_BODY = "Malformed JSON body"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_catalog_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def error_response(request: Request, exc: CatalogError) -> JSONResponse:
    """Log a typed failure and render its envelope."""
    logger.warning(
        f"{exc.error_type}: {exc.message}",
        extra={
            "error_type": exc.error_type,
            "status_code": exc.http_status,
            "path": request.url.path,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_catalog_error_handler(app: FastAPI) -> None:
    """Register typed catalog error handler."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        """Handle all typed catalog failures."""
        return error_response(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register framework request validation handler (body parsing)."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Request validation failed on {request.url.path}: {exc.errors()}",
        )
        return error_response(request, ValidationError(_describe_validation_error(exc)))


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for HTTP errors raised by the router itself."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return error_response(request, _translate_http_error(exc))


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_type": type(exc).__name__, "path": request.url.path},
        )
        return JSONResponse(
            status_code=InternalError.http_status,
            content=InternalError().to_response(),
        )


def _translate_http_error(exc: StarletteHTTPException) -> CatalogError:
    """Framework HTTP errors onto the four error types; never a fifth."""
    if exc.status_code in (404, 405):
        return NotFoundError(ROUTE_NOT_FOUND)
    if exc.status_code == 401:
        return UnauthorizedError(INVALID_API_KEY)
    if exc.status_code == 400:
        return ValidationError(MALFORMED_BODY)
    if 400 < exc.status_code < 500:
        return ValidationError(str(exc.detail))
    return InternalError()


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        return MALFORMED_BODY
    return "Invalid request data"

"""Request Logging - records method and path before any other processing.

Invariants:
    - Outermost user middleware: runs before body parsing, auth and dispatch
    - Fire-and-forget: never alters the request or the response
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        logger.info(
            f"{request.method} {path}",
            extra={"method": request.method, "path": path},
        )
        response = await call_next(request)
        logger.debug(
            f"{request.method} {path} -> {response.status_code}",
            extra={"status_code": response.status_code},
        )
        return response

"""Error Hierarchy - typed exceptions for every expected catalog failure.

Invariants:
    - Every HTTP-facing error has an error_type (str) and an http_status (int)
    - to_response() produces the single REST envelope {status, errorType, message}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CatalogError base: one FastAPI handler catches all
      typed failures (ADR: uniform error shape)
    - error_type defaults to the class name so the wire kind and the Python
      type never drift apart
    - RouteConflictError is NOT a CatalogError: it is raised at app assembly,
      never during a request
"""


class CatalogError(Exception):
    """Base exception for all typed catalog failures."""

    http_status: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def error_type(self) -> str:
        return type(self).__name__

    def to_response(self) -> dict:
        """Convert to standardized REST error envelope."""
        return {
            "status": "error",
            "errorType": self.error_type,
            "message": self.message,
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class ValidationError(CatalogError):
    """Malformed or missing payload fields / query parameters."""
    http_status = 400
    default_message = "Validation Error"


class UnauthorizedError(CatalogError):
    """Missing or mismatched API key."""
    http_status = 401
    default_message = "Unauthorized"


class NotFoundError(CatalogError):
    """No matching resource or route."""
    http_status = 404
    default_message = "Not Found"


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalError(CatalogError):
    """Any unanticipated failure, translated at the boundary."""
    http_status = 500


# ─── Assembly Errors ────────────────────────────────────────────

class RouteConflictError(Exception):
    """Route table contains duplicate or shadowed registrations."""

    def __init__(self, conflicts: list):
        self.conflicts = conflicts
        super().__init__(
            "Conflicting route registrations: "
            + "; ".join(str(c) for c in conflicts),
        )

"""Route Guard - refuses to build an app whose route table contains dead registrations.

Invariants:
    - Checks routers in the order they will be included, before the app serves traffic
    - Any duplicate or shadowed (method, path) aborts assembly with RouteConflictError
    - An APIRouter's route paths already carry its prefix, so keys are full paths

Design Decisions:
    - Reads the routers, not app.router.routes: include_router may wrap an
      included router in a single opaque route instead of copying its routes
"""

import logging
from collections.abc import Sequence

from fastapi import APIRouter
from starlette.routing import Route

from catalog_api.core.errors import RouteConflictError
from catalog_api.core.route_table import (
    RouteKey,
    expand_route_keys,
    find_route_conflicts,
)

logger = logging.getLogger(__name__)


def registered_route_keys(routers: Sequence[APIRouter]) -> list[RouteKey]:
    """Route keys in the order the app will try them once the routers are included."""
    return expand_route_keys(
        (route.path, route.methods or ())
        for router in routers
        for route in router.routes
        if isinstance(route, Route)
    )


def assert_route_table(routers: Sequence[APIRouter]) -> None:
    conflicts = find_route_conflicts(registered_route_keys(routers))
    if conflicts:
        for conflict in conflicts:
            logger.error(f"Dead route registration: {conflict}")
        raise RouteConflictError(conflicts)

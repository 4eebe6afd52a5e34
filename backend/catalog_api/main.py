"""Product Catalog API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Request pipeline: request logging -> body parsing -> auth -> dispatch
      -> validation -> handler, with 404 fallback and error translation
    - Route table checked for duplicate/shadowed registrations before serving
    - Each app owns its CatalogStore (app.state.catalog_store)

Design Decisions:
    - create_app() factory over a bare module-level app: tests build a fresh
      app and store per test; `app` below is the instance uvicorn serves
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from catalog_api.api.error_handlers import register_error_handlers
from catalog_api.api.request_logging import RequestLoggingMiddleware
from catalog_api.api.route_guard import assert_route_table
from catalog_api.api.routes import products
from catalog_api.config import Settings, get_settings
from catalog_api.core.repository_protocols import CatalogRepository
from catalog_api.infrastructure.catalog_store import CatalogStore
from catalog_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, store: CatalogRepository | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    if store is None:
        store = CatalogStore.seeded() if settings.seed_catalog else CatalogStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(f"Catalog API started with {len(app.state.catalog_store)} products")
        yield
        logger.info("Catalog API shutting down")

    app = FastAPI(
        title="Product Catalog API", version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.catalog_store = store

    app.add_middleware(RequestLoggingMiddleware)
    register_error_handlers(app)

    # Routes - explicit registration, order is dispatch order
    routers = [products.router]
    assert_route_table(routers)
    for router in routers:
        app.include_router(router)

    return app


app = create_app()

"""API test fixtures - fresh app, store and httpx client per test.

Invariants:
    - Every test gets its own seeded CatalogStore (no state leaks between tests)
    - `client` sends the valid API key, `anon_client` sends none
    - Settings built explicitly, .env never read

Design Decisions:
    - httpx AsyncClient over ASGITransport: same transport as production ASGI,
      no network, lifespan not triggered (logging left to pytest)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from catalog_api.config import Settings
from catalog_api.infrastructure.catalog_store import CatalogStore
from catalog_api.main import create_app
from tests.api.credentials import API_KEY


@pytest.fixture
def settings():
    return Settings(_env_file=None, api_key=API_KEY, log_format="text")


@pytest.fixture
def store():
    return CatalogStore.seeded()


@pytest.fixture
def app(settings, store):
    return create_app(settings, store)


@pytest.fixture
async def client(app):
    """Client authenticated with the configured API key."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"x-api-key": API_KEY},
    ) as c:
        yield c


@pytest.fixture
async def anon_client(app):
    """Client without credentials."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def new_product():
    return {
        "name": "Webcam",
        "description": "1080p USB camera",
        "price": 899.5,
        "category": "Accessories",
        "inStock": True,
    }

"""
svckit: Test Configuration (conftest.py)
===========================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (all function-scoped, created fresh for each test):
    ├── string_service:   BasicStringService
    ├── catalog:          Seeded Catalog
    ├── catalog_service:  InMemoryCatalogService over `catalog`
    ├── test_client:      HTTPX AsyncClient against a fresh app
    └── strict_client:    Same, with strict book lookup enabled
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["SEED_CATALOG"] = "true"
os.environ["STRICT_BOOK_LOOKUP"] = "false"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from svckit.config import Settings
from svckit.services.book_service import Catalog, InMemoryCatalogService
from svckit.services.string_service import BasicStringService


@pytest.fixture
def string_service():
    return BasicStringService()


@pytest.fixture
def catalog():
    """A catalog seeded with the two default books."""
    catalog = Catalog()
    catalog.seed()
    return catalog


@pytest.fixture
def catalog_service(catalog):
    return InMemoryCatalogService(catalog)


@pytest_asyncio.fixture
async def test_client():
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient configured to talk to a freshly built app.
    Scope:   Each test gets its own catalog; writes never leak between tests.
    How:     Uses ASGITransport to route requests directly to the app.

    Usage:
        async def test_count(test_client):
            response = await test_client.post("/count", json={"s": "hello"})
            assert response.json() == {"v": 5}
    """
    from svckit.main import create_app
    app = create_app(Settings())
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def strict_client():
    """Like test_client, but a catalog miss is reported as an error."""
    from svckit.main import create_app
    app = create_app(Settings(strict_book_lookup=True))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

"""
Pytest configuration and fixtures.
"""
import logging

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ileap.core.config import ConfigFile, get_config
from ileap.create_app import get_app

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@pytest.fixture(scope="session")
def test_config():
    """
    Get test configuration.

    Returns configuration with a small, seeded demo data set.
    """
    return get_config(ConfigFile.TEST)


@pytest_asyncio.fixture(scope="function")
async def test_app(test_config):
    """
    Create FastAPI application with test configuration.

    Runs the application lifespan so the demo data is generated.
    """
    app = get_app(ConfigFile.TEST)
    app.state.config = test_config

    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture(scope="function")
async def test_async_client(test_app):
    """
    Create async HTTP client for API testing.

    Uses httpx AsyncClient with ASGITransport for testing FastAPI endpoints.
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(
        transport=transport, base_url="http://localhost:8000", follow_redirects=True
    ) as ac:
        yield ac

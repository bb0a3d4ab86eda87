"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from shortlink.database.memory import InMemoryLinkStore
from shortlink.service import LinkService
from shortlink.shortcode import ShortCodeGenerator
from shortlink.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def test_store(logger) -> InMemoryLinkStore:
    """Create in-memory link store."""
    return InMemoryLinkStore(logger=logger)


@pytest.fixture
def short_code_generator():
    """Create short code generator with a fixed seed."""
    return ShortCodeGenerator(length=7, seed=7665)


@pytest.fixture
def service(test_store, short_code_generator, logger) -> LinkService:
    """Create service instance."""
    return LinkService(
        store=test_store,
        short_code_generator=short_code_generator,
        logger=logger,
        request_timeout_seconds=1.0,
    )


@pytest.fixture
def config():
    """Configuration pointing at the in-memory store."""
    return Config(_env_file=None, database_url="memory://")


@pytest.fixture
def app(test_store, service, config):
    """Create test FastAPI app."""
    return create_app(
        store_instance=test_store,
        service_instance=service,
        config=config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]

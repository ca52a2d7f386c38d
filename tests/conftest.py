"""Pytest configuration for all tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
import structlog
from httpx import ASGITransport, AsyncClient

from rulebuilder.core.config import get_settings


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop logging configuration left behind by CLI or app startup."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def clean_settings():
    """Clear the settings cache around a test that changes the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the FastAPI app."""
    from rulebuilder.infrastructure.api.app import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

"""Shared pytest fixtures."""
from collections.abc import AsyncGenerator, Generator

import pytest
from httpx import ASGITransport, AsyncClient

from api.main import app
from core.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Rebuild settings for every test so env overrides don't leak."""
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def default_settings() -> Generator[None]:
    """Serve requests with default settings, ignoring any local .env file."""
    app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the app without starting a server."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

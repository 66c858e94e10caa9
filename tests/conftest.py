"""Shared fixtures for the skill catalog and HTTP API tests."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from skillforge.core.rate_limit import limiter
from skillforge.main import create_app
from skillforge.skills.catalog import build_default_registry
from skillforge.skills.executor import SkillExecutor
from skillforge.skills.registry import SkillRegistry


@pytest.fixture(scope="session")
def registry() -> SkillRegistry:
    return build_default_registry()


@pytest.fixture
def executor(registry: SkillRegistry) -> SkillExecutor:
    return SkillExecutor(registry)


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to a fresh application instance."""
    limiter.reset()
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

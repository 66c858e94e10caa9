"""Tests for skills API endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from skillforge.core.config import Settings, get_settings
from skillforge.core.rate_limit import limiter
from skillforge.main import create_app


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    """Test GET /health reports the registry size."""
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "skills": 45}


@pytest.mark.asyncio
async def test_list_skills(client: AsyncClient):
    """Test GET /api/v1/skills returns the whole catalog."""
    response = await client.get("/api/v1/skills")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 45
    assert len(data["skills"]) == 45
    first = data["skills"][0]
    assert first["name"] == "generate_nest_resource"
    assert first["category"] == "backend.api"
    assert "resourceName" in first["parameters"]["properties"]


@pytest.mark.asyncio
async def test_list_skills_by_category(client: AsyncClient):
    """Test GET /api/v1/skills?category= filters by category prefix."""
    response = await client.get("/api/v1/skills", params={"category": "frontend.routing"})

    assert response.status_code == 200
    names = [skill["name"] for skill in response.json()["skills"]]
    assert names == ["routing_master", "search_params_manager", "sitemap_generator"]


@pytest.mark.asyncio
async def test_list_tool_definitions(client: AsyncClient):
    """Test GET /api/v1/skills/tools returns function-calling definitions."""
    response = await client.get("/api/v1/skills/tools")

    assert response.status_code == 200
    tools = response.json()
    assert len(tools) == 45
    assert all(tool["type"] == "function" for tool in tools)


@pytest.mark.asyncio
async def test_get_skill(client: AsyncClient):
    response = await client.get("/api/v1/skills/role_guard_generator")

    assert response.status_code == 200
    assert response.json()["category"] == "backend.security"


@pytest.mark.asyncio
async def test_get_unknown_skill(client: AsyncClient):
    """Test GET /api/v1/skills/{name} for an unknown skill returns 404."""
    response = await client.get("/api/v1/skills/does_not_exist")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_invoke_skill(client: AsyncClient):
    """Test POST /api/v1/skills/{name}/invoke returns generated files."""
    payload = {"defaultRoles": ["admin", "user"]}

    response = await client.post("/api/v1/skills/role_guard_generator/invoke", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["skill"] == "role_guard_generator"
    assert data["success"] is True
    assert data["error"] is None
    assert data["errors"] == []
    assert "ADMIN = 'admin'," in data["data"]["roles.enum.ts"]
    assert data["metadata"]["guard_name"] == "RolesGuard"


@pytest.mark.asyncio
async def test_invoke_skill_without_body_uses_defaults(client: AsyncClient):
    response = await client.post("/api/v1/skills/rate_limit_setup/invoke")

    assert response.status_code == 200
    assert response.json()["metadata"]["default_config"] == {"ttl": 60, "limit": 10}


@pytest.mark.asyncio
async def test_invoke_skill_invalid_args(client: AsyncClient):
    """Test invalid arguments return 422 with field errors."""
    payload = {"type": "whitelist", "ips": ["999.1.1.1"]}

    response = await client.post("/api/v1/skills/access_list_manager/invoke", json=payload)

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert "access_list_manager" in detail["error"]
    assert detail["errors"][0]["loc"] == "ips"
    assert detail["errors"][0]["type"] == "value_error"


@pytest.mark.asyncio
async def test_invoke_unknown_skill(client: AsyncClient):
    """Test invoking an unknown skill returns 404."""
    response = await client.post("/api/v1/skills/does_not_exist/invoke", json={})

    assert response.status_code == 404
    assert "not found" in response.json()["detail"]


@pytest.mark.asyncio
async def test_invoke_rate_limited(monkeypatch):
    """Test invocations beyond the configured limit return 429."""
    monkeypatch.setenv("SKILL_INVOKE_RATE_LIMIT", "2/minute")
    get_settings.cache_clear()
    limiter.reset()
    app = create_app()

    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            statuses = [
                (await ac.post("/api/v1/skills/rate_limit_setup/invoke", json={})).status_code
                for _ in range(3)
            ]
    finally:
        monkeypatch.delenv("SKILL_INVOKE_RATE_LIMIT")
        get_settings.cache_clear()
        limiter.reset()

    assert statuses == [200, 200, 429]


@pytest.mark.asyncio
async def test_disabled_skills_are_not_exposed():
    """Test DISABLED_SKILLS removes skills from the running application."""
    app = create_app(Settings(DISABLED_SKILLS=["ui_polish"]))

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        listing = await ac.get("/api/v1/skills")
        invoke = await ac.post(
            "/api/v1/skills/ui_polish/invoke", json={"componentCode": "<div />", "context": "x"}
        )

    assert listing.json()["total"] == 44
    assert invoke.status_code == 404

# tests/test_api.py
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.application.services.outage_query import OutageQueryService
from app.main import app, get_query_service, mcp_app


@pytest.fixture
def query_service():
    """Mock OutageQueryService"""
    mock = MagicMock(spec=OutageQueryService)
    mock.get_power_outages = AsyncMock(
        return_value={"hasOutage": False, "outages": [], "checkedAt": "2024-01-10T10:00:00+01:00"}
    )
    return mock


@pytest.fixture
async def client(query_service):
    app.dependency_overrides[get_query_service] = lambda: query_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.mark.anyio
async def test_health(client):
    resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_power_outages(client, query_service):
    resp = await client.get("/power-outages")

    assert resp.status_code == 200
    assert resp.json() == {
        "hasOutage": False,
        "outages": [],
        "checkedAt": "2024-01-10T10:00:00+01:00",
    }
    query_service.get_power_outages.assert_awaited_once()


@pytest.mark.anyio
async def test_power_outages_error_payload(client, query_service):
    query_service.get_power_outages.return_value = {"error": "Error fetching power outage status: boom"}

    resp = await client.get("/power-outages")

    assert resp.status_code == 502
    assert resp.json() == {"error": "Error fetching power outage status: boom"}


@pytest.mark.anyio
async def test_cors_preflight(client):
    resp = await client.options(
        "/power-outages",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "mcp-session-id",
        },
    )

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"


def test_mcp_endpoint_mounted():
    assert "/mcp" in [getattr(r, "path", None) for r in mcp_app.routes]

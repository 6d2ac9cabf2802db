import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_endpoint(client: AsyncClient):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_routes_snapshot_lists_core_routes(client: AsyncClient):
    resp = await client.get("/__routes")
    assert resp.status_code == 200
    routes = " ".join(resp.json())
    for path in ("/locations/resolve", "/courses/import", "/mensa/menu", "/advisor/portions"):
        assert path in routes

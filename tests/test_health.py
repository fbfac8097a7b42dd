"""Smoke tests for health and app wiring."""

from httpx import AsyncClient

from support import CONSTRUCTION, RENTAL


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /health returns 200, status ok and the app version."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"]


async def test_each_service_family_has_health(client: AsyncClient) -> None:
    for prefix in (RENTAL, CONSTRUCTION):
        response = await client.get(f"{prefix}/health")
        assert response.status_code == 200


async def test_rental_routes_are_not_on_construction_prefix(client: AsyncClient) -> None:
    assert (await client.get(f"{CONSTRUCTION}/properties")).status_code == 404
    assert (await client.get(f"{RENTAL}/buildings")).status_code == 404

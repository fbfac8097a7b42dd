"""Gateway tests: prefix routing, forwarding, unknown prefix and upstream failure."""

import httpx
import pytest

from estates.gateway.app import create_gateway_app, match_route

ROUTES = {
    "/api/v1/rental-service": "http://rental:9000",
    "/api/v1/construction-service": "http://construction:9010",
}


def test_match_route_by_prefix() -> None:
    assert match_route("/api/v1/rental-service/properties", ROUTES) == "http://rental:9000"
    assert match_route("/api/v1/construction-service", ROUTES) == "http://construction:9010"
    assert match_route("/api/v1/rental-service-extra/x", ROUTES) is None
    assert match_route("/elsewhere", ROUTES) is None


def test_match_route_prefers_longest_prefix() -> None:
    routes = {"/api": "http://a", "/api/v1/rental-service": "http://b"}
    assert match_route("/api/v1/rental-service/categories", routes) == "http://b"
    assert match_route("/api/other", routes) == "http://a"


async def _call(handler, method: str, path: str, **kwargs) -> httpx.Response:
    upstream = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    app = create_gateway_app(routes=ROUTES, client=upstream)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://gateway") as client:
        response = await client.request(method, path, **kwargs)
    await upstream.aclose()
    return response


async def test_forwards_method_path_query_headers_and_body() -> None:
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("authorization")
        seen["body"] = request.content
        return httpx.Response(201, json={"ok": True}, headers={"X-Upstream": "rental"})

    response = await _call(
        handler,
        "POST",
        "/api/v1/rental-service/categories?x=1",
        headers={"Authorization": "Basic abc", "Content-Type": "application/json"},
        content=b'{"name":"Hotels"}',
    )

    assert response.status_code == 201
    assert response.json() == {"ok": True}
    assert response.headers["x-upstream"] == "rental"
    assert seen["method"] == "POST"
    assert seen["url"] == "http://rental:9000/api/v1/rental-service/categories?x=1"
    assert seen["auth"] == "Basic abc"
    assert seen["body"] == b'{"name":"Hotels"}'


async def test_routes_construction_prefix_to_its_upstream() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"host": request.url.host})

    response = await _call(handler, "GET", "/api/v1/construction-service/buildings")
    assert response.json() == {"host": "construction"}


async def test_upstream_error_status_is_passed_through() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"error": "PERMISSION_DENIED"})

    response = await _call(handler, "DELETE", "/api/v1/rental-service/properties/p1")
    assert response.status_code == 403


async def test_unknown_prefix_is_404() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        pytest.fail("upstream must not be called")

    response = await _call(handler, "GET", "/api/v2/unknown")
    assert response.status_code == 404


async def test_unreachable_upstream_is_502() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    response = await _call(handler, "GET", "/api/v1/rental-service/health")
    assert response.status_code == 502
    assert response.json()["error"] == "BAD_GATEWAY"

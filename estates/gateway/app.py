"""Gateway application.

Routes requests by the longest matching path prefix to an upstream base URL
and forwards method, query string, headers and body through one shared
httpx.AsyncClient. The upstream response (status, headers, body) is
returned as is. Unknown prefixes get 404; unreachable upstreams get 502.
"""

import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from estates.core.config import get_settings
from estates.shared.logging import setup_logging
from estates.shared.telemetry import init_telemetry

logger = logging.getLogger(__name__)

# Hop-by-hop headers are not forwarded in either direction.
HOP_BY_HOP_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailers",
        "transfer-encoding",
        "upgrade",
        "host",
        "content-length",
    }
)
# httpx decodes the upstream body, so its encoding header no longer applies.
RESPONSE_DROP_HEADERS = HOP_BY_HOP_HEADERS | {"content-encoding"}


def match_route(path: str, routes: Mapping[str, str]) -> str | None:
    """Return the upstream base URL for the longest prefix matching path."""
    best: str | None = None
    for prefix in routes:
        normalized = prefix.rstrip("/")
        if path == normalized or path.startswith(normalized + "/"):
            if best is None or len(normalized) > len(best.rstrip("/")):
                best = prefix
    return routes[best] if best is not None else None


def _forward_headers(
    headers: Mapping[str, str], drop: frozenset[str] = HOP_BY_HOP_HEADERS
) -> dict[str, str]:
    return {k: v for k, v in headers.items() if k.lower() not in drop}


def create_gateway_app(
    routes: Mapping[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Build the gateway. A client passed in (tests) is used and never closed."""
    settings = get_settings()
    setup_logging()
    route_map = dict(routes if routes is not None else settings.gateway_routes)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app.state.http_client is None:
            app.state.http_client = httpx.AsyncClient(
                timeout=settings.gateway_timeout_seconds
            )
            app.state.owns_http_client = True
        yield
        if app.state.owns_http_client:
            await app.state.http_client.aclose()
            app.state.http_client = None
        if telemetry is not None:
            telemetry.shutdown()

    app = FastAPI(
        title=f"{settings.app_name}-gateway",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.http_client = client
    app.state.owns_http_client = False
    telemetry = init_telemetry(app, service_name=f"{settings.app_name}-gateway")

    @app.api_route(
        "/{path:path}",
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
        include_in_schema=False,
    )
    async def proxy(request: Request, path: str) -> Response:
        upstream = match_route(request.url.path, route_map)
        if upstream is None:
            return JSONResponse(
                status_code=404,
                content={"error": "RESOURCE_NOT_FOUND", "message": "No route for path"},
            )
        http: httpx.AsyncClient = request.app.state.http_client
        url = upstream.rstrip("/") + request.url.path
        try:
            upstream_response = await http.request(
                request.method,
                url,
                params=request.url.query or None,
                headers=_forward_headers(request.headers),
                content=await request.body(),
            )
        except httpx.RequestError as e:
            logger.warning("Upstream %s unreachable for %s: %s", upstream, request.url.path, e)
            return JSONResponse(
                status_code=502,
                content={"error": "BAD_GATEWAY", "message": "Upstream service unavailable"},
            )
        logger.debug(
            "%s %s -> %s (%s)",
            request.method,
            request.url.path,
            upstream,
            upstream_response.status_code,
        )
        return Response(
            content=upstream_response.content,
            status_code=upstream_response.status_code,
            headers=_forward_headers(upstream_response.headers, RESPONSE_DROP_HEADERS),
        )

    return app


app = create_gateway_app()

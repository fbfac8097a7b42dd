"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, rate limiting, CORS, routers,
tracing.
See estates.core.lifespan and estates.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from estates.api.v1 import api_router
from estates.api.v1.endpoints import health
from estates.core.config import get_settings
from estates.core.exception_handlers import register_exception_handlers
from estates.core.lifespan import create_lifespan
from estates.core.limiter import limiter
from estates.shared.logging import setup_logging
from estates.shared.telemetry import init_telemetry


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    app.state.cache = None

    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    app.include_router(health.router, prefix="/health", tags=["health"])

    init_telemetry(app)
    return app


app = create_app()

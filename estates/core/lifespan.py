"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: the Redis cache handle is built
here and stored on app.state, SQLAlchemy and Redis are instrumented when
tracing is on, and the SQL engine is disposed at shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from estates.core.config import get_settings
from estates.shared.telemetry import get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: telemetry instrumentation (if create_app() enabled it), Redis
    cache (if enabled). Shutdown: cache disconnect, telemetry flush, SQL
    engine dispose. A cache already placed on app.state (tests) is kept.
    """
    settings = get_settings()
    telemetry = get_telemetry()

    # ---- Startup ----
    if telemetry is not None:
        from estates.infrastructure.persistence.database import get_engine

        telemetry.instrument_sqlalchemy(get_engine())
        telemetry.instrument_redis()

    if getattr(app.state, "cache", None) is None:
        if settings.redis_enabled:
            from estates.infrastructure.cache.redis_cache import CacheService

            cache = CacheService()
            await cache.connect()
            app.state.cache = cache
        else:
            app.state.cache = None
            logger.info("Redis cache disabled; full responses are not cached")

    yield

    # ---- Shutdown ----
    cache = getattr(app.state, "cache", None)
    if cache is not None and hasattr(cache, "disconnect"):
        await cache.disconnect()
        logger.info("Cache disconnected")
    app.state.cache = None

    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)

    from estates.infrastructure.persistence.database import dispose_engine

    await dispose_engine()

"""Redis store for cached full responses.

Values are JSON documents keyed by estates.infrastructure.cache.keys. A
dropped connection is retried once after reconnecting; any other Redis
failure turns reads into misses and writes into no-ops.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import redis.asyncio as redis

from estates.core.config import get_settings

logger = logging.getLogger(__name__)

_CONNECTION_ERRORS = (redis.ConnectionError, redis.TimeoutError)


class CacheService:
    """Full-response cache backed by redis.asyncio.

    Built by the application lifespan (connect() at startup, disconnect()
    at shutdown). Tests pass a mocked client instead.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        self.redis = redis_client
        self.settings = get_settings()
        self._connected = redis_client is not None

    def _new_client(self) -> redis.Redis:
        password = self.settings.redis_password
        return redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=password.get_secret_value() if password else None,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_keepalive=True,
        )

    async def connect(self) -> None:
        """Open the connection. On failure the cache stays disabled."""
        if self.redis is not None:
            return
        client = self._new_client()
        try:
            await client.ping()
        except _CONNECTION_ERRORS as e:
            logger.warning(
                "Redis unreachable at %s:%s (%s); full responses will not be cached",
                self.settings.redis_host,
                self.settings.redis_port,
                e,
            )
            await client.aclose()
            return
        self.redis = client
        self._connected = True
        logger.info(
            "Redis cache connected: %s:%s", self.settings.redis_host, self.settings.redis_port
        )

    async def disconnect(self) -> None:
        if self.redis is not None:
            await self.redis.aclose()
            logger.info("Redis cache disconnected")
        self.redis = None
        self._connected = False

    async def _reconnect(self) -> bool:
        stale, self.redis = self.redis, None
        self._connected = False
        if stale is not None:
            try:
                await stale.aclose()
            except redis.RedisError:
                logger.debug("Ignoring error while closing stale Redis client")
        await self.connect()
        return self.is_available()

    def is_available(self) -> bool:
        return self._connected and self.redis is not None

    async def _run[R](
        self,
        op: str,
        key: str,
        call: Callable[[redis.Redis], Awaitable[R]],
        default: R,
    ) -> R:
        """Run call against the client; retry once after a lost connection."""
        if not self.is_available() or self.redis is None:
            return default
        try:
            return await call(self.redis)
        except _CONNECTION_ERRORS:
            if not await self._reconnect() or self.redis is None:
                logger.warning("Cache %s skipped for %s: Redis disconnected", op, key)
                return default
            try:
                return await call(self.redis)
            except redis.RedisError:
                logger.exception("Cache %s failed for %s after reconnect", op, key)
                return default
        except redis.RedisError:
            logger.exception("Cache %s failed for %s", op, key)
            return default

    async def get(self, key: str) -> Any | None:
        """Return the decoded JSON value, or None on a miss."""
        raw = await self._run("get", key, lambda r: r.get(key), None)
        logger.debug("Cache %s: %s", "MISS" if raw is None else "HIT", key)
        return json.loads(raw) if raw is not None else None

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store value as JSON; ttl None means no expiry."""
        payload = json.dumps(value)

        async def _write(r: redis.Redis) -> bool:
            if ttl is None:
                await r.set(key, payload)
            else:
                await r.setex(key, ttl, payload)
            return True

        stored = await self._run("set", key, _write, False)
        if stored:
            logger.debug("Cache SET: %s (ttl=%s)", key, ttl)
        return stored

    async def exists(self, key: str) -> bool:
        async def _exists(r: redis.Redis) -> bool:
            return bool(await r.exists(key))

        return await self._run("exists", key, _exists, False)

    async def delete(self, key: str) -> bool:
        """Delete key. Deleting an absent key still counts as done."""

        async def _delete(r: redis.Redis) -> bool:
            await r.delete(key)
            return True

        deleted = await self._run("delete", key, _delete, False)
        if deleted:
            logger.debug("Cache DELETE: %s", key)
        return deleted

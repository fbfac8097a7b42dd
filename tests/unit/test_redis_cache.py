"""Unit tests for CacheService against a mocked redis.asyncio client."""

import json
from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from estates.infrastructure.cache.redis_cache import CacheService


@pytest.fixture
def redis_client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def cache(redis_client: AsyncMock) -> CacheService:
    return CacheService(redis_client=redis_client)


def test_injected_client_is_available(cache: CacheService) -> None:
    assert cache.is_available() is True


def test_without_client_is_unavailable() -> None:
    assert CacheService().is_available() is False


async def test_get_returns_decoded_json(cache: CacheService, redis_client: AsyncMock) -> None:
    redis_client.get.return_value = json.dumps({"id": "p1", "name": "Villa"})
    assert await cache.get("propertyFullResponse::p1") == {"id": "p1", "name": "Villa"}
    redis_client.get.assert_awaited_once_with("propertyFullResponse::p1")


async def test_get_miss_returns_none(cache: CacheService, redis_client: AsyncMock) -> None:
    redis_client.get.return_value = None
    assert await cache.get("propertyFullResponse::p1") is None


async def test_set_without_ttl_uses_plain_set(
    cache: CacheService, redis_client: AsyncMock
) -> None:
    assert await cache.set("k", {"a": 1}) is True
    redis_client.set.assert_awaited_once_with("k", json.dumps({"a": 1}))
    redis_client.setex.assert_not_awaited()


async def test_set_with_ttl_uses_setex(cache: CacheService, redis_client: AsyncMock) -> None:
    assert await cache.set("k", [1, 2], ttl=60) is True
    redis_client.setex.assert_awaited_once_with("k", 60, json.dumps([1, 2]))
    redis_client.set.assert_not_awaited()


async def test_exists_and_delete(cache: CacheService, redis_client: AsyncMock) -> None:
    redis_client.exists.return_value = 1
    assert await cache.exists("k") is True
    assert await cache.delete("k") is True
    redis_client.delete.assert_awaited_once_with("k")


async def test_redis_error_degrades_to_miss(
    cache: CacheService, redis_client: AsyncMock
) -> None:
    redis_client.get.side_effect = redis.ResponseError("WRONGTYPE")
    assert await cache.get("k") is None
    redis_client.set.side_effect = redis.ResponseError("OOM")
    assert await cache.set("k", 1) is False


async def test_unavailable_cache_is_noop() -> None:
    cache = CacheService()
    assert await cache.get("k") is None
    assert await cache.set("k", 1) is False
    assert await cache.exists("k") is False
    assert await cache.delete("k") is False


async def test_disconnect_closes_client(cache: CacheService, redis_client: AsyncMock) -> None:
    await cache.disconnect()
    redis_client.aclose.assert_awaited_once()
    assert cache.is_available() is False

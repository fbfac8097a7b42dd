"""Cache-aside read path for full entity responses."""

import logging
from collections.abc import Awaitable, Callable

from pydantic import BaseModel, ValidationError

from estates.domain.enums import EntityType
from estates.infrastructure.cache.cache_protocol import CacheProtocol
from estates.infrastructure.cache.keys import full_response_key
from estates.shared.telemetry import add_span_event

logger = logging.getLogger(__name__)


class FullResponseCache:
    """Serves full responses from cache, loading and storing them on a miss.

    The loader raises ResourceNotFoundException for unknown ids; nothing is
    cached in that case. A cached document that no longer validates against
    the response model is treated as a miss and overwritten.
    """

    def __init__(self, cache: CacheProtocol | None, ttl: int | None = None) -> None:
        self._cache = cache
        self._ttl = ttl

    async def get_or_load[M: BaseModel](
        self,
        entity_type: EntityType,
        entity_id: str,
        loader: Callable[[], Awaitable[M]],
        model: type[M],
    ) -> M:
        if self._cache is None:
            return await loader()
        try:
            key = full_response_key(entity_type, entity_id)
        except ValueError:
            # No stored id contains the key separator; the loader reports NotFound.
            logger.debug("Uncacheable %s id %r", entity_type.value, entity_id)
            return await loader()
        cached = await self._cache.get(key)
        if cached is not None:
            try:
                response = model.model_validate(cached)
            except ValidationError:
                logger.warning("Discarding malformed cache entry %s", key)
            else:
                add_span_event("cache.hit", {"cache.key": key})
                return response
        add_span_event("cache.miss", {"cache.key": key})
        response = await loader()
        await self._cache.set(key, response.model_dump(mode="json"), ttl=self._ttl)
        return response

"""Cache invalidation fan-out for full entity responses.

A full response of one entity embeds short views of related entities, so a
mutation of entity X leaves stale copies inside the cached full responses of
every entity that embeds X. EMBEDDING_GRAPH lists, for each entity type, who
embeds it and how to find them from a loaded ORM object.

Writers collect keys from the entity state before the mutation (old
relations) and after it (new relations) into a CacheInvalidator, and the
unit of work flushes the collected keys once the transaction has committed.
Lookups read foreign-key columns and relationships, so callers must load the
relationships named here before collecting.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any, NamedTuple

from estates.domain.enums import EntityType
from estates.infrastructure.cache.cache_protocol import CacheProtocol
from estates.infrastructure.cache.keys import full_response_key
from estates.shared.telemetry import add_span_event

logger = logging.getLogger(__name__)


class Embedder(NamedTuple):
    """An entity type whose full response embeds the source entity."""

    entity_type: EntityType
    lookup: Callable[[Any], Iterable[str | None]]


def _one(attr: str) -> Callable[[Any], list[str | None]]:
    return lambda obj: [getattr(obj, attr)]


def _ids(collection: str) -> Callable[[Any], list[str]]:
    return lambda obj: [child.id for child in getattr(obj, collection)]


def _category_advertisements(category: Any) -> list[str]:
    return [p.advertisement.id for p in category.properties if p.advertisement is not None]


def _category_people(attr: str) -> Callable[[Any], list[str | None]]:
    return lambda category: [getattr(p, attr) for p in category.properties]


def _advertisement_of(prop: Any) -> list[str]:
    return [prop.advertisement.id] if prop.advertisement is not None else []


EMBEDDING_GRAPH: dict[EntityType, tuple[Embedder, ...]] = {
    EntityType.IDENTITY: (
        Embedder(EntityType.PROPERTY, _ids("owned_properties")),
        Embedder(EntityType.PROPERTY, _ids("tenant_properties")),
        Embedder(EntityType.BUILDING, _ids("buildings")),
    ),
    EntityType.CATEGORY: (
        Embedder(EntityType.PROPERTY, _ids("properties")),
        Embedder(EntityType.ADVERTISEMENT, _category_advertisements),
        Embedder(EntityType.IDENTITY, _category_people("owner_id")),
        Embedder(EntityType.IDENTITY, _category_people("tenant_id")),
    ),
    EntityType.PROPERTY: (
        Embedder(EntityType.IDENTITY, _one("owner_id")),
        Embedder(EntityType.IDENTITY, _one("tenant_id")),
        Embedder(EntityType.CATEGORY, _one("category_id")),
        Embedder(EntityType.ADVERTISEMENT, _advertisement_of),
    ),
    EntityType.ADVERTISEMENT: (
        Embedder(EntityType.PROPERTY, _one("property_id")),
    ),
    EntityType.BUILDING: (
        Embedder(EntityType.IDENTITY, _one("identity_id")),
    ),
}


def keys_for(entity_type: EntityType, entity: Any) -> set[str]:
    """Return the entity's own full-response key plus those of every embedder."""
    keys = {full_response_key(entity_type, entity.id)}
    for embedder in EMBEDDING_GRAPH[entity_type]:
        for related_id in embedder.lookup(entity):
            if related_id:
                keys.add(full_response_key(embedder.entity_type, related_id))
    return keys


class CacheInvalidator:
    """Collects stale full-response keys during a write and deletes them on flush.

    Flushing is idempotent: deleting a key that is already gone is a no-op,
    and a second flush with nothing pending does nothing.
    """

    def __init__(self, cache: CacheProtocol | None) -> None:
        self._cache = cache
        self._pending: set[str] = set()

    @property
    def pending(self) -> frozenset[str]:
        return frozenset(self._pending)

    def collect(self, entity_type: EntityType, entity: Any) -> None:
        """Queue the keys affected by a change to entity (call before and after mutating)."""
        self._pending |= keys_for(entity_type, entity)

    def collect_key(self, entity_type: EntityType, entity_id: str) -> None:
        """Queue a single full-response key."""
        self._pending.add(full_response_key(entity_type, entity_id))

    def discard(self) -> None:
        """Drop pending keys without deleting (transaction rolled back)."""
        self._pending.clear()

    async def flush(self) -> int:
        """Delete every pending key from the cache. Returns how many were issued."""
        keys = sorted(self._pending)
        self._pending.clear()
        if not keys or self._cache is None or not self._cache.is_available():
            if keys:
                logger.warning(
                    "Cache unavailable; skipped invalidation of %s keys", len(keys)
                )
            return 0
        for key in keys:
            await self._cache.delete(key)
        add_span_event("cache.invalidate", {"cache.keys": len(keys)})
        logger.debug("Cache INVALIDATE: %s", ", ".join(keys))
        return len(keys)

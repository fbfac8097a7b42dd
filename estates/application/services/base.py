"""Shared plumbing for entity services: repositories, cached reads and invalidation."""

from __future__ import annotations

from typing import Any

from estates.domain.enums import EntityType
from estates.infrastructure.cache.invalidation import CacheInvalidator
from estates.infrastructure.cache.read_through import FullResponseCache
from estates.infrastructure.persistence.repositories import Repositories


class EntityService:
    """Base for entity services.

    Read services get a FullResponseCache; write services get the unit of
    work's CacheInvalidator. Either may be omitted (no caching, no fan-out).
    """

    def __init__(
        self,
        repos: Repositories,
        invalidator: CacheInvalidator | None = None,
        full_cache: FullResponseCache | None = None,
    ) -> None:
        self.repos = repos
        self._invalidator = invalidator
        self._full_cache = full_cache or FullResponseCache(None)

    def _collect(self, entity_type: EntityType, entity: Any) -> None:
        if self._invalidator is not None:
            self._invalidator.collect(entity_type, entity)

    def _collect_key(self, entity_type: EntityType, entity_id: str) -> None:
        if self._invalidator is not None:
            self._invalidator.collect_key(entity_type, entity_id)

"""Cache: Redis service, key builders, read-through and invalidation fan-out.

CacheService uses estates.core.config; key format is in keys.py.
"""

from estates.infrastructure.cache.cache_protocol import CacheProtocol
from estates.infrastructure.cache.invalidation import (
    EMBEDDING_GRAPH,
    CacheInvalidator,
    Embedder,
    keys_for,
)
from estates.infrastructure.cache.keys import full_response_key
from estates.infrastructure.cache.read_through import FullResponseCache
from estates.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "EMBEDDING_GRAPH",
    "CacheInvalidator",
    "CacheProtocol",
    "CacheService",
    "Embedder",
    "FullResponseCache",
    "full_response_key",
    "keys_for",
]

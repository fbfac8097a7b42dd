"""Cache protocol for the read path and invalidation (DIP)."""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """Protocol for cache backends (e.g. Redis). Used by read-through and invalidation."""

    def is_available(self) -> bool:
        """Return True if cache is connected and usable."""
        ...

    async def get(self, key: str) -> Any:
        """Return cached value or None."""
        ...

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Store value with optional TTL in seconds (None means no expiry)."""
        ...

    async def exists(self, key: str) -> bool:
        """Return True if key is present."""
        ...

    async def delete(self, key: str) -> bool:
        """Remove key from cache. Deleting a missing key is not an error."""
        ...

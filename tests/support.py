"""Test helpers shared across test modules (importable because tests/ is on sys.path)."""

import base64
import json
from typing import Any

RENTAL = "/api/v1/rental-service"
CONSTRUCTION = "/api/v1/construction-service"
DEFAULT_PASSWORD = "Secret123!"


class InMemoryCache:
    """CacheProtocol fake backed by a dict. Counts calls per operation."""

    def __init__(self, available: bool = True) -> None:
        self.store: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}
        self.available = available
        self.calls: dict[str, int] = {"get": 0, "set": 0, "exists": 0, "delete": 0}
        self.deleted: list[str] = []

    def is_available(self) -> bool:
        return self.available

    async def get(self, key: str) -> Any:
        self.calls["get"] += 1
        value = self.store.get(key)
        return json.loads(value) if value is not None else None

    async def set(self, key: str, value: Any, ttl: int | None = None) -> bool:
        self.calls["set"] += 1
        self.store[key] = json.dumps(value)
        self.ttls[key] = ttl
        return True

    async def exists(self, key: str) -> bool:
        self.calls["exists"] += 1
        return key in self.store

    async def delete(self, key: str) -> bool:
        self.calls["delete"] += 1
        self.deleted.append(key)
        self.store.pop(key, None)
        return True

    def reset_calls(self) -> None:
        self.calls = dict.fromkeys(self.calls, 0)
        self.deleted.clear()


def basic_auth(email: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
    """Authorization header for HTTP Basic (email + password)."""
    token = base64.b64encode(f"{email}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}

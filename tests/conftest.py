"""Pytest configuration and fixtures for estates.

Environment is fixed before estates is imported: SQLite via aiosqlite (one
file database per test), Redis, rate limiting and tracing disabled. HTTP tests run
against estates.main:app through httpx's ASGITransport with the session
factory overridden and an in-memory cache placed on app.state.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-do-not-use-in-production"
os.environ["REDIS_ENABLED"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["TELEMETRY_ENABLED"] = "false"
os.environ.pop("CACHE_FULL_RESPONSE_TTL", None)

from collections.abc import AsyncIterator, Awaitable, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from estates.core.config import get_settings

get_settings.cache_clear()

from estates.api.v1.dependencies import get_sessionmaker  # noqa: E402
from estates.domain.enums import Authority  # noqa: E402
from estates.infrastructure.persistence import models  # noqa: E402, F401
from estates.infrastructure.persistence.database import Base  # noqa: E402
from estates.infrastructure.persistence.models import Identity  # noqa: E402
from estates.infrastructure.security.password import get_password_hash  # noqa: E402
from estates.main import app  # noqa: E402
from support import DEFAULT_PASSWORD, InMemoryCache  # noqa: E402


@pytest.fixture
def cache() -> InMemoryCache:
    return InMemoryCache()


@pytest.fixture
async def session_factory(tmp_path) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Fresh SQLite database with the full schema, foreign keys enforced."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'estates.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    yield factory
    await engine.dispose()


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Session for repository and guard tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_identity(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[..., Awaitable[Identity]]:
    """Insert an identity directly (committed) and return it."""

    async def _make(
        username: str,
        *,
        authority: Authority = Authority.USER,
        enabled: bool = True,
        password: str = DEFAULT_PASSWORD,
    ) -> Identity:
        identity = Identity(
            authority=authority,
            username=username,
            email=f"{username}@example.com",
            password=get_password_hash(password),
            enabled=enabled,
            firstname=username.capitalize(),
        )
        async with session_factory() as session, session.begin():
            session.add(identity)
        return identity

    return _make


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession], cache: InMemoryCache
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    app.dependency_overrides[get_sessionmaker] = lambda: session_factory
    app.state.cache = cache
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    app.state.cache = None

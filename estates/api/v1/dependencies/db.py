"""DB session, unit of work and cache dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated, AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from estates.core.config import get_settings
from estates.infrastructure.cache.cache_protocol import CacheProtocol
from estates.infrastructure.cache.read_through import FullResponseCache
from estates.infrastructure.persistence.database import (
    get_session_factory,
    read_only_session,
)
from estates.infrastructure.persistence.repositories import Repositories
from estates.infrastructure.persistence.unit_of_work import UnitOfWork, unit_of_work


def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """Session factory for the request. Overridden in tests."""
    return get_session_factory()


SessionFactory = Annotated[async_sessionmaker[AsyncSession], Depends(get_sessionmaker)]


async def get_db(factory: SessionFactory) -> AsyncIterator[AsyncSession]:
    """Read-only session for guards, by-id reads and lists."""
    async with read_only_session(factory) as session:
        yield session


def get_cache(request: Request) -> CacheProtocol | None:
    """Cache handle built by the lifespan (None when Redis is disabled)."""
    return getattr(request.app.state, "cache", None)


async def get_unit_of_work(
    factory: SessionFactory,
    cache: Annotated[CacheProtocol | None, Depends(get_cache)],
) -> AsyncIterator[UnitOfWork]:
    """Write transaction; collected cache keys are deleted after commit.

    Used with scope="function" so the commit and the deletes finish before
    the response is sent.
    """
    async with unit_of_work(factory, cache) as uow:
        yield uow


def get_full_response_cache(
    cache: Annotated[CacheProtocol | None, Depends(get_cache)],
) -> FullResponseCache:
    return FullResponseCache(cache, ttl=get_settings().cache_full_response_ttl)


def get_read_repos(db: Annotated[AsyncSession, Depends(get_db)]) -> Repositories:
    return Repositories.for_session(db)

"""Transaction boundary for writes that affect cached full responses."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from estates.infrastructure.cache.cache_protocol import CacheProtocol
from estates.infrastructure.cache.invalidation import CacheInvalidator

logger = logging.getLogger(__name__)


@dataclass
class UnitOfWork:
    session: AsyncSession
    invalidator: CacheInvalidator


@asynccontextmanager
async def unit_of_work(
    session_factory: async_sessionmaker[AsyncSession],
    cache: CacheProtocol | None,
) -> AsyncIterator[UnitOfWork]:
    """Run a write transaction; invalidate collected cache keys after commit.

    On exception the transaction is rolled back, pending keys are dropped,
    and the exception propagates. Keys are only deleted once the commit has
    succeeded, so a concurrent reader cannot re-cache pre-commit state.
    """
    invalidator = CacheInvalidator(cache)
    async with session_factory() as session:
        try:
            async with session.begin():
                yield UnitOfWork(session=session, invalidator=invalidator)
        except BaseException:
            invalidator.discard()
            raise
    await invalidator.flush()

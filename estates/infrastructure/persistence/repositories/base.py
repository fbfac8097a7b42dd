"""Base repository: generic CRUD with eager-load options."""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import ORMOption

from estates.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Base repository with get_by_id, get_all, exists, create, update and delete.

    Loader options are passed explicitly by subclasses so relationships read
    later (serialization, cache fan-out) are loaded up front; async sessions
    cannot lazy load. Reads that pass options refresh already-loaded objects
    in the identity map.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(
        self,
        entity_id: str,
        *options: ORMOption,
        for_update: bool = False,
    ) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        stmt = select(self.model).where(model.id == entity_id)
        if options:
            stmt = stmt.options(*options).execution_options(populate_existing=True)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(self, *options: ORMOption) -> list[ModelType]:
        """Return all records, ordered by id."""
        model: Any = self.model
        stmt = select(self.model).order_by(model.id)
        if options:
            stmt = stmt.options(*options)
        result = await self.db.execute(stmt)
        return list(result.scalars().unique().all())

    async def exists(self, entity_id: str) -> bool:
        """Return True if a record with this primary key exists."""
        model: Any = self.model
        result = await self.db.execute(
            select(func.count()).select_from(self.model).where(model.id == entity_id)
        )
        return result.scalar_one() > 0

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record."""
        self.db.add(obj)
        await self.db.flush()
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush changes made to an attached record."""
        await self.db.flush()
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record (ORM cascades apply to loaded relationships)."""
        await self.db.delete(obj)
        await self.db.flush()

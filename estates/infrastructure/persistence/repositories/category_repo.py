"""Category repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from estates.infrastructure.persistence.models.category import Category
from estates.infrastructure.persistence.models.property import Property
from estates.infrastructure.persistence.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Category)

    async def name_taken(self, name: str, exclude_id: str | None = None) -> bool:
        stmt = select(Category.id).where(Category.name == name)
        if exclude_id is not None:
            stmt = stmt.where(Category.id != exclude_id)
        return (await self.db.execute(stmt)).first() is not None

    async def get_by_name(self, name: str) -> Category | None:
        result = await self.db.execute(select(Category).where(Category.name == name))
        return result.scalar_one_or_none()

    async def get_full(self, category_id: str) -> Category | None:
        return await self.get_by_id(category_id, selectinload(Category.properties))

    async def get_for_mutation(self, category_id: str) -> Category | None:
        """Load with properties and their advertisements (fan-out on write)."""
        return await self.get_by_id(
            category_id,
            selectinload(Category.properties).selectinload(Property.advertisement),
        )

    async def list_all(self) -> list[Category]:
        return await self.get_all()

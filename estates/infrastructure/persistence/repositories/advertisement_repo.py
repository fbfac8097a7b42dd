"""Advertisement repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from estates.infrastructure.persistence.models.advertisement import Advertisement
from estates.infrastructure.persistence.models.property import Property
from estates.infrastructure.persistence.repositories.base import BaseRepository


class AdvertisementRepository(BaseRepository[Advertisement]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Advertisement)

    async def get_by_property_id(self, property_id: str) -> Advertisement | None:
        result = await self.db.execute(
            select(Advertisement).where(Advertisement.property_id == property_id)
        )
        return result.scalar_one_or_none()

    async def get_full(self, advertisement_id: str) -> Advertisement | None:
        return await self.get_by_id(
            advertisement_id,
            selectinload(Advertisement.property).selectinload(Property.category),
            selectinload(Advertisement.property).selectinload(Property.images),
            selectinload(Advertisement.property).selectinload(Property.documents),
        )

    async def get_with_owner(self, advertisement_id: str) -> Advertisement | None:
        return await self.get_by_id(
            advertisement_id,
            selectinload(Advertisement.property).selectinload(Property.owner),
        )

    async def list_all(self) -> list[Advertisement]:
        return await self.get_all()

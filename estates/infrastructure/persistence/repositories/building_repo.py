"""Building repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from estates.infrastructure.persistence.models.building import Building
from estates.infrastructure.persistence.models.identity import Identity
from estates.infrastructure.persistence.repositories.base import BaseRepository


class BuildingRepository(BaseRepository[Building]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Building)

    async def find_by_address(self, address: str) -> list[Building]:
        result = await self.db.execute(select(Building).where(Building.address == address))
        return list(result.scalars().all())

    async def get_full(self, building_id: str) -> Building | None:
        return await self.get_by_id(
            building_id,
            selectinload(Building.identity).selectinload(Identity.image),
            selectinload(Building.images),
            selectinload(Building.documents),
        )

    async def get_for_mutation(self, building_id: str) -> Building | None:
        return await self.get_by_id(
            building_id, selectinload(Building.images), selectinload(Building.documents)
        )

    async def get_with_owner(self, building_id: str) -> Building | None:
        return await self.get_by_id(building_id, selectinload(Building.identity))

    async def list_all(self) -> list[Building]:
        return await self.get_all(selectinload(Building.images))

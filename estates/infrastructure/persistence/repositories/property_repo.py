"""Property repository."""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from estates.infrastructure.persistence.models.identity import Identity
from estates.infrastructure.persistence.models.property import Property
from estates.infrastructure.persistence.repositories.base import BaseRepository

FULL_OPTIONS = (
    selectinload(Property.category),
    selectinload(Property.advertisement),
    selectinload(Property.owner).selectinload(Identity.image),
    selectinload(Property.tenant).selectinload(Identity.image),
    selectinload(Property.images),
    selectinload(Property.documents),
)

MUTATION_OPTIONS = (
    selectinload(Property.advertisement),
    selectinload(Property.images),
    selectinload(Property.documents),
)


class PropertyRepository(BaseRepository[Property]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Property)

    async def get_full(self, property_id: str) -> Property | None:
        return await self.get_by_id(property_id, *FULL_OPTIONS)

    async def get_for_mutation(self, property_id: str) -> Property | None:
        return await self.get_by_id(property_id, *MUTATION_OPTIONS)

    async def get_with_owner(self, property_id: str) -> Property | None:
        return await self.get_by_id(property_id, selectinload(Property.owner))

    async def list_all(self) -> list[Property]:
        return await self.get_all(
            selectinload(Property.category),
            selectinload(Property.images),
            selectinload(Property.documents),
        )

"""Identity repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from estates.infrastructure.persistence.models.building import Building
from estates.infrastructure.persistence.models.identity import Identity
from estates.infrastructure.persistence.models.property import Property
from estates.infrastructure.persistence.repositories.base import BaseRepository

FULL_OPTIONS = (
    selectinload(Identity.image),
    selectinload(Identity.owned_properties).selectinload(Property.category),
    selectinload(Identity.owned_properties).selectinload(Property.images),
    selectinload(Identity.owned_properties).selectinload(Property.documents),
    selectinload(Identity.tenant_properties).selectinload(Property.category),
    selectinload(Identity.tenant_properties).selectinload(Property.images),
    selectinload(Identity.tenant_properties).selectinload(Property.documents),
    selectinload(Identity.buildings).selectinload(Building.images),
)

# Everything a write touches: fan-out keys and cascaded media.
MUTATION_OPTIONS = (
    selectinload(Identity.image),
    selectinload(Identity.owned_properties).selectinload(Property.advertisement),
    selectinload(Identity.owned_properties).selectinload(Property.images),
    selectinload(Identity.owned_properties).selectinload(Property.documents),
    selectinload(Identity.tenant_properties).selectinload(Property.advertisement),
    selectinload(Identity.buildings).selectinload(Building.images),
    selectinload(Identity.buildings).selectinload(Building.documents),
)


class IdentityRepository(BaseRepository[Identity]):
    """Identity repository. Lookups by id, email and username."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Identity)

    async def get_by_email(self, email: str) -> Identity | None:
        result = await self.db.execute(select(Identity).where(Identity.email == email))
        return result.scalar_one_or_none()

    async def email_or_username_taken(
        self, email: str, username: str, exclude_id: str | None = None
    ) -> str | None:
        """Return the name of the clashing field ("email" or "username"), or None."""
        stmt = select(Identity.id, Identity.email, Identity.username).where(
            (Identity.email == email) | (Identity.username == username)
        )
        if exclude_id is not None:
            stmt = stmt.where(Identity.id != exclude_id)
        rows = (await self.db.execute(stmt)).all()
        for row in rows:
            if row.email == email:
                return "email"
        return "username" if rows else None

    async def get_full(self, identity_id: str) -> Identity | None:
        return await self.get_by_id(identity_id, *FULL_OPTIONS)

    async def get_for_mutation(
        self, identity_id: str, *, for_update: bool = False
    ) -> Identity | None:
        return await self.get_by_id(
            identity_id, *MUTATION_OPTIONS, for_update=for_update
        )

    async def list_all(self) -> list[Identity]:
        return await self.get_all(selectinload(Identity.image))

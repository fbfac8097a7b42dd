"""All repositories bound to one session."""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from estates.infrastructure.persistence.repositories.advertisement_repo import (
    AdvertisementRepository,
)
from estates.infrastructure.persistence.repositories.building_repo import (
    BuildingRepository,
)
from estates.infrastructure.persistence.repositories.category_repo import (
    CategoryRepository,
)
from estates.infrastructure.persistence.repositories.identity_repo import (
    IdentityRepository,
)
from estates.infrastructure.persistence.repositories.media_repo import (
    DocumentRepository,
    ImageRepository,
)
from estates.infrastructure.persistence.repositories.property_repo import (
    PropertyRepository,
)


@dataclass(frozen=True)
class Repositories:
    identities: IdentityRepository
    categories: CategoryRepository
    properties: PropertyRepository
    advertisements: AdvertisementRepository
    buildings: BuildingRepository
    images: ImageRepository
    documents: DocumentRepository

    @classmethod
    def for_session(cls, db: AsyncSession) -> "Repositories":
        return cls(
            identities=IdentityRepository(db),
            categories=CategoryRepository(db),
            properties=PropertyRepository(db),
            advertisements=AdvertisementRepository(db),
            buildings=BuildingRepository(db),
            images=ImageRepository(db),
            documents=DocumentRepository(db),
        )

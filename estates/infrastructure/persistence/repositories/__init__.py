"""Repositories: data access per entity."""

from estates.infrastructure.persistence.repositories.advertisement_repo import (
    AdvertisementRepository,
)
from estates.infrastructure.persistence.repositories.base import BaseRepository
from estates.infrastructure.persistence.repositories.building_repo import (
    BuildingRepository,
)
from estates.infrastructure.persistence.repositories.bundle import Repositories
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

__all__ = [
    "AdvertisementRepository",
    "BaseRepository",
    "BuildingRepository",
    "CategoryRepository",
    "DocumentRepository",
    "IdentityRepository",
    "ImageRepository",
    "PropertyRepository",
    "Repositories",
]

"""Application services: one per entity family, plus media helpers."""

from estates.application.services.advertisement_service import AdvertisementService
from estates.application.services.base import EntityService
from estates.application.services.building_service import BuildingService
from estates.application.services.category_service import CategoryService
from estates.application.services.identity_service import IdentityService
from estates.application.services.media_service import MediaService, UploadedFile
from estates.application.services.property_service import PropertyService

__all__ = [
    "AdvertisementService",
    "BuildingService",
    "CategoryService",
    "EntityService",
    "IdentityService",
    "MediaService",
    "PropertyService",
    "UploadedFile",
]

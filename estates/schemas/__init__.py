"""Pydantic request/response schemas for the API."""

from estates.schemas.advertisement import (
    AdvertisementCreateRequest,
    AdvertisementFullResponse,
    AdvertisementUpdateRequest,
    RentPropertyRequest,
)
from estates.schemas.auth import TokenResponse
from estates.schemas.building import (
    BuildingCreateRequest,
    BuildingFullResponse,
    BuildingUpdateRequest,
)
from estates.schemas.category import (
    CategoryCreateRequest,
    CategoryFullResponse,
    CategoryUpdateRequest,
)
from estates.schemas.health import HealthResponse
from estates.schemas.identity import (
    ChangePasswordRequest,
    ChangeStatusRequest,
    IdentityCreateRequest,
    IdentityFullResponse,
    IdentityUpdateRequest,
)
from estates.schemas.property import (
    PropertyCreateRequest,
    PropertyFullResponse,
    PropertyUpdateRequest,
)
from estates.schemas.summaries import (
    AdvertisementShortResponse,
    BuildingShortResponse,
    CategoryShortResponse,
    DocumentResponse,
    IdentityShortResponse,
    ImageResponse,
    PropertyShortResponse,
    PropertyWithCategoryResponse,
)

__all__ = [
    "AdvertisementCreateRequest",
    "AdvertisementFullResponse",
    "AdvertisementShortResponse",
    "AdvertisementUpdateRequest",
    "BuildingCreateRequest",
    "BuildingFullResponse",
    "BuildingShortResponse",
    "BuildingUpdateRequest",
    "CategoryCreateRequest",
    "CategoryFullResponse",
    "CategoryShortResponse",
    "CategoryUpdateRequest",
    "ChangePasswordRequest",
    "ChangeStatusRequest",
    "DocumentResponse",
    "HealthResponse",
    "IdentityCreateRequest",
    "IdentityFullResponse",
    "IdentityShortResponse",
    "IdentityUpdateRequest",
    "ImageResponse",
    "PropertyCreateRequest",
    "PropertyFullResponse",
    "PropertyShortResponse",
    "PropertyUpdateRequest",
    "PropertyWithCategoryResponse",
    "RentPropertyRequest",
    "TokenResponse",
]

"""Property API schemas."""

from pydantic import BaseModel, Field

from estates.schemas.summaries import (
    AdvertisementShortResponse,
    IdentityShortResponse,
    PropertyWithCategoryResponse,
)


class PropertyCreateRequest(BaseModel):
    """Request body for POST /properties. owner_id must be the caller's identity."""

    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1)
    description: str | None = None
    owner_id: str = Field(..., min_length=1)
    category_id: str | None = None


class PropertyUpdateRequest(BaseModel):
    """Request body for PUT /properties.

    Omitted fields are left unchanged; category_id or tenant_id sent as null
    detaches the category or evicts the tenant.
    """

    id: str = Field(..., min_length=1)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    address: str | None = Field(default=None, min_length=1)
    description: str | None = None
    category_id: str | None = None
    tenant_id: str | None = None


class PropertyFullResponse(PropertyWithCategoryResponse):
    """Property with advertisement, owner and tenant summaries."""

    advertisement: AdvertisementShortResponse | None = None
    owner: IdentityShortResponse
    tenant: IdentityShortResponse | None = None

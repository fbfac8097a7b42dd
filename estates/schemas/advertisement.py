"""Advertisement API schemas."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from estates.schemas.summaries import AdvertisementShortResponse, PropertyWithCategoryResponse


class AdvertisementCreateRequest(BaseModel):
    """Request body for POST /advertisements. date defaults to today."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    date: dt.date | None = None
    property_id: str = Field(..., min_length=1)


class AdvertisementUpdateRequest(BaseModel):
    """Request body for PUT /advertisements. Omitted fields are left unchanged."""

    id: str = Field(..., min_length=1)
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    date: dt.date | None = None


class RentPropertyRequest(BaseModel):
    """Request body for PUT /advertisements/rent-property."""

    advertisement_id: str = Field(..., min_length=1)
    tenant_id: str = Field(..., min_length=1)


class AdvertisementFullResponse(AdvertisementShortResponse):
    property: PropertyWithCategoryResponse

"""Short response shapes shared by list endpoints and embedded in full responses."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from estates.domain.enums import Authority


class ImageResponse(BaseModel):
    """Image metadata. Bytes are served by GET /images/{id}."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    content_type: str
    preview: bool


class DocumentResponse(BaseModel):
    """Document metadata. Bytes are served by GET /documents/{id}."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    content_type: str


class IdentityShortResponse(BaseModel):
    """Identity summary (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    authority: Authority
    username: str
    email: str
    enabled: bool
    firstname: str | None = None
    lastname: str | None = None
    patronymic: str | None = None
    image: ImageResponse | None = None


class CategoryShortResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None


class PropertyShortResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    address: str
    description: str | None = None
    owner_id: str
    tenant_id: str | None = None
    category_id: str | None = None


class PropertyWithCategoryResponse(PropertyShortResponse):
    """Property list form: summary plus its category, images and documents."""

    category: CategoryShortResponse | None = None
    images: list[ImageResponse] = []
    documents: list[DocumentResponse] = []


class AdvertisementShortResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str | None = None
    price: Decimal
    date: dt.date
    property_id: str


class BuildingShortResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    address: str
    materials: str | None = None
    floors: int | None = None
    on_object: int | None = None
    description: str | None = None
    built: bool
    identity_id: str
    images: list[ImageResponse] = []

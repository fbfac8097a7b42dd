"""Identity API schemas."""

from pydantic import BaseModel, EmailStr, Field

from estates.schemas.summaries import (
    BuildingShortResponse,
    IdentityShortResponse,
    PropertyWithCategoryResponse,
)


class IdentityCreateRequest(BaseModel):
    """Request body for public registration. Authority is always USER."""

    username: str = Field(..., min_length=1, max_length=128)
    email: EmailStr
    password: str = Field(..., min_length=1)
    firstname: str | None = None
    lastname: str | None = None
    patronymic: str | None = None


class IdentityUpdateRequest(BaseModel):
    """Request body for PUT /identities. Omitted fields are left unchanged."""

    id: str = Field(..., min_length=1)
    username: str | None = Field(default=None, min_length=1, max_length=128)
    email: EmailStr | None = None
    firstname: str | None = None
    lastname: str | None = None
    patronymic: str | None = None


class ChangePasswordRequest(BaseModel):
    """Request body for PUT /identities/change-password."""

    id: str = Field(..., min_length=1)
    password: str | None = None


class ChangeStatusRequest(BaseModel):
    """Request body for PUT /identities/change-status (admin)."""

    id: str = Field(..., min_length=1)
    enabled: bool | None = None


class IdentityFullResponse(IdentityShortResponse):
    """Identity with owned and tenanted properties and owned buildings."""

    owned_properties: list[PropertyWithCategoryResponse] = []
    tenant_properties: list[PropertyWithCategoryResponse] = []
    buildings: list[BuildingShortResponse] = []

"""Building API schemas."""

from pydantic import BaseModel, Field

from estates.schemas.summaries import (
    BuildingShortResponse,
    DocumentResponse,
    IdentityShortResponse,
)


class BuildingCreateRequest(BaseModel):
    """Request body for POST /buildings. identity_id must be the caller's identity."""

    address: str = Field(..., min_length=1)
    materials: str | None = None
    floors: int | None = Field(default=None, ge=0)
    on_object: int | None = Field(default=None, ge=0)
    description: str | None = None
    built: bool = False
    identity_id: str = Field(..., min_length=1)


class BuildingUpdateRequest(BaseModel):
    """Request body for PUT /buildings. Omitted fields are left unchanged."""

    id: str = Field(..., min_length=1)
    address: str | None = Field(default=None, min_length=1)
    materials: str | None = None
    floors: int | None = Field(default=None, ge=0)
    on_object: int | None = Field(default=None, ge=0)
    description: str | None = None
    built: bool | None = None


class BuildingFullResponse(BuildingShortResponse):
    identity: IdentityShortResponse
    documents: list[DocumentResponse] = []

"""Category API schemas."""

from pydantic import BaseModel, Field

from estates.schemas.summaries import CategoryShortResponse, PropertyShortResponse


class CategoryCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class CategoryUpdateRequest(BaseModel):
    """Request body for PUT /categories. Omitted fields are left unchanged."""

    id: str = Field(..., min_length=1)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None


class CategoryFullResponse(CategoryShortResponse):
    properties: list[PropertyShortResponse] = []

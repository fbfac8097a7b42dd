"""Auth API schemas."""

from pydantic import BaseModel, Field


class TokenResponse(BaseModel):
    """Response for POST /auth/token."""

    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Lifetime in seconds")

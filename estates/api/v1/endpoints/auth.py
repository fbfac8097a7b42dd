"""Auth API: exchange Basic credentials for a bearer token."""

from datetime import timedelta

from fastapi import APIRouter, Request

from estates.api.v1.dependencies import CurrentPrincipal
from estates.core.config import get_settings
from estates.core.limiter import limit_auth
from estates.infrastructure.security.jwt import create_access_token
from estates.schemas.auth import TokenResponse

router = APIRouter()


@router.post("/token", response_model=TokenResponse)
@limit_auth
async def issue_token(request: Request, principal: CurrentPrincipal):
    """Return a JWT for the authenticated caller (sub = email)."""
    settings = get_settings()
    expires = timedelta(minutes=settings.access_token_expire_minutes)
    token = create_access_token(
        principal.email,
        claims={"identity_id": principal.identity_id, "authority": principal.authority.value},
        expires_delta=expires,
    )
    return TokenResponse(access_token=token, expires_in=int(expires.total_seconds()))

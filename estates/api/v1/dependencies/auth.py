"""Principal resolution: HTTP Basic (email + password) or Bearer JWT."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import (
    HTTPAuthorizationCredentials,
    HTTPBasic,
    HTTPBasicCredentials,
    HTTPBearer,
)
from sqlalchemy.ext.asyncio import AsyncSession

from estates.api.v1.dependencies.db import get_db
from estates.application.ownership_guard import Principal
from estates.application.services.identity_service import IdentityService
from estates.domain.exceptions import AuthenticationException, AuthorizationException
from estates.infrastructure.persistence.models import Identity
from estates.infrastructure.persistence.repositories import Repositories
from estates.infrastructure.security.jwt import verify_token

logger = logging.getLogger(__name__)

_http_basic = HTTPBasic(auto_error=False)
_http_bearer = HTTPBearer(auto_error=False)


def _to_principal(identity: Identity) -> Principal:
    return Principal(
        identity_id=identity.id, email=identity.email, authority=identity.authority
    )


async def get_current_principal_optional(
    basic: Annotated[HTTPBasicCredentials | None, Depends(_http_basic)],
    bearer: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Principal | None:
    """Return the caller if credentials are present and valid; else None."""
    repos = Repositories.for_session(db)
    if bearer is not None:
        try:
            payload = verify_token(bearer.credentials)
        except ValueError:
            logger.debug("Rejected bearer token")
            return None
        identity = await repos.identities.get_by_email(payload["sub"])
        if identity is None or not identity.enabled:
            return None
        return _to_principal(identity)
    if basic is not None:
        identity = await IdentityService(repos).authenticate(basic.username, basic.password)
        return _to_principal(identity) if identity is not None else None
    return None


async def get_current_principal(
    principal: Annotated[Principal | None, Depends(get_current_principal_optional)],
) -> Principal:
    """Return the caller; raise 401 if missing or invalid."""
    if principal is None:
        raise AuthenticationException("Not authenticated")
    return principal


async def require_admin(
    principal: Annotated[Principal, Depends(get_current_principal)],
) -> Principal:
    """Return the caller if they have ADMIN authority; raise 403 otherwise."""
    if not principal.is_admin:
        raise AuthorizationException(message="Administrator authority required")
    return principal


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
AdminPrincipal = Annotated[Principal, Depends(require_admin)]

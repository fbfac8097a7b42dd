"""Domain layer: enums and exceptions (no framework or infrastructure imports)."""

from estates.domain.enums import Authority, EntityType
from estates.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    EstatesException,
    ResourceNotFoundException,
    StateConflictException,
    ValidationException,
)

__all__ = [
    "Authority",
    "EntityType",
    "AuthenticationException",
    "AuthorizationException",
    "EstatesException",
    "ResourceNotFoundException",
    "StateConflictException",
    "ValidationException",
]

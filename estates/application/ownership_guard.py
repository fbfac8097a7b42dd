"""Ownership checks run before a mutating handler receives its request body.

The guard resolves the owner of the target resource through the ownership
edges below, compares the owner's email with the authenticated principal,
and hands the handler a typed context. It only reads; the handler's write
transaction starts after the guard has passed.

Ownership edges:
    property            -> owner identity
    advertisement       -> property -> owner identity
    building            -> identity
    identity            -> itself
"""

import logging
from dataclasses import dataclass

from estates.domain.enums import Authority
from estates.domain.exceptions import AuthorizationException, ResourceNotFoundException
from estates.infrastructure.persistence.models import (
    Advertisement,
    Building,
    Identity,
    Property,
)
from estates.infrastructure.persistence.repositories import (
    AdvertisementRepository,
    BuildingRepository,
    IdentityRepository,
    PropertyRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Principal:
    """Authenticated caller. Email is the ownership key."""

    identity_id: str
    email: str
    authority: Authority

    @property
    def is_admin(self) -> bool:
        return self.authority == Authority.ADMIN


@dataclass(frozen=True)
class OwnershipContext[T]:
    """What a guarded handler receives: the decoded body, the caller and the owner id.

    resource_id is the id of the guarded resource (None when creating one).
    """

    principal: Principal
    body: T
    owner_id: str
    resource_id: str | None = None


class OwnershipGuard:
    """Resolves resource owners and rejects callers who are not the owner."""

    def __init__(
        self,
        identities: IdentityRepository,
        properties: PropertyRepository,
        advertisements: AdvertisementRepository,
        buildings: BuildingRepository,
    ) -> None:
        self.identities = identities
        self.properties = properties
        self.advertisements = advertisements
        self.buildings = buildings

    @staticmethod
    def _ensure_owner(
        principal: Principal, owner: Identity, resource: str, action: str
    ) -> None:
        if owner.email != principal.email:
            logger.info(
                "Ownership check failed: %s tried to %s %s owned by %s",
                principal.identity_id,
                action,
                resource,
                owner.id,
            )
            raise AuthorizationException(resource, action)

    async def check_identity_reference(
        self, principal: Principal, identity_id: str, resource: str, action: str
    ) -> Identity:
        """Body names an identity (new owner, renter): it must exist and be the caller."""
        identity = await self.identities.get_by_id(identity_id)
        if identity is None:
            raise ResourceNotFoundException("identity", identity_id)
        self._ensure_owner(principal, identity, resource, action)
        return identity

    async def check_self(self, principal: Principal, identity_id: str, action: str) -> None:
        """Self-service identity routes: target must exist and be the caller."""
        if not await self.identities.exists(identity_id):
            raise ResourceNotFoundException("identity", identity_id)
        if identity_id != principal.identity_id:
            raise AuthorizationException("identity", action)

    async def check_property(
        self, principal: Principal, property_id: str, action: str
    ) -> Property:
        prop = await self.properties.get_with_owner(property_id)
        if prop is None:
            raise ResourceNotFoundException("property", property_id)
        self._ensure_owner(principal, prop.owner, "property", action)
        return prop

    async def check_advertisement(
        self, principal: Principal, advertisement_id: str, action: str
    ) -> Advertisement:
        advertisement = await self.advertisements.get_with_owner(advertisement_id)
        if advertisement is None:
            raise ResourceNotFoundException("advertisement", advertisement_id)
        self._ensure_owner(principal, advertisement.property.owner, "advertisement", action)
        return advertisement

    async def check_building(
        self, principal: Principal, building_id: str, action: str
    ) -> Building:
        building = await self.buildings.get_with_owner(building_id)
        if building is None:
            raise ResourceNotFoundException("building", building_id)
        self._ensure_owner(principal, building.identity, "building", action)
        return building

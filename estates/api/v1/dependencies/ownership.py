"""Ownership guard dependencies.

Each dependency authenticates the caller, decodes the body (if any), runs
the ownership check on a read-only session and returns an OwnershipContext.
Guarded handlers take the body only through this context, so a handler
cannot run without its check having passed.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from estates.api.v1.dependencies.auth import CurrentPrincipal
from estates.api.v1.dependencies.db import get_db
from estates.application.ownership_guard import OwnershipContext, OwnershipGuard
from estates.infrastructure.persistence.repositories import Repositories
from estates.schemas.advertisement import (
    AdvertisementCreateRequest,
    AdvertisementUpdateRequest,
    RentPropertyRequest,
)
from estates.schemas.building import BuildingCreateRequest, BuildingUpdateRequest
from estates.schemas.identity import ChangePasswordRequest, IdentityUpdateRequest
from estates.schemas.property import PropertyCreateRequest, PropertyUpdateRequest


def get_ownership_guard(db: Annotated[AsyncSession, Depends(get_db)]) -> OwnershipGuard:
    repos = Repositories.for_session(db)
    return OwnershipGuard(
        identities=repos.identities,
        properties=repos.properties,
        advertisements=repos.advertisements,
        buildings=repos.buildings,
    )


Guard = Annotated[OwnershipGuard, Depends(get_ownership_guard)]
PathContext = OwnershipContext[None]


# ---- Properties ----


async def guard_property_create(
    body: PropertyCreateRequest, principal: CurrentPrincipal, guard: Guard
) -> OwnershipContext[PropertyCreateRequest]:
    owner = await guard.check_identity_reference(principal, body.owner_id, "property", "create")
    return OwnershipContext(principal=principal, body=body, owner_id=owner.id)


async def guard_property_update(
    body: PropertyUpdateRequest, principal: CurrentPrincipal, guard: Guard
) -> OwnershipContext[PropertyUpdateRequest]:
    prop = await guard.check_property(principal, body.id, "update")
    return OwnershipContext(
        principal=principal, body=body, owner_id=prop.owner_id, resource_id=prop.id
    )


def property_owner(action: str) -> Callable[..., Awaitable[PathContext]]:
    """Guard for /properties/{property_id}/... routes."""

    async def _guard(
        property_id: str, principal: CurrentPrincipal, guard: Guard
    ) -> PathContext:
        prop = await guard.check_property(principal, property_id, action)
        return OwnershipContext(
            principal=principal, body=None, owner_id=prop.owner_id, resource_id=prop.id
        )

    return _guard


# ---- Advertisements ----


async def guard_advertisement_create(
    body: AdvertisementCreateRequest, principal: CurrentPrincipal, guard: Guard
) -> OwnershipContext[AdvertisementCreateRequest]:
    prop = await guard.check_property(principal, body.property_id, "advertise")
    return OwnershipContext(principal=principal, body=body, owner_id=prop.owner_id)


async def guard_advertisement_update(
    body: AdvertisementUpdateRequest, principal: CurrentPrincipal, guard: Guard
) -> OwnershipContext[AdvertisementUpdateRequest]:
    advertisement = await guard.check_advertisement(principal, body.id, "update")
    return OwnershipContext(
        principal=principal,
        body=body,
        owner_id=advertisement.property.owner_id,
        resource_id=advertisement.id,
    )


async def guard_advertisement_delete(
    advertisement_id: str, principal: CurrentPrincipal, guard: Guard
) -> PathContext:
    advertisement = await guard.check_advertisement(principal, advertisement_id, "delete")
    return OwnershipContext(
        principal=principal,
        body=None,
        owner_id=advertisement.property.owner_id,
        resource_id=advertisement.id,
    )


async def guard_rent_property(
    body: RentPropertyRequest, principal: CurrentPrincipal, guard: Guard
) -> OwnershipContext[RentPropertyRequest]:
    """The renter acts for themself: tenant_id must be the caller."""
    tenant = await guard.check_identity_reference(principal, body.tenant_id, "property", "rent")
    return OwnershipContext(
        principal=principal, body=body, owner_id=tenant.id, resource_id=body.advertisement_id
    )


# ---- Buildings ----


async def guard_building_create(
    body: BuildingCreateRequest, principal: CurrentPrincipal, guard: Guard
) -> OwnershipContext[BuildingCreateRequest]:
    owner = await guard.check_identity_reference(
        principal, body.identity_id, "building", "create"
    )
    return OwnershipContext(principal=principal, body=body, owner_id=owner.id)


async def guard_building_update(
    body: BuildingUpdateRequest, principal: CurrentPrincipal, guard: Guard
) -> OwnershipContext[BuildingUpdateRequest]:
    building = await guard.check_building(principal, body.id, "update")
    return OwnershipContext(
        principal=principal, body=body, owner_id=building.identity_id, resource_id=building.id
    )


def building_owner(action: str) -> Callable[..., Awaitable[PathContext]]:
    """Guard for /buildings/{building_id}/... routes."""

    async def _guard(
        building_id: str, principal: CurrentPrincipal, guard: Guard
    ) -> PathContext:
        building = await guard.check_building(principal, building_id, action)
        return OwnershipContext(
            principal=principal,
            body=None,
            owner_id=building.identity_id,
            resource_id=building.id,
        )

    return _guard


# ---- Identities (self-service) ----


def identity_self(action: str) -> Callable[..., Awaitable[PathContext]]:
    """Guard for /identities/{identity_id}/... routes: the caller acts on themself."""

    async def _guard(
        identity_id: str, principal: CurrentPrincipal, guard: Guard
    ) -> PathContext:
        await guard.check_self(principal, identity_id, action)
        return OwnershipContext(
            principal=principal, body=None, owner_id=identity_id, resource_id=identity_id
        )

    return _guard


async def guard_identity_update(
    body: IdentityUpdateRequest, principal: CurrentPrincipal, guard: Guard
) -> OwnershipContext[IdentityUpdateRequest]:
    await guard.check_self(principal, body.id, "update")
    return OwnershipContext(principal=principal, body=body, owner_id=body.id, resource_id=body.id)


async def guard_change_password(
    body: ChangePasswordRequest, principal: CurrentPrincipal, guard: Guard
) -> OwnershipContext[ChangePasswordRequest]:
    await guard.check_self(principal, body.id, "change-password")
    return OwnershipContext(principal=principal, body=body, owner_id=body.id, resource_id=body.id)

"""Advertisement application service and property rental (rental service)."""

from __future__ import annotations

import datetime as dt
import logging

from estates.application.services.base import EntityService
from estates.domain.enums import EntityType
from estates.domain.exceptions import ResourceNotFoundException, StateConflictException
from estates.infrastructure.persistence.models import Advertisement
from estates.schemas.advertisement import (
    AdvertisementCreateRequest,
    AdvertisementFullResponse,
    AdvertisementUpdateRequest,
    RentPropertyRequest,
)
from estates.schemas.property import PropertyFullResponse
from estates.schemas.summaries import AdvertisementShortResponse

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = frozenset({"title", "price", "date"})


class AdvertisementService(EntityService):
    """Advertisements are one-per-property listings; renting sets the property tenant."""

    async def list_advertisements(self) -> list[AdvertisementShortResponse]:
        return [
            AdvertisementShortResponse.model_validate(a)
            for a in await self.repos.advertisements.list_all()
        ]

    async def get_advertisement(self, advertisement_id: str) -> AdvertisementFullResponse:
        return await self._full_cache.get_or_load(
            EntityType.ADVERTISEMENT,
            advertisement_id,
            lambda: self._load_full(advertisement_id),
            AdvertisementFullResponse,
        )

    async def _load_full(self, advertisement_id: str) -> AdvertisementFullResponse:
        advertisement = await self.repos.advertisements.get_full(advertisement_id)
        if advertisement is None:
            raise ResourceNotFoundException("advertisement", advertisement_id)
        return AdvertisementFullResponse.model_validate(advertisement)

    async def _get(self, advertisement_id: str, *, for_update: bool = False) -> Advertisement:
        advertisement = await self.repos.advertisements.get_by_id(
            advertisement_id, for_update=for_update
        )
        if advertisement is None:
            raise ResourceNotFoundException("advertisement", advertisement_id)
        return advertisement

    async def create_advertisement(
        self, body: AdvertisementCreateRequest
    ) -> AdvertisementFullResponse:
        if not await self.repos.properties.exists(body.property_id):
            raise ResourceNotFoundException("property", body.property_id)
        if await self.repos.advertisements.get_by_property_id(body.property_id) is not None:
            raise StateConflictException(
                "Property already has an advertisement", "property_id"
            )
        advertisement = Advertisement(
            title=body.title,
            description=body.description,
            price=body.price,
            date=body.date or dt.date.today(),
            property_id=body.property_id,
        )
        await self.repos.advertisements.create(advertisement)
        self._collect(EntityType.ADVERTISEMENT, advertisement)
        logger.info(
            "Advertisement %s created for property %s", advertisement.id, body.property_id
        )
        return await self._load_full(advertisement.id)

    async def update_advertisement(
        self, body: AdvertisementUpdateRequest
    ) -> AdvertisementFullResponse:
        advertisement = await self._get(body.id)
        for field, value in body.model_dump(exclude_unset=True, exclude={"id"}).items():
            if value is None and field in _REQUIRED_FIELDS:
                continue
            setattr(advertisement, field, value)
        await self.repos.advertisements.update(advertisement)
        self._collect(EntityType.ADVERTISEMENT, advertisement)
        return await self._load_full(advertisement.id)

    async def delete_advertisement(self, advertisement_id: str) -> None:
        advertisement = await self._get(advertisement_id)
        self._collect(EntityType.ADVERTISEMENT, advertisement)
        await self.repos.advertisements.delete(advertisement)
        logger.info("Advertisement %s deleted", advertisement_id)

    async def rent_property(self, body: RentPropertyRequest) -> PropertyFullResponse:
        """Make tenant_id the tenant of the advertised property.

        The tenant identity and the advertisement are locked for the rest of
        the transaction so two rentals of the same listing serialize.
        """
        tenant = await self.repos.identities.get_by_id(body.tenant_id, for_update=True)
        if tenant is None:
            raise ResourceNotFoundException("identity", body.tenant_id)
        advertisement = await self._get(body.advertisement_id, for_update=True)
        prop = await self.repos.properties.get_for_mutation(advertisement.property_id)
        if prop is None:
            raise ResourceNotFoundException("property", advertisement.property_id)
        self._collect(EntityType.PROPERTY, prop)
        prop.tenant_id = tenant.id
        await self.repos.properties.update(prop)
        full = await self.repos.properties.get_full(prop.id)
        assert full is not None
        self._collect(EntityType.PROPERTY, full)
        logger.info("Property %s rented by %s", prop.id, tenant.id)
        return PropertyFullResponse.model_validate(full)

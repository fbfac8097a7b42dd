"""Advertisement API: public reads, owner writes, and renting an advertised property."""

from fastapi import APIRouter, Depends, Request

from estates.api.v1.dependencies import (
    get_advertisement_service,
    get_advertisement_service_for_write,
    guard_advertisement_create,
    guard_advertisement_delete,
    guard_advertisement_update,
    guard_rent_property,
)
from estates.application.ownership_guard import OwnershipContext
from estates.application.services import AdvertisementService
from estates.core.limiter import limit_writes
from estates.schemas.advertisement import (
    AdvertisementCreateRequest,
    AdvertisementFullResponse,
    AdvertisementUpdateRequest,
    RentPropertyRequest,
)
from estates.schemas.property import PropertyFullResponse
from estates.schemas.summaries import AdvertisementShortResponse

router = APIRouter()


@router.get("", response_model=list[AdvertisementShortResponse])
async def list_advertisements(
    advertisement_svc: AdvertisementService = Depends(get_advertisement_service),
):
    return await advertisement_svc.list_advertisements()


@router.get("/{advertisement_id}", response_model=AdvertisementFullResponse)
async def get_advertisement(
    advertisement_id: str,
    advertisement_svc: AdvertisementService = Depends(get_advertisement_service),
):
    """Advertisement with its property, category and media (cached)."""
    return await advertisement_svc.get_advertisement(advertisement_id)


@router.post("", response_model=AdvertisementFullResponse, status_code=201)
@limit_writes
async def create_advertisement(
    request: Request,
    ctx: OwnershipContext[AdvertisementCreateRequest] = Depends(guard_advertisement_create),
    advertisement_svc: AdvertisementService = Depends(get_advertisement_service_for_write),
):
    """Advertise a property the caller owns. 409 when it is already advertised."""
    return await advertisement_svc.create_advertisement(ctx.body)


@router.put("/rent-property", response_model=PropertyFullResponse)
@limit_writes
async def rent_property(
    request: Request,
    ctx: OwnershipContext[RentPropertyRequest] = Depends(guard_rent_property),
    advertisement_svc: AdvertisementService = Depends(get_advertisement_service_for_write),
):
    """Rent the advertised property; the caller becomes its tenant."""
    return await advertisement_svc.rent_property(ctx.body)


@router.put("", response_model=AdvertisementFullResponse)
@limit_writes
async def update_advertisement(
    request: Request,
    ctx: OwnershipContext[AdvertisementUpdateRequest] = Depends(guard_advertisement_update),
    advertisement_svc: AdvertisementService = Depends(get_advertisement_service_for_write),
):
    return await advertisement_svc.update_advertisement(ctx.body)


@router.delete("/{advertisement_id}", status_code=204)
@limit_writes
async def delete_advertisement(
    request: Request,
    ctx: OwnershipContext[None] = Depends(guard_advertisement_delete),
    advertisement_svc: AdvertisementService = Depends(get_advertisement_service_for_write),
):
    await advertisement_svc.delete_advertisement(ctx.resource_id)

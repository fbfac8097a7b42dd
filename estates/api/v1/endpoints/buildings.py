"""Building API: public reads; owner-only writes and media management."""

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile

from estates.api.v1.dependencies import (
    building_owner,
    get_building_service,
    get_building_service_for_write,
    guard_building_create,
    guard_building_update,
)
from estates.api.v1.endpoints._uploads import read_uploads
from estates.application.ownership_guard import OwnershipContext
from estates.application.services import BuildingService
from estates.core.limiter import limit_upload, limit_writes
from estates.schemas.building import (
    BuildingCreateRequest,
    BuildingFullResponse,
    BuildingUpdateRequest,
)
from estates.schemas.summaries import BuildingShortResponse, DocumentResponse, ImageResponse

router = APIRouter()


@router.get("", response_model=list[BuildingShortResponse])
async def list_buildings(
    building_svc: BuildingService = Depends(get_building_service),
):
    return await building_svc.list_buildings()


@router.get("/{building_id}", response_model=BuildingFullResponse)
async def get_building(
    building_id: str,
    building_svc: BuildingService = Depends(get_building_service),
):
    """Building with its owner and media (cached)."""
    return await building_svc.get_building(building_id)


@router.post("", response_model=BuildingFullResponse, status_code=201)
@limit_writes
async def create_building(
    request: Request,
    ctx: OwnershipContext[BuildingCreateRequest] = Depends(guard_building_create),
    building_svc: BuildingService = Depends(get_building_service_for_write),
):
    """Create a building owned by the caller. 409 when the address is taken."""
    return await building_svc.create_building(ctx.body)


@router.put("", response_model=BuildingFullResponse)
@limit_writes
async def update_building(
    request: Request,
    ctx: OwnershipContext[BuildingUpdateRequest] = Depends(guard_building_update),
    building_svc: BuildingService = Depends(get_building_service_for_write),
):
    return await building_svc.update_building(ctx.body)


@router.delete("/{building_id}", status_code=204)
@limit_writes
async def delete_building(
    request: Request,
    ctx: OwnershipContext[None] = Depends(building_owner("delete")),
    building_svc: BuildingService = Depends(get_building_service_for_write),
):
    await building_svc.delete_building(ctx.resource_id)


@router.post("/{building_id}/images", response_model=list[ImageResponse], status_code=201)
@limit_upload
async def add_building_images(
    request: Request,
    files: list[UploadFile] = File(...),
    ctx: OwnershipContext[None] = Depends(building_owner("add-images")),
    building_svc: BuildingService = Depends(get_building_service_for_write),
):
    """Attach images (image/* only). The first image becomes the preview."""
    return await building_svc.add_images(ctx.resource_id, await read_uploads(files))


@router.delete("/{building_id}/images", status_code=204)
@limit_writes
async def remove_building_images(
    request: Request,
    image_ids: list[str] = Query(...),
    ctx: OwnershipContext[None] = Depends(building_owner("remove-images")),
    building_svc: BuildingService = Depends(get_building_service_for_write),
):
    await building_svc.remove_images(ctx.resource_id, image_ids)


@router.put("/{building_id}/images/{image_id}/preview", response_model=ImageResponse)
@limit_writes
async def set_building_preview_image(
    request: Request,
    image_id: str,
    ctx: OwnershipContext[None] = Depends(building_owner("set-preview")),
    building_svc: BuildingService = Depends(get_building_service_for_write),
):
    return await building_svc.set_preview_image(ctx.resource_id, image_id)


@router.post(
    "/{building_id}/documents", response_model=list[DocumentResponse], status_code=201
)
@limit_upload
async def add_building_documents(
    request: Request,
    files: list[UploadFile] = File(...),
    ctx: OwnershipContext[None] = Depends(building_owner("add-documents")),
    building_svc: BuildingService = Depends(get_building_service_for_write),
):
    return await building_svc.add_documents(ctx.resource_id, await read_uploads(files))


@router.delete("/{building_id}/documents", status_code=204)
@limit_writes
async def remove_building_documents(
    request: Request,
    document_ids: list[str] = Query(...),
    ctx: OwnershipContext[None] = Depends(building_owner("remove-documents")),
    building_svc: BuildingService = Depends(get_building_service_for_write),
):
    await building_svc.remove_documents(ctx.resource_id, document_ids)

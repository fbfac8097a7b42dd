"""Property API: public reads; owner-only writes and media management."""

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile

from estates.api.v1.dependencies import (
    get_property_service,
    get_property_service_for_write,
    guard_property_create,
    guard_property_update,
    property_owner,
)
from estates.api.v1.endpoints._uploads import read_uploads
from estates.application.ownership_guard import OwnershipContext
from estates.application.services import PropertyService
from estates.core.limiter import limit_upload, limit_writes
from estates.schemas.property import (
    PropertyCreateRequest,
    PropertyFullResponse,
    PropertyUpdateRequest,
)
from estates.schemas.summaries import (
    DocumentResponse,
    ImageResponse,
    PropertyWithCategoryResponse,
)

router = APIRouter()


@router.get("", response_model=list[PropertyWithCategoryResponse])
async def list_properties(
    property_svc: PropertyService = Depends(get_property_service),
):
    return await property_svc.list_properties()


@router.get("/{property_id}", response_model=PropertyFullResponse)
async def get_property(
    property_id: str,
    property_svc: PropertyService = Depends(get_property_service),
):
    """Property with owner, tenant, category, advertisement and media (cached)."""
    return await property_svc.get_property(property_id)


@router.post("", response_model=PropertyFullResponse, status_code=201)
@limit_writes
async def create_property(
    request: Request,
    ctx: OwnershipContext[PropertyCreateRequest] = Depends(guard_property_create),
    property_svc: PropertyService = Depends(get_property_service_for_write),
):
    """Create a property owned by the caller (owner_id must be the caller)."""
    return await property_svc.create_property(ctx.body)


@router.put("", response_model=PropertyFullResponse)
@limit_writes
async def update_property(
    request: Request,
    ctx: OwnershipContext[PropertyUpdateRequest] = Depends(guard_property_update),
    property_svc: PropertyService = Depends(get_property_service_for_write),
):
    return await property_svc.update_property(ctx.body)


@router.delete("/{property_id}", status_code=204)
@limit_writes
async def delete_property(
    request: Request,
    ctx: OwnershipContext[None] = Depends(property_owner("delete")),
    property_svc: PropertyService = Depends(get_property_service_for_write),
):
    await property_svc.delete_property(ctx.resource_id)


@router.post("/{property_id}/images", response_model=list[ImageResponse], status_code=201)
@limit_upload
async def add_property_images(
    request: Request,
    files: list[UploadFile] = File(...),
    ctx: OwnershipContext[None] = Depends(property_owner("add-images")),
    property_svc: PropertyService = Depends(get_property_service_for_write),
):
    """Attach images (image/* only). The first image becomes the preview."""
    return await property_svc.add_images(ctx.resource_id, await read_uploads(files))


@router.delete("/{property_id}/images", status_code=204)
@limit_writes
async def remove_property_images(
    request: Request,
    image_ids: list[str] = Query(...),
    ctx: OwnershipContext[None] = Depends(property_owner("remove-images")),
    property_svc: PropertyService = Depends(get_property_service_for_write),
):
    await property_svc.remove_images(ctx.resource_id, image_ids)


@router.put("/{property_id}/images/{image_id}/preview", response_model=ImageResponse)
@limit_writes
async def set_property_preview_image(
    request: Request,
    image_id: str,
    ctx: OwnershipContext[None] = Depends(property_owner("set-preview")),
    property_svc: PropertyService = Depends(get_property_service_for_write),
):
    return await property_svc.set_preview_image(ctx.resource_id, image_id)


@router.post(
    "/{property_id}/documents", response_model=list[DocumentResponse], status_code=201
)
@limit_upload
async def add_property_documents(
    request: Request,
    files: list[UploadFile] = File(...),
    ctx: OwnershipContext[None] = Depends(property_owner("add-documents")),
    property_svc: PropertyService = Depends(get_property_service_for_write),
):
    return await property_svc.add_documents(ctx.resource_id, await read_uploads(files))


@router.delete("/{property_id}/documents", status_code=204)
@limit_writes
async def remove_property_documents(
    request: Request,
    document_ids: list[str] = Query(...),
    ctx: OwnershipContext[None] = Depends(property_owner("remove-documents")),
    property_svc: PropertyService = Depends(get_property_service_for_write),
):
    await property_svc.remove_documents(ctx.resource_id, document_ids)

"""Identity API: registration, self-service profile, password, avatar; admin list and status."""

from fastapi import APIRouter, Depends, File, Request, UploadFile

from estates.api.v1.dependencies import (
    AdminPrincipal,
    get_identity_service,
    get_identity_service_for_write,
    guard_change_password,
    guard_identity_update,
    identity_self,
)
from estates.api.v1.endpoints._uploads import read_uploads
from estates.application.ownership_guard import OwnershipContext
from estates.application.services import IdentityService
from estates.core.limiter import limit_upload, limit_writes
from estates.schemas.identity import (
    ChangePasswordRequest,
    ChangeStatusRequest,
    IdentityCreateRequest,
    IdentityFullResponse,
    IdentityUpdateRequest,
)
from estates.schemas.summaries import IdentityShortResponse, ImageResponse

router = APIRouter()


@router.post("", response_model=IdentityFullResponse, status_code=201)
@limit_writes
async def register_identity(
    request: Request,
    body: IdentityCreateRequest,
    identity_svc: IdentityService = Depends(get_identity_service_for_write),
):
    """Public registration; the new identity has USER authority."""
    return await identity_svc.register(body)


@router.get("", response_model=list[IdentityShortResponse])
async def list_identities(
    _: AdminPrincipal,
    identity_svc: IdentityService = Depends(get_identity_service),
):
    return await identity_svc.list_identities()


@router.put("/change-password", status_code=204)
@limit_writes
async def change_password(
    request: Request,
    ctx: OwnershipContext[ChangePasswordRequest] = Depends(guard_change_password),
    identity_svc: IdentityService = Depends(get_identity_service_for_write),
):
    """Change the caller's password. 409 when the new password equals the current one."""
    await identity_svc.change_password(ctx.body)


@router.put("/change-status", response_model=IdentityShortResponse)
@limit_writes
async def change_status(
    request: Request,
    body: ChangeStatusRequest,
    _: AdminPrincipal,
    identity_svc: IdentityService = Depends(get_identity_service_for_write),
):
    """Enable or disable an identity (admin). 409 when the status is unchanged."""
    return await identity_svc.change_status(body)


@router.put("", response_model=IdentityFullResponse)
@limit_writes
async def update_identity(
    request: Request,
    ctx: OwnershipContext[IdentityUpdateRequest] = Depends(guard_identity_update),
    identity_svc: IdentityService = Depends(get_identity_service_for_write),
):
    return await identity_svc.update_identity(ctx.body)


@router.get("/{identity_id}", response_model=IdentityFullResponse)
async def get_identity(
    ctx: OwnershipContext[None] = Depends(identity_self("read")),
    identity_svc: IdentityService = Depends(get_identity_service),
):
    return await identity_svc.get_identity(ctx.resource_id)


@router.delete("/{identity_id}", status_code=204)
@limit_writes
async def delete_identity(
    request: Request,
    ctx: OwnershipContext[None] = Depends(identity_self("delete")),
    identity_svc: IdentityService = Depends(get_identity_service_for_write),
):
    """Delete the caller with their properties and buildings."""
    await identity_svc.delete_identity(ctx.resource_id)


@router.post("/{identity_id}/image", response_model=ImageResponse, status_code=201)
@limit_upload
async def upload_identity_image(
    request: Request,
    file: UploadFile = File(...),
    ctx: OwnershipContext[None] = Depends(identity_self("upload-image")),
    identity_svc: IdentityService = Depends(get_identity_service_for_write),
):
    """Set the caller's avatar (must be image/*); replaces any previous one."""
    (uploaded,) = await read_uploads([file])
    return await identity_svc.upload_image(ctx.resource_id, uploaded)


@router.delete("/{identity_id}/image", status_code=204)
@limit_writes
async def remove_identity_image(
    request: Request,
    ctx: OwnershipContext[None] = Depends(identity_self("remove-image")),
    identity_svc: IdentityService = Depends(get_identity_service_for_write),
):
    await identity_svc.remove_image(ctx.resource_id)

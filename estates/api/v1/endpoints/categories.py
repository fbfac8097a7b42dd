"""Category API: public reads, admin writes."""

from fastapi import APIRouter, Depends, Request

from estates.api.v1.dependencies import (
    AdminPrincipal,
    get_category_service,
    get_category_service_for_write,
)
from estates.application.services import CategoryService
from estates.core.limiter import limit_writes
from estates.schemas.category import (
    CategoryCreateRequest,
    CategoryFullResponse,
    CategoryUpdateRequest,
)
from estates.schemas.summaries import CategoryShortResponse

router = APIRouter()


@router.get("", response_model=list[CategoryShortResponse])
async def list_categories(
    category_svc: CategoryService = Depends(get_category_service),
):
    return await category_svc.list_categories()


@router.get("/{category_id}", response_model=CategoryFullResponse)
async def get_category(
    category_id: str,
    category_svc: CategoryService = Depends(get_category_service),
):
    """Category with its properties (cached)."""
    return await category_svc.get_category(category_id)


@router.post("", response_model=CategoryFullResponse, status_code=201)
@limit_writes
async def create_category(
    request: Request,
    body: CategoryCreateRequest,
    _: AdminPrincipal,
    category_svc: CategoryService = Depends(get_category_service_for_write),
):
    return await category_svc.create_category(body)


@router.put("", response_model=CategoryFullResponse)
@limit_writes
async def update_category(
    request: Request,
    body: CategoryUpdateRequest,
    _: AdminPrincipal,
    category_svc: CategoryService = Depends(get_category_service_for_write),
):
    return await category_svc.update_category(body)


@router.delete("/{category_id}", status_code=204)
@limit_writes
async def delete_category(
    request: Request,
    category_id: str,
    _: AdminPrincipal,
    category_svc: CategoryService = Depends(get_category_service_for_write),
):
    """Delete the category; its properties become uncategorised."""
    await category_svc.delete_category(category_id)

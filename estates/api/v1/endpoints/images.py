"""Image API: raw image bytes with the stored content type."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from estates.api.v1.dependencies import get_media_service
from estates.application.services import MediaService

router = APIRouter()


@router.get("/{image_id}", response_class=Response)
async def get_image(
    image_id: str,
    media_svc: MediaService = Depends(get_media_service),
) -> Response:
    image = await media_svc.get_image(image_id)
    return Response(content=image.data, media_type=image.content_type)

"""Document API: raw document bytes, served as an attachment."""

from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from estates.api.v1.dependencies import get_media_service
from estates.application.services import MediaService

router = APIRouter()


@router.get("/{document_id}", response_class=Response)
async def get_document(
    document_id: str,
    media_svc: MediaService = Depends(get_media_service),
) -> Response:
    document = await media_svc.get_document(document_id)
    return Response(
        content=document.data,
        media_type=document.content_type,
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(document.name)}"
        },
    )

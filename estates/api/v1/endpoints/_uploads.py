"""Multipart upload helpers shared by the media routes."""

from fastapi import UploadFile

from estates.application.services.media_service import UploadedFile
from estates.core.config import get_settings
from estates.domain.exceptions import ValidationException


async def read_uploads(files: list[UploadFile]) -> list[UploadedFile]:
    """Read uploaded files into memory, enforcing max_upload_size per file."""
    limit = get_settings().max_upload_size
    uploaded = []
    for f in files:
        data = await f.read()
        if len(data) > limit:
            raise ValidationException(
                f"File {f.filename!r} exceeds the upload limit of {limit} bytes", "files"
            )
        uploaded.append(
            UploadedFile(
                filename=f.filename or "unnamed",
                content_type=f.content_type or "application/octet-stream",
                data=data,
            )
        )
    return uploaded

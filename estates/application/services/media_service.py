"""Images and documents attached to properties, buildings and identities."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from estates.core.constants import IMAGE_CONTENT_TYPE_PREFIX
from estates.domain.exceptions import ResourceNotFoundException, ValidationException
from estates.infrastructure.persistence.models import Document, Image
from estates.infrastructure.persistence.repositories import Repositories

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedFile:
    """An uploaded file already read into memory."""

    filename: str
    content_type: str
    data: bytes


def build_images(files: Sequence[UploadedFile]) -> list[Image]:
    """Create Image rows; every file must have an image/* content type."""
    if not files:
        raise ValidationException("At least one image is required", "files")
    images = []
    for f in files:
        if not f.content_type.startswith(IMAGE_CONTENT_TYPE_PREFIX):
            raise ValidationException(
                f"File {f.filename!r} is not an image ({f.content_type})", "files"
            )
        images.append(
            Image(name=f.filename, content_type=f.content_type, data=f.data, preview=False)
        )
    return images


def build_documents(files: Sequence[UploadedFile]) -> list[Document]:
    if not files:
        raise ValidationException("At least one document is required", "files")
    return [
        Document(name=f.filename, content_type=f.content_type, data=f.data) for f in files
    ]


def pick[M: (Image, Document)](items: Sequence[M], ids: Sequence[str], kind: str) -> list[M]:
    """Return the attached items with the given ids; unknown ids are NotFound."""
    if not ids:
        raise ValidationException(f"At least one {kind} id is required", f"{kind}_ids")
    by_id = {item.id: item for item in items}
    missing = [i for i in ids if i not in by_id]
    if missing:
        raise ResourceNotFoundException(kind, missing[0])
    return [by_id[i] for i in dict.fromkeys(ids)]


def attach_images(current: list[Image], new: list[Image]) -> None:
    """Append new images; the first becomes the preview if none is set yet."""
    if not any(img.preview for img in current):
        new[0].preview = True
    current.extend(new)


def detach_images(current: list[Image], removed: list[Image]) -> None:
    """Remove images; if the preview went, the first remaining image takes over."""
    had_preview = any(img.preview for img in removed)
    for img in removed:
        current.remove(img)
    if had_preview and current:
        current[0].preview = True


def select_preview(images: Sequence[Image], image_id: str) -> Image:
    """Make image_id the only preview among images."""
    target = next((img for img in images if img.id == image_id), None)
    if target is None:
        raise ResourceNotFoundException("image", image_id)
    for img in images:
        img.preview = img is target
    return target


class MediaService:
    """Read access to stored image and document bytes."""

    def __init__(self, repos: Repositories) -> None:
        self.repos = repos

    async def get_image(self, image_id: str) -> Image:
        image = await self.repos.images.get_by_id(image_id)
        if image is None:
            raise ResourceNotFoundException("image", image_id)
        return image

    async def get_document(self, document_id: str) -> Document:
        document = await self.repos.documents.get_by_id(document_id)
        if document is None:
            raise ResourceNotFoundException("document", document_id)
        return document

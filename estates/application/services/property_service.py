"""Property application service (rental service)."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from estates.application.services.base import EntityService
from estates.application.services.media_service import (
    UploadedFile,
    attach_images,
    build_documents,
    build_images,
    detach_images,
    pick,
    select_preview,
)
from estates.domain.enums import EntityType
from estates.domain.exceptions import ResourceNotFoundException
from estates.infrastructure.persistence.models import Property
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

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = frozenset({"name", "address"})


class PropertyService(EntityService):
    """List, read (cached), create, update and delete properties and their media."""

    async def list_properties(self) -> list[PropertyWithCategoryResponse]:
        return [
            PropertyWithCategoryResponse.model_validate(p)
            for p in await self.repos.properties.list_all()
        ]

    async def get_property(self, property_id: str) -> PropertyFullResponse:
        """Full response, served from cache when present."""
        return await self._full_cache.get_or_load(
            EntityType.PROPERTY,
            property_id,
            lambda: self._load_full(property_id),
            PropertyFullResponse,
        )

    async def _load_full_entity(self, property_id: str) -> Property:
        prop = await self.repos.properties.get_full(property_id)
        if prop is None:
            raise ResourceNotFoundException("property", property_id)
        return prop

    async def _load_full(self, property_id: str) -> PropertyFullResponse:
        return PropertyFullResponse.model_validate(await self._load_full_entity(property_id))

    async def _load_for_mutation(self, property_id: str) -> Property:
        prop = await self.repos.properties.get_for_mutation(property_id)
        if prop is None:
            raise ResourceNotFoundException("property", property_id)
        return prop

    async def _ensure_references(
        self, category_id: str | None, tenant_id: str | None = None
    ) -> None:
        if category_id is not None and not await self.repos.categories.exists(category_id):
            raise ResourceNotFoundException("category", category_id)
        if tenant_id is not None and not await self.repos.identities.exists(tenant_id):
            raise ResourceNotFoundException("identity", tenant_id)

    async def _finish_write(self, property_id: str) -> PropertyFullResponse:
        """Reload after a write, queue the new relations' keys, and build the response."""
        full = await self._load_full_entity(property_id)
        self._collect(EntityType.PROPERTY, full)
        return PropertyFullResponse.model_validate(full)

    async def create_property(self, body: PropertyCreateRequest) -> PropertyFullResponse:
        await self._ensure_references(body.category_id)
        prop = Property(
            name=body.name,
            address=body.address,
            description=body.description,
            owner_id=body.owner_id,
            category_id=body.category_id,
            advertisement=None,
            images=[],
            documents=[],
        )
        await self.repos.properties.create(prop)
        logger.info("Property %s created for owner %s", prop.id, body.owner_id)
        return await self._finish_write(prop.id)

    async def update_property(self, body: PropertyUpdateRequest) -> PropertyFullResponse:
        prop = await self._load_for_mutation(body.id)
        self._collect(EntityType.PROPERTY, prop)
        changes = body.model_dump(exclude_unset=True, exclude={"id"})
        await self._ensure_references(changes.get("category_id"), changes.get("tenant_id"))
        for field, value in changes.items():
            if value is None and field in _REQUIRED_FIELDS:
                continue
            setattr(prop, field, value)
        await self.repos.properties.update(prop)
        return await self._finish_write(prop.id)

    async def delete_property(self, property_id: str) -> None:
        """Delete the property, its advertisement, images and documents."""
        prop = await self._load_for_mutation(property_id)
        self._collect(EntityType.PROPERTY, prop)
        images, documents = list(prop.images), list(prop.documents)
        await self.repos.properties.delete(prop)
        await self.repos.images.delete_many(images)
        await self.repos.documents.delete_many(documents)
        logger.info("Property %s deleted", property_id)

    async def add_images(
        self, property_id: str, files: Sequence[UploadedFile]
    ) -> list[ImageResponse]:
        prop = await self._load_for_mutation(property_id)
        new = build_images(files)
        attach_images(prop.images, new)
        await self.repos.properties.update(prop)
        self._collect(EntityType.PROPERTY, prop)
        return [ImageResponse.model_validate(img) for img in new]

    async def remove_images(self, property_id: str, image_ids: Sequence[str]) -> None:
        prop = await self._load_for_mutation(property_id)
        removed = pick(prop.images, image_ids, "image")
        detach_images(prop.images, removed)
        await self.repos.properties.update(prop)
        await self.repos.images.delete_many(removed)
        self._collect(EntityType.PROPERTY, prop)

    async def set_preview_image(self, property_id: str, image_id: str) -> ImageResponse:
        prop = await self._load_for_mutation(property_id)
        preview = select_preview(prop.images, image_id)
        await self.repos.properties.update(prop)
        self._collect(EntityType.PROPERTY, prop)
        return ImageResponse.model_validate(preview)

    async def add_documents(
        self, property_id: str, files: Sequence[UploadedFile]
    ) -> list[DocumentResponse]:
        prop = await self._load_for_mutation(property_id)
        new = build_documents(files)
        prop.documents.extend(new)
        await self.repos.properties.update(prop)
        self._collect(EntityType.PROPERTY, prop)
        return [DocumentResponse.model_validate(doc) for doc in new]

    async def remove_documents(self, property_id: str, document_ids: Sequence[str]) -> None:
        prop = await self._load_for_mutation(property_id)
        removed = pick(prop.documents, document_ids, "document")
        for doc in removed:
            prop.documents.remove(doc)
        await self.repos.properties.update(prop)
        await self.repos.documents.delete_many(removed)
        self._collect(EntityType.PROPERTY, prop)

"""Building application service (construction service)."""

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
from estates.domain.exceptions import ResourceNotFoundException, StateConflictException
from estates.infrastructure.persistence.models import Building
from estates.schemas.building import (
    BuildingCreateRequest,
    BuildingFullResponse,
    BuildingUpdateRequest,
)
from estates.schemas.summaries import BuildingShortResponse, DocumentResponse, ImageResponse

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = frozenset({"address", "built"})


class BuildingService(EntityService):
    """Buildings belong to one identity and carry images and documents."""

    async def list_buildings(self) -> list[BuildingShortResponse]:
        return [
            BuildingShortResponse.model_validate(b)
            for b in await self.repos.buildings.list_all()
        ]

    async def get_building(self, building_id: str) -> BuildingFullResponse:
        return await self._full_cache.get_or_load(
            EntityType.BUILDING,
            building_id,
            lambda: self._load_full(building_id),
            BuildingFullResponse,
        )

    async def _load_full(self, building_id: str) -> BuildingFullResponse:
        building = await self.repos.buildings.get_full(building_id)
        if building is None:
            raise ResourceNotFoundException("building", building_id)
        return BuildingFullResponse.model_validate(building)

    async def _load_for_mutation(self, building_id: str) -> Building:
        building = await self.repos.buildings.get_for_mutation(building_id)
        if building is None:
            raise ResourceNotFoundException("building", building_id)
        return building

    async def _ensure_address_free(self, address: str, exclude_id: str | None = None) -> None:
        for other in await self.repos.buildings.find_by_address(address):
            if other.id != exclude_id:
                raise StateConflictException(
                    f"Building at {address!r} already exists", "address"
                )

    async def create_building(self, body: BuildingCreateRequest) -> BuildingFullResponse:
        await self._ensure_address_free(body.address)
        building = Building(
            address=body.address,
            materials=body.materials,
            floors=body.floors,
            on_object=body.on_object,
            description=body.description,
            built=body.built,
            identity_id=body.identity_id,
            images=[],
            documents=[],
        )
        await self.repos.buildings.create(building)
        self._collect(EntityType.BUILDING, building)
        logger.info("Building %s created for identity %s", building.id, body.identity_id)
        return await self._load_full(building.id)

    async def update_building(self, body: BuildingUpdateRequest) -> BuildingFullResponse:
        building = await self._load_for_mutation(body.id)
        changes = body.model_dump(exclude_unset=True, exclude={"id"})
        if changes.get("address") is not None:
            await self._ensure_address_free(changes["address"], building.id)
        for field, value in changes.items():
            if value is None and field in _REQUIRED_FIELDS:
                continue
            setattr(building, field, value)
        await self.repos.buildings.update(building)
        self._collect(EntityType.BUILDING, building)
        return await self._load_full(building.id)

    async def delete_building(self, building_id: str) -> None:
        """Delete the building with its images and documents."""
        building = await self._load_for_mutation(building_id)
        self._collect(EntityType.BUILDING, building)
        images, documents = list(building.images), list(building.documents)
        await self.repos.buildings.delete(building)
        await self.repos.images.delete_many(images)
        await self.repos.documents.delete_many(documents)
        logger.info("Building %s deleted", building_id)

    async def add_images(
        self, building_id: str, files: Sequence[UploadedFile]
    ) -> list[ImageResponse]:
        building = await self._load_for_mutation(building_id)
        new = build_images(files)
        attach_images(building.images, new)
        await self.repos.buildings.update(building)
        self._collect(EntityType.BUILDING, building)
        return [ImageResponse.model_validate(img) for img in new]

    async def remove_images(self, building_id: str, image_ids: Sequence[str]) -> None:
        building = await self._load_for_mutation(building_id)
        removed = pick(building.images, image_ids, "image")
        detach_images(building.images, removed)
        await self.repos.buildings.update(building)
        await self.repos.images.delete_many(removed)
        self._collect(EntityType.BUILDING, building)

    async def set_preview_image(self, building_id: str, image_id: str) -> ImageResponse:
        building = await self._load_for_mutation(building_id)
        preview = select_preview(building.images, image_id)
        await self.repos.buildings.update(building)
        self._collect(EntityType.BUILDING, building)
        return ImageResponse.model_validate(preview)

    async def add_documents(
        self, building_id: str, files: Sequence[UploadedFile]
    ) -> list[DocumentResponse]:
        building = await self._load_for_mutation(building_id)
        new = build_documents(files)
        building.documents.extend(new)
        await self.repos.buildings.update(building)
        self._collect(EntityType.BUILDING, building)
        return [DocumentResponse.model_validate(doc) for doc in new]

    async def remove_documents(self, building_id: str, document_ids: Sequence[str]) -> None:
        building = await self._load_for_mutation(building_id)
        removed = pick(building.documents, document_ids, "document")
        for doc in removed:
            building.documents.remove(doc)
        await self.repos.buildings.update(building)
        await self.repos.documents.delete_many(removed)
        self._collect(EntityType.BUILDING, building)

"""Category application service (rental service, admin writes)."""

from __future__ import annotations

import logging

from estates.application.services.base import EntityService
from estates.domain.enums import EntityType
from estates.domain.exceptions import ResourceNotFoundException, StateConflictException
from estates.infrastructure.persistence.models import Category
from estates.schemas.category import (
    CategoryCreateRequest,
    CategoryFullResponse,
    CategoryUpdateRequest,
)
from estates.schemas.summaries import CategoryShortResponse

logger = logging.getLogger(__name__)


class CategoryService(EntityService):
    async def list_categories(self) -> list[CategoryShortResponse]:
        return [
            CategoryShortResponse.model_validate(c)
            for c in await self.repos.categories.list_all()
        ]

    async def get_category(self, category_id: str) -> CategoryFullResponse:
        return await self._full_cache.get_or_load(
            EntityType.CATEGORY,
            category_id,
            lambda: self._load_full(category_id),
            CategoryFullResponse,
        )

    async def _load_full(self, category_id: str) -> CategoryFullResponse:
        category = await self.repos.categories.get_full(category_id)
        if category is None:
            raise ResourceNotFoundException("category", category_id)
        return CategoryFullResponse.model_validate(category)

    async def _load_for_mutation(self, category_id: str) -> Category:
        category = await self.repos.categories.get_for_mutation(category_id)
        if category is None:
            raise ResourceNotFoundException("category", category_id)
        return category

    async def create_category(self, body: CategoryCreateRequest) -> CategoryFullResponse:
        if await self.repos.categories.name_taken(body.name):
            raise StateConflictException(f"Category {body.name!r} already exists", "name")
        category = Category(name=body.name, description=body.description, properties=[])
        await self.repos.categories.create(category)
        logger.info("Category %s created", category.id)
        return await self._load_full(category.id)

    async def update_category(self, body: CategoryUpdateRequest) -> CategoryFullResponse:
        category = await self._load_for_mutation(body.id)
        changes = body.model_dump(exclude_unset=True, exclude={"id"})
        name = changes.get("name")
        if name is not None and await self.repos.categories.name_taken(name, category.id):
            raise StateConflictException(f"Category {name!r} already exists", "name")
        if name is not None:
            category.name = name
        if "description" in changes:
            category.description = changes["description"]
        await self.repos.categories.update(category)
        self._collect(EntityType.CATEGORY, category)
        return await self._load_full(category.id)

    async def delete_category(self, category_id: str) -> None:
        """Delete the category; its properties stay, without a category."""
        category = await self._load_for_mutation(category_id)
        self._collect(EntityType.CATEGORY, category)
        await self.repos.categories.delete(category)
        logger.info("Category %s deleted", category_id)

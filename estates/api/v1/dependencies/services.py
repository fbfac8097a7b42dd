"""Service dependencies: read services use the cache-aside path, write services
share the request's unit of work (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from estates.api.v1.dependencies.db import (
    get_full_response_cache,
    get_read_repos,
    get_unit_of_work,
)
from estates.application.services import (
    AdvertisementService,
    BuildingService,
    CategoryService,
    IdentityService,
    MediaService,
    PropertyService,
)
from estates.infrastructure.cache.read_through import FullResponseCache
from estates.infrastructure.persistence.repositories import Repositories
from estates.infrastructure.persistence.unit_of_work import UnitOfWork

ReadRepos = Annotated[Repositories, Depends(get_read_repos)]
FullCache = Annotated[FullResponseCache, Depends(get_full_response_cache)]
Uow = Annotated[UnitOfWork, Depends(get_unit_of_work, scope="function")]


def _write_repos(uow: UnitOfWork) -> Repositories:
    return Repositories.for_session(uow.session)


def get_identity_service(repos: ReadRepos, cache: FullCache) -> IdentityService:
    return IdentityService(repos, full_cache=cache)


def get_identity_service_for_write(uow: Uow) -> IdentityService:
    return IdentityService(_write_repos(uow), invalidator=uow.invalidator)


def get_category_service(repos: ReadRepos, cache: FullCache) -> CategoryService:
    return CategoryService(repos, full_cache=cache)


def get_category_service_for_write(uow: Uow) -> CategoryService:
    return CategoryService(_write_repos(uow), invalidator=uow.invalidator)


def get_property_service(repos: ReadRepos, cache: FullCache) -> PropertyService:
    return PropertyService(repos, full_cache=cache)


def get_property_service_for_write(uow: Uow) -> PropertyService:
    return PropertyService(_write_repos(uow), invalidator=uow.invalidator)


def get_advertisement_service(repos: ReadRepos, cache: FullCache) -> AdvertisementService:
    return AdvertisementService(repos, full_cache=cache)


def get_advertisement_service_for_write(uow: Uow) -> AdvertisementService:
    return AdvertisementService(_write_repos(uow), invalidator=uow.invalidator)


def get_building_service(repos: ReadRepos, cache: FullCache) -> BuildingService:
    return BuildingService(repos, full_cache=cache)


def get_building_service_for_write(uow: Uow) -> BuildingService:
    return BuildingService(_write_repos(uow), invalidator=uow.invalidator)


def get_media_service(repos: ReadRepos) -> MediaService:
    return MediaService(repos)

"""API v1 router aggregation.

Two route families share one process: the rental service (categories,
properties, advertisements) and the construction service (buildings). Each
family also carries identities, media, auth and health, mirroring the
gateway's prefix map.
"""

from fastapi import APIRouter

from estates.api.v1.endpoints import (
    advertisements,
    auth,
    buildings,
    categories,
    documents,
    health,
    identities,
    images,
    properties,
)
from estates.core.constants import CONSTRUCTION_SERVICE_PREFIX, RENTAL_SERVICE_PREFIX


def _with_shared_routes(router: APIRouter) -> APIRouter:
    router.include_router(health.router, prefix="/health", tags=["health"])
    router.include_router(auth.router, prefix="/auth", tags=["auth"])
    router.include_router(identities.router, prefix="/identities", tags=["identities"])
    router.include_router(images.router, prefix="/images", tags=["media"])
    router.include_router(documents.router, prefix="/documents", tags=["media"])
    return router


rental_router = _with_shared_routes(APIRouter())
rental_router.include_router(categories.router, prefix="/categories", tags=["categories"])
rental_router.include_router(properties.router, prefix="/properties", tags=["properties"])
rental_router.include_router(
    advertisements.router, prefix="/advertisements", tags=["advertisements"]
)

construction_router = _with_shared_routes(APIRouter())
construction_router.include_router(buildings.router, prefix="/buildings", tags=["buildings"])

api_router = APIRouter()
api_router.include_router(rental_router, prefix=RENTAL_SERVICE_PREFIX)
api_router.include_router(construction_router, prefix=CONSTRUCTION_SERVICE_PREFIX)

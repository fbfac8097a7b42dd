"""API v1 dependencies (composition root)."""

from estates.api.v1.dependencies.auth import (
    AdminPrincipal,
    CurrentPrincipal,
    get_current_principal,
    get_current_principal_optional,
    require_admin,
)
from estates.api.v1.dependencies.db import (
    get_cache,
    get_db,
    get_full_response_cache,
    get_read_repos,
    get_sessionmaker,
    get_unit_of_work,
)
from estates.api.v1.dependencies.ownership import (
    building_owner,
    get_ownership_guard,
    guard_advertisement_create,
    guard_advertisement_delete,
    guard_advertisement_update,
    guard_building_create,
    guard_building_update,
    guard_change_password,
    guard_identity_update,
    guard_property_create,
    guard_property_update,
    guard_rent_property,
    identity_self,
    property_owner,
)
from estates.api.v1.dependencies.services import (
    get_advertisement_service,
    get_advertisement_service_for_write,
    get_building_service,
    get_building_service_for_write,
    get_category_service,
    get_category_service_for_write,
    get_identity_service,
    get_identity_service_for_write,
    get_media_service,
    get_property_service,
    get_property_service_for_write,
)

__all__ = [
    "AdminPrincipal",
    "CurrentPrincipal",
    "building_owner",
    "get_advertisement_service",
    "get_advertisement_service_for_write",
    "get_building_service",
    "get_building_service_for_write",
    "get_cache",
    "get_category_service",
    "get_category_service_for_write",
    "get_current_principal",
    "get_current_principal_optional",
    "get_db",
    "get_full_response_cache",
    "get_identity_service",
    "get_identity_service_for_write",
    "get_media_service",
    "get_ownership_guard",
    "get_property_service",
    "get_property_service_for_write",
    "get_read_repos",
    "get_sessionmaker",
    "get_unit_of_work",
    "guard_advertisement_create",
    "guard_advertisement_delete",
    "guard_advertisement_update",
    "guard_building_create",
    "guard_building_update",
    "guard_change_password",
    "guard_identity_update",
    "guard_property_create",
    "guard_property_update",
    "guard_rent_property",
    "identity_self",
    "property_owner",
    "require_admin",
]

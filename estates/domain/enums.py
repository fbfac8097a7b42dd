"""Domain enumerations."""

from enum import Enum


class Authority(str, Enum):
    """Identity authority. ADMIN may manage categories and identity status."""

    ADMIN = "ADMIN"
    USER = "USER"


class EntityType(str, Enum):
    """Entity types that have a cached full response.

    The value is the cache key stem, e.g. "property" -> "propertyFullResponse::<id>".
    """

    IDENTITY = "identity"
    CATEGORY = "category"
    PROPERTY = "property"
    ADVERTISEMENT = "advertisement"
    BUILDING = "building"

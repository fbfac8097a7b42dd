"""Persistence models: ORM entities and mixins."""

from estates.infrastructure.persistence.models.advertisement import Advertisement
from estates.infrastructure.persistence.models.building import Building
from estates.infrastructure.persistence.models.category import Category
from estates.infrastructure.persistence.models.identity import Identity
from estates.infrastructure.persistence.models.media import (
    Document,
    Image,
    building_document,
    building_image,
    property_document,
    property_image,
)
from estates.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin
from estates.infrastructure.persistence.models.property import Property

__all__ = [
    "Advertisement",
    "Building",
    "Category",
    "CuidMixin",
    "Document",
    "Identity",
    "Image",
    "Property",
    "TimestampMixin",
    "building_document",
    "building_image",
    "property_document",
    "property_image",
]

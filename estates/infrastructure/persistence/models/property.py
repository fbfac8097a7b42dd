"""Property ORM model (rental service)."""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from estates.infrastructure.persistence.database import Base
from estates.infrastructure.persistence.models.media import (
    Document,
    Image,
    property_document,
    property_image,
)
from estates.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin

if TYPE_CHECKING:
    from estates.infrastructure.persistence.models.advertisement import Advertisement
    from estates.infrastructure.persistence.models.category import Category
    from estates.infrastructure.persistence.models.identity import Identity


class Property(CuidMixin, TimestampMixin, Base):
    """Property. Table: property. Owned by one identity, optionally rented by another."""

    __tablename__ = "property"

    name: Mapped[str] = mapped_column(String, nullable=False)
    address: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    owner_id: Mapped[str] = mapped_column(
        String, ForeignKey("identity.id", ondelete="CASCADE"), nullable=False, index=True
    )
    tenant_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("identity.id", ondelete="SET NULL"), nullable=True, index=True
    )
    category_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("category.id", ondelete="SET NULL"), nullable=True, index=True
    )

    owner: Mapped["Identity"] = relationship(
        back_populates="owned_properties", foreign_keys=[owner_id]
    )
    tenant: Mapped[Optional["Identity"]] = relationship(
        back_populates="tenant_properties", foreign_keys=[tenant_id]
    )
    category: Mapped[Optional["Category"]] = relationship(back_populates="properties")
    advertisement: Mapped[Optional["Advertisement"]] = relationship(
        back_populates="property",
        cascade="all, delete-orphan",
        uselist=False,
    )
    images: Mapped[list[Image]] = relationship(secondary=property_image)
    documents: Mapped[list[Document]] = relationship(secondary=property_document)

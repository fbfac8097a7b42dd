"""Building ORM model (construction service)."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from estates.infrastructure.persistence.database import Base
from estates.infrastructure.persistence.models.media import (
    Document,
    Image,
    building_document,
    building_image,
)
from estates.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin

if TYPE_CHECKING:
    from estates.infrastructure.persistence.models.identity import Identity


class Building(CuidMixin, TimestampMixin, Base):
    """Building. Table: building. Owned by one identity."""

    __tablename__ = "building"

    address: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    materials: Mapped[str | None] = mapped_column(String, nullable=True)
    floors: Mapped[int | None] = mapped_column(Integer, nullable=True)
    on_object: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    built: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )
    identity_id: Mapped[str] = mapped_column(
        String, ForeignKey("identity.id", ondelete="CASCADE"), nullable=False, index=True
    )

    identity: Mapped["Identity"] = relationship(back_populates="buildings")
    images: Mapped[list[Image]] = relationship(secondary=building_image)
    documents: Mapped[list[Document]] = relationship(secondary=building_document)

    __table_args__ = (
        CheckConstraint("floors >= 0", name="ck_building_floors_non_negative"),
        CheckConstraint("on_object >= 0", name="ck_building_on_object_non_negative"),
    )

"""Image and Document ORM models and their link tables.

Properties and buildings own images and documents through many-to-many link
tables. Image and document rows are deleted together with their owner by
the services, not by database cascades.
"""

from sqlalchemy import Boolean, Column, ForeignKey, LargeBinary, String, Table, text
from sqlalchemy.orm import Mapped, mapped_column

from estates.infrastructure.persistence.database import Base
from estates.infrastructure.persistence.models.mixins import CuidMixin


class Image(CuidMixin, Base):
    """Stored image. Table: image. At most one image per owner has preview set."""

    __tablename__ = "image"

    name: Mapped[str] = mapped_column(String, nullable=False)
    content_type: Mapped[str] = mapped_column(String, nullable=False)
    data: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    preview: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )


class Document(CuidMixin, Base):
    """Stored document. Table: document."""

    __tablename__ = "document"

    name: Mapped[str] = mapped_column(String, nullable=False)
    content_type: Mapped[str] = mapped_column(String, nullable=False)
    data: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)


def _link_table(name: str, owner_table: str, media_table: str) -> Table:
    return Table(
        name,
        Base.metadata,
        Column(
            f"{owner_table}_id",
            String,
            ForeignKey(f"{owner_table}.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        Column(
            f"{media_table}_id",
            String,
            ForeignKey(f"{media_table}.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )


property_image = _link_table("property_image", "property", "image")
property_document = _link_table("property_document", "property", "document")
building_image = _link_table("building_image", "building", "image")
building_document = _link_table("building_document", "building", "document")

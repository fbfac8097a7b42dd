"""Category ORM model (rental service)."""

from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from estates.infrastructure.persistence.database import Base
from estates.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin

if TYPE_CHECKING:
    from estates.infrastructure.persistence.models.property import Property


class Category(CuidMixin, TimestampMixin, Base):
    """Category. Table: category. Deleting it detaches its properties."""

    __tablename__ = "category"

    name: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    properties: Mapped[list["Property"]] = relationship(back_populates="category")

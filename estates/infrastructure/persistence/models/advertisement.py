"""Advertisement ORM model (rental service)."""

import datetime as dt
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from estates.infrastructure.persistence.database import Base
from estates.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin

if TYPE_CHECKING:
    from estates.infrastructure.persistence.models.property import Property


class Advertisement(CuidMixin, TimestampMixin, Base):
    """Advertisement. Table: advertisement. At most one per property."""

    __tablename__ = "advertisement"

    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, default=dt.date.today)
    property_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("property.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    property: Mapped["Property"] = relationship(back_populates="advertisement")

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_advertisement_price_non_negative"),
    )

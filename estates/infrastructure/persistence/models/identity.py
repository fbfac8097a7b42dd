"""Identity ORM model: the single user table shared by both services."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Enum, ForeignKey, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from estates.domain.enums import Authority
from estates.infrastructure.persistence.database import Base
from estates.infrastructure.persistence.models.media import Image
from estates.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin

if TYPE_CHECKING:
    from estates.infrastructure.persistence.models.building import Building
    from estates.infrastructure.persistence.models.property import Property


class Identity(CuidMixin, TimestampMixin, Base):
    """Identity. Table: identity. Unique username and email.

    Deleting an identity deletes its owned properties and buildings; tenanted
    properties lose their tenant.
    """

    __tablename__ = "identity"

    authority: Mapped[Authority] = mapped_column(
        Enum(Authority, name="authority", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=Authority.USER,
    )
    username: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False, unique=True, index=True)
    enabled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
    firstname: Mapped[str | None] = mapped_column(String, nullable=True)
    lastname: Mapped[str | None] = mapped_column(String, nullable=True)
    patronymic: Mapped[str | None] = mapped_column(String, nullable=True)
    image_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("image.id", ondelete="SET NULL"), nullable=True
    )

    image: Mapped[Image | None] = relationship(foreign_keys=[image_id])
    owned_properties: Mapped[list["Property"]] = relationship(
        back_populates="owner",
        foreign_keys="Property.owner_id",
        cascade="all, delete-orphan",
    )
    tenant_properties: Mapped[list["Property"]] = relationship(
        back_populates="tenant",
        foreign_keys="Property.tenant_id",
    )
    buildings: Mapped[list["Building"]] = relationship(
        back_populates="identity",
        cascade="all, delete-orphan",
    )

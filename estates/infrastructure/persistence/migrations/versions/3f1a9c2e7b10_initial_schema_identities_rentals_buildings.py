"""Initial schema: identities, categories, properties, advertisements, buildings, media

Revision ID: 3f1a9c2e7b10
Revises:
Create Date: 2026-10-19 10:12:41.508114

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1a9c2e7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _media_link(name: str, owner: str, media: str) -> None:
    op.create_table(
        name,
        sa.Column(f"{owner}_id", sa.String(), nullable=False),
        sa.Column(f"{media}_id", sa.String(), nullable=False),
        sa.ForeignKeyConstraint([f"{owner}_id"], [f"{owner}.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint([f"{media}_id"], [f"{media}.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint(f"{owner}_id", f"{media}_id"),
    )


def upgrade() -> None:
    """Create initial schema."""
    op.create_table(
        "image",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("content_type", sa.String(), nullable=False),
        sa.Column("data", sa.LargeBinary(), nullable=False),
        sa.Column("preview", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "document",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("content_type", sa.String(), nullable=False),
        sa.Column("data", sa.LargeBinary(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    authority = sa.Enum("ADMIN", "USER", name="authority")
    op.create_table(
        "identity",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("authority", authority, nullable=False),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("password", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("enabled", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("firstname", sa.String(), nullable=True),
        sa.Column("lastname", sa.String(), nullable=True),
        sa.Column("patronymic", sa.String(), nullable=True),
        sa.Column("image_id", sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["image_id"], ["image.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )
    op.create_index(op.f("ix_identity_email"), "identity", ["email"], unique=True)

    op.create_table(
        "category",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "property",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("owner_id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=True),
        sa.Column("category_id", sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["owner_id"], ["identity.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tenant_id"], ["identity.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["category_id"], ["category.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_property_owner_id"), "property", ["owner_id"], unique=False)
    op.create_index(op.f("ix_property_tenant_id"), "property", ["tenant_id"], unique=False)
    op.create_index(
        op.f("ix_property_category_id"), "property", ["category_id"], unique=False
    )

    op.create_table(
        "advertisement",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("property_id", sa.String(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("price >= 0", name="ck_advertisement_price_non_negative"),
        sa.ForeignKeyConstraint(["property_id"], ["property.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("property_id"),
    )

    op.create_table(
        "building",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("materials", sa.String(), nullable=True),
        sa.Column("floors", sa.Integer(), nullable=True),
        sa.Column("on_object", sa.Integer(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("built", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("identity_id", sa.String(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("floors >= 0", name="ck_building_floors_non_negative"),
        sa.CheckConstraint("on_object >= 0", name="ck_building_on_object_non_negative"),
        sa.ForeignKeyConstraint(["identity_id"], ["identity.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("address"),
    )
    op.create_index(
        op.f("ix_building_identity_id"), "building", ["identity_id"], unique=False
    )

    _media_link("property_image", "property", "image")
    _media_link("property_document", "property", "document")
    _media_link("building_image", "building", "image")
    _media_link("building_document", "building", "document")


def downgrade() -> None:
    """Drop all tables."""
    for table in (
        "building_document",
        "building_image",
        "property_document",
        "property_image",
    ):
        op.drop_table(table)
    op.drop_index(op.f("ix_building_identity_id"), table_name="building")
    op.drop_table("building")
    op.drop_table("advertisement")
    op.drop_index(op.f("ix_property_category_id"), table_name="property")
    op.drop_index(op.f("ix_property_tenant_id"), table_name="property")
    op.drop_index(op.f("ix_property_owner_id"), table_name="property")
    op.drop_table("property")
    op.drop_table("category")
    op.drop_index(op.f("ix_identity_email"), table_name="identity")
    op.drop_table("identity")
    sa.Enum(name="authority").drop(op.get_bind(), checkfirst=True)
    op.drop_table("document")
    op.drop_table("image")

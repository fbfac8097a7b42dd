"""Seed dev data: an admin identity, a category, a property and its advertisement.

Idempotent: each row is looked up by its unique key first and created only
if missing. The admin's credentials come from SEED_ADMIN_EMAIL /
SEED_ADMIN_PASSWORD (defaults suit a local database only).

Usage:
    uv run python -m scripts.seed_dev_data

Requires: DATABASE_URL and an up-to-date schema (alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import datetime as dt
import os
import sys
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from estates.domain.enums import Authority
from estates.infrastructure.persistence.database import dispose_engine, get_session_factory
from estates.infrastructure.persistence.models import Advertisement, Category, Identity, Property
from estates.infrastructure.persistence.repositories import Repositories
from estates.infrastructure.security.password import get_password_hash


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def _get_or_create_admin(repos: Repositories) -> Identity:
    email = os.environ.get("SEED_ADMIN_EMAIL", "admin@example.com")
    existing = await repos.identities.get_by_email(email)
    if existing is not None:
        print(f"  admin {email} already exists")
        return existing
    admin = Identity(
        authority=Authority.ADMIN,
        username=os.environ.get("SEED_ADMIN_USERNAME", "admin"),
        email=email,
        password=get_password_hash(os.environ.get("SEED_ADMIN_PASSWORD", "admin")),
        enabled=True,
        firstname="Admin",
        lastname="Estates",
        patronymic=None,
    )
    await repos.identities.create(admin)
    print(f"  created admin {email}")
    return admin


async def _get_or_create_category(repos: Repositories) -> Category:
    category = await repos.categories.get_by_name("Hotels")
    if category is None:
        category = Category(name="Hotels", description="Hotels available for rent")
        await repos.categories.create(category)
        print("  created category Hotels")
    return category


async def _get_or_create_property(
    session: AsyncSession, repos: Repositories, owner: Identity, category: Category
) -> Property:
    result = await session.execute(
        select(Property).where(Property.name == "Deleon", Property.owner_id == owner.id)
    )
    prop = result.scalar_one_or_none()
    if prop is None:
        prop = Property(
            name="Deleon",
            address="Novosibirsk, Russkaya st. 175/1",
            description="Deleon hotel",
            owner_id=owner.id,
            category_id=category.id,
        )
        await repos.properties.create(prop)
        print("  created property Deleon")
    return prop


async def _get_or_create_advertisement(repos: Repositories, prop: Property) -> None:
    if await repos.advertisements.get_by_property_id(prop.id) is not None:
        return
    await repos.advertisements.create(
        Advertisement(
            title="Deleon hotel for rent",
            description="Everything about renting the Deleon hotel",
            price=Decimal("340500.50"),
            date=dt.date.today(),
            property_id=prop.id,
        )
    )
    print("  created advertisement for Deleon")


async def seed() -> None:
    factory = get_session_factory()
    try:
        async with factory() as session, session.begin():
            repos = Repositories.for_session(session)
            admin = await _get_or_create_admin(repos)
            category = await _get_or_create_category(repos)
            prop = await _get_or_create_property(session, repos, admin, category)
            await _get_or_create_advertisement(repos, prop)
    finally:
        await dispose_engine()


def main() -> int:
    _load_env()
    print("Seeding dev data...")
    asyncio.run(seed())
    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

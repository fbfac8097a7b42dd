"""Identity application service: registration, profile, password, status and avatar.

Every identity change fans out to the properties and buildings that embed
the identity summary; deletion cascades to owned properties and buildings.
"""

from __future__ import annotations

import logging

from estates.application.services.base import EntityService
from estates.application.services.media_service import UploadedFile, build_images
from estates.domain.enums import Authority, EntityType
from estates.domain.exceptions import (
    ResourceNotFoundException,
    StateConflictException,
    ValidationException,
)
from estates.infrastructure.persistence.models import Document, Identity, Image
from estates.infrastructure.security.password import (
    get_password_hash_async,
    verify_password_async,
)
from estates.schemas.identity import (
    ChangePasswordRequest,
    ChangeStatusRequest,
    IdentityCreateRequest,
    IdentityFullResponse,
    IdentityUpdateRequest,
)
from estates.schemas.summaries import IdentityShortResponse, ImageResponse

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = frozenset({"username", "email"})


class IdentityService(EntityService):
    """Identities are the owners and tenants of properties and owners of buildings."""

    async def authenticate(self, email: str, password: str) -> Identity | None:
        """Return the enabled identity matching the credentials, or None."""
        identity = await self.repos.identities.get_by_email(email)
        if identity is None or not identity.enabled:
            return None
        if not await verify_password_async(password, identity.password):
            return None
        return identity

    async def list_identities(self) -> list[IdentityShortResponse]:
        return [
            IdentityShortResponse.model_validate(i)
            for i in await self.repos.identities.list_all()
        ]

    async def get_identity(self, identity_id: str) -> IdentityFullResponse:
        return await self._full_cache.get_or_load(
            EntityType.IDENTITY,
            identity_id,
            lambda: self._load_full(identity_id),
            IdentityFullResponse,
        )

    async def _load_full(self, identity_id: str) -> IdentityFullResponse:
        identity = await self.repos.identities.get_full(identity_id)
        if identity is None:
            raise ResourceNotFoundException("identity", identity_id)
        return IdentityFullResponse.model_validate(identity)

    async def _load_for_mutation(self, identity_id: str) -> Identity:
        identity = await self.repos.identities.get_for_mutation(identity_id)
        if identity is None:
            raise ResourceNotFoundException("identity", identity_id)
        return identity

    async def _ensure_unique(
        self, email: str, username: str, exclude_id: str | None = None
    ) -> None:
        clash = await self.repos.identities.email_or_username_taken(
            email, username, exclude_id
        )
        if clash is not None:
            raise StateConflictException(f"Identity with this {clash} already exists", clash)

    async def register(self, body: IdentityCreateRequest) -> IdentityFullResponse:
        """Public registration. The new identity is always a USER."""
        await self._ensure_unique(body.email, body.username)
        identity = Identity(
            authority=Authority.USER,
            username=body.username,
            email=body.email,
            password=await get_password_hash_async(body.password),
            enabled=True,
            firstname=body.firstname,
            lastname=body.lastname,
            patronymic=body.patronymic,
            image=None,
            owned_properties=[],
            tenant_properties=[],
            buildings=[],
        )
        await self.repos.identities.create(identity)
        logger.info("Identity %s registered", identity.id)
        return await self._load_full(identity.id)

    async def update_identity(self, body: IdentityUpdateRequest) -> IdentityFullResponse:
        identity = await self._load_for_mutation(body.id)
        changes = {
            k: v
            for k, v in body.model_dump(exclude_unset=True, exclude={"id"}).items()
            if not (v is None and k in _REQUIRED_FIELDS)
        }
        if "email" in changes or "username" in changes:
            await self._ensure_unique(
                changes.get("email", identity.email),
                changes.get("username", identity.username),
                identity.id,
            )
        for field, value in changes.items():
            setattr(identity, field, value)
        await self.repos.identities.update(identity)
        self._collect(EntityType.IDENTITY, identity)
        return await self._load_full(identity.id)

    async def change_password(self, body: ChangePasswordRequest) -> None:
        if not body.password:
            raise ValidationException("Password must not be empty", "password")
        identity = await self._load_for_mutation(body.id)
        if await verify_password_async(body.password, identity.password):
            raise StateConflictException(
                "New password must differ from the current one", "password"
            )
        identity.password = await get_password_hash_async(body.password)
        await self.repos.identities.update(identity)
        self._collect(EntityType.IDENTITY, identity)
        logger.info("Password changed for identity %s", identity.id)

    async def change_status(self, body: ChangeStatusRequest) -> IdentityShortResponse:
        if body.enabled is None:
            raise ValidationException("Status must not be empty", "enabled")
        identity = await self._load_for_mutation(body.id)
        if identity.enabled == body.enabled:
            raise StateConflictException(
                f"Identity is already {'enabled' if body.enabled else 'disabled'}",
                "enabled",
            )
        identity.enabled = body.enabled
        await self.repos.identities.update(identity)
        self._collect(EntityType.IDENTITY, identity)
        logger.info("Identity %s enabled=%s", identity.id, body.enabled)
        return IdentityShortResponse.model_validate(identity)

    async def delete_identity(self, identity_id: str) -> None:
        """Delete the identity with its properties, buildings and all their media.

        Tenanted properties stay and lose their tenant.
        """
        identity = await self._load_for_mutation(identity_id)
        self._collect(EntityType.IDENTITY, identity)
        for prop in (*identity.owned_properties, *identity.tenant_properties):
            self._collect(EntityType.PROPERTY, prop)
        images: list[Image] = [img for p in identity.owned_properties for img in p.images]
        images += [img for b in identity.buildings for img in b.images]
        if identity.image is not None:
            images.append(identity.image)
        documents: list[Document] = [
            doc for p in identity.owned_properties for doc in p.documents
        ]
        documents += [doc for b in identity.buildings for doc in b.documents]
        await self.repos.identities.delete(identity)
        await self.repos.images.delete_many(images)
        await self.repos.documents.delete_many(documents)
        logger.info("Identity %s deleted", identity_id)

    async def upload_image(self, identity_id: str, file: UploadedFile) -> ImageResponse:
        """Set the identity avatar, replacing (and deleting) any previous one."""
        identity = await self._load_for_mutation(identity_id)
        (image,) = build_images([file])
        image.preview = True
        previous = identity.image
        identity.image = image
        await self.repos.identities.update(identity)
        if previous is not None:
            await self.repos.images.delete_many([previous])
        self._collect(EntityType.IDENTITY, identity)
        return ImageResponse.model_validate(image)

    async def remove_image(self, identity_id: str) -> None:
        identity = await self._load_for_mutation(identity_id)
        if identity.image is None:
            raise ResourceNotFoundException("image", identity_id)
        previous = identity.image
        identity.image = None
        await self.repos.identities.update(identity)
        await self.repos.images.delete_many([previous])
        self._collect(EntityType.IDENTITY, identity)

"""Identity endpoints: registration, Basic and bearer auth, self-service and admin routes."""

from httpx import AsyncClient

from estates.domain.enums import Authority
from support import DEFAULT_PASSWORD, RENTAL, basic_auth

IDENTITIES = f"{RENTAL}/identities"


async def test_register_creates_user_identity(client: AsyncClient) -> None:
    response = await client.post(
        IDENTITIES,
        json={
            "username": "ann",
            "email": "ann@example.com",
            "password": DEFAULT_PASSWORD,
            "firstname": "Ann",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["authority"] == "USER"
    assert data["owned_properties"] == []
    assert "password" not in data


async def test_register_duplicate_email_conflicts(client: AsyncClient, make_identity) -> None:
    await make_identity("ann")
    response = await client.post(
        IDENTITIES,
        json={"username": "other", "email": "ann@example.com", "password": "x"},
    )
    assert response.status_code == 409
    assert response.json()["details"] == {"field": "email"}


async def test_register_invalid_body_is_422(client: AsyncClient) -> None:
    response = await client.post(IDENTITIES, json={"username": "ann"})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_get_self_requires_authentication(client: AsyncClient, make_identity) -> None:
    ann = await make_identity("ann")
    response = await client.get(f"{IDENTITIES}/{ann.id}")
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Basic"


async def test_wrong_password_is_401(client: AsyncClient, make_identity) -> None:
    ann = await make_identity("ann")
    response = await client.get(
        f"{IDENTITIES}/{ann.id}", headers=basic_auth(ann.email, "wrong")
    )
    assert response.status_code == 401


async def test_disabled_identity_cannot_authenticate(client: AsyncClient, make_identity) -> None:
    ann = await make_identity("ann", enabled=False)
    response = await client.get(f"{IDENTITIES}/{ann.id}", headers=basic_auth(ann.email))
    assert response.status_code == 401


async def test_get_self_and_other(client: AsyncClient, make_identity) -> None:
    ann = await make_identity("ann")
    bob = await make_identity("bob")

    own = await client.get(f"{IDENTITIES}/{ann.id}", headers=basic_auth(ann.email))
    assert own.status_code == 200
    assert own.json()["email"] == ann.email

    other = await client.get(f"{IDENTITIES}/{bob.id}", headers=basic_auth(ann.email))
    assert other.status_code == 403


async def test_bearer_token_from_basic_credentials(client: AsyncClient, make_identity) -> None:
    ann = await make_identity("ann")
    token_response = await client.post(f"{RENTAL}/auth/token", headers=basic_auth(ann.email))
    assert token_response.status_code == 200
    token = token_response.json()["access_token"]

    response = await client.get(
        f"{IDENTITIES}/{ann.id}", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 200

    bad = await client.get(
        f"{IDENTITIES}/{ann.id}", headers={"Authorization": "Bearer not-a-token"}
    )
    assert bad.status_code == 401


async def test_update_self_invalidates_cached_identity(
    client: AsyncClient, make_identity, cache
) -> None:
    ann = await make_identity("ann")
    headers = basic_auth(ann.email)
    await client.get(f"{IDENTITIES}/{ann.id}", headers=headers)
    assert f"identityFullResponse::{ann.id}" in cache.store

    response = await client.put(
        IDENTITIES, json={"id": ann.id, "lastname": "Smith"}, headers=headers
    )
    assert response.status_code == 200
    assert response.json()["lastname"] == "Smith"
    assert f"identityFullResponse::{ann.id}" not in cache.store

    fresh = await client.get(f"{IDENTITIES}/{ann.id}", headers=headers)
    assert fresh.json()["lastname"] == "Smith"


async def test_update_other_identity_is_403(client: AsyncClient, make_identity) -> None:
    ann = await make_identity("ann")
    bob = await make_identity("bob")
    response = await client.put(
        IDENTITIES, json={"id": bob.id, "lastname": "X"}, headers=basic_auth(ann.email)
    )
    assert response.status_code == 403


async def test_change_password_same_value_conflicts(client: AsyncClient, make_identity) -> None:
    ann = await make_identity("ann")
    response = await client.put(
        f"{IDENTITIES}/change-password",
        json={"id": ann.id, "password": DEFAULT_PASSWORD},
        headers=basic_auth(ann.email),
    )
    assert response.status_code == 409

    changed = await client.put(
        f"{IDENTITIES}/change-password",
        json={"id": ann.id, "password": "NewSecret456!"},
        headers=basic_auth(ann.email),
    )
    assert changed.status_code == 204
    relogin = await client.get(
        f"{IDENTITIES}/{ann.id}", headers=basic_auth(ann.email, "NewSecret456!")
    )
    assert relogin.status_code == 200


async def test_admin_routes(client: AsyncClient, make_identity) -> None:
    admin = await make_identity("root", authority=Authority.ADMIN)
    ann = await make_identity("ann")

    assert (await client.get(IDENTITIES, headers=basic_auth(ann.email))).status_code == 403
    listed = await client.get(IDENTITIES, headers=basic_auth(admin.email))
    assert listed.status_code == 200
    assert {i["username"] for i in listed.json()} == {"root", "ann"}

    unchanged = await client.put(
        f"{IDENTITIES}/change-status",
        json={"id": ann.id, "enabled": True},
        headers=basic_auth(admin.email),
    )
    assert unchanged.status_code == 409

    disabled = await client.put(
        f"{IDENTITIES}/change-status",
        json={"id": ann.id, "enabled": False},
        headers=basic_auth(admin.email),
    )
    assert disabled.status_code == 200
    assert disabled.json()["enabled"] is False
    assert (
        await client.get(f"{IDENTITIES}/{ann.id}", headers=basic_auth(ann.email))
    ).status_code == 401


async def test_avatar_upload_and_remove(client: AsyncClient, make_identity) -> None:
    ann = await make_identity("ann")
    headers = basic_auth(ann.email)
    uploaded = await client.post(
        f"{IDENTITIES}/{ann.id}/image",
        files={"file": ("me.png", b"\x89PNG", "image/png")},
        headers=headers,
    )
    assert uploaded.status_code == 201
    image_id = uploaded.json()["id"]

    me = await client.get(f"{IDENTITIES}/{ann.id}", headers=headers)
    assert me.json()["image"]["id"] == image_id

    assert (
        await client.delete(f"{IDENTITIES}/{ann.id}/image", headers=headers)
    ).status_code == 204
    assert (await client.get(f"{RENTAL}/images/{image_id}")).status_code == 404
    assert (
        await client.delete(f"{IDENTITIES}/{ann.id}/image", headers=headers)
    ).status_code == 404


async def test_delete_self(client: AsyncClient, make_identity) -> None:
    ann = await make_identity("ann")
    response = await client.delete(f"{IDENTITIES}/{ann.id}", headers=basic_auth(ann.email))
    assert response.status_code == 204
    again = await client.get(f"{IDENTITIES}/{ann.id}", headers=basic_auth(ann.email))
    assert again.status_code == 401


async def test_get_missing_identity_is_404(client: AsyncClient, make_identity) -> None:
    ann = await make_identity("ann")
    response = await client.get(f"{IDENTITIES}/doesnotexist", headers=basic_auth(ann.email))
    assert response.status_code == 404

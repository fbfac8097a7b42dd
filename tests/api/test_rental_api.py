"""Rental service end to end: categories, properties, advertisements, renting and media."""

from decimal import Decimal

import pytest
from httpx import AsyncClient

from estates.domain.enums import Authority
from support import RENTAL, basic_auth


@pytest.fixture
async def people(make_identity):
    return {
        "admin": await make_identity("root", authority=Authority.ADMIN),
        "owner": await make_identity("olga"),
        "tenant": await make_identity("tom"),
    }


async def _create_category(client: AsyncClient, admin, name: str = "Hotels") -> dict:
    response = await client.post(
        f"{RENTAL}/categories", json={"name": name}, headers=basic_auth(admin.email)
    )
    assert response.status_code == 201
    return response.json()


async def _create_property(client: AsyncClient, owner, category_id: str | None = None) -> dict:
    response = await client.post(
        f"{RENTAL}/properties",
        json={
            "name": "Deleon",
            "address": "1 Main St",
            "owner_id": owner.id,
            "category_id": category_id,
        },
        headers=basic_auth(owner.email),
    )
    assert response.status_code == 201
    return response.json()


async def test_categories_are_admin_managed(client: AsyncClient, people) -> None:
    denied = await client.post(
        f"{RENTAL}/categories",
        json={"name": "Flats"},
        headers=basic_auth(people["owner"].email),
    )
    assert denied.status_code == 403

    category = await _create_category(client, people["admin"])
    listed = await client.get(f"{RENTAL}/categories")
    assert [c["name"] for c in listed.json()] == ["Hotels"]

    duplicate = await client.post(
        f"{RENTAL}/categories",
        json={"name": "Hotels"},
        headers=basic_auth(people["admin"].email),
    )
    assert duplicate.status_code == 409

    fetched = await client.get(f"{RENTAL}/categories/{category['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["properties"] == []


async def test_owner_creates_property(client: AsyncClient, people) -> None:
    category = await _create_category(client, people["admin"])
    prop = await _create_property(client, people["owner"], category["id"])
    assert prop["owner"]["id"] == people["owner"].id
    assert prop["category"]["name"] == "Hotels"
    assert prop["tenant"] is None
    assert prop["advertisement"] is None


async def test_create_property_for_someone_else_is_403(client: AsyncClient, people) -> None:
    response = await client.post(
        f"{RENTAL}/properties",
        json={"name": "Deleon", "address": "1 Main St", "owner_id": people["owner"].id},
        headers=basic_auth(people["tenant"].email),
    )
    assert response.status_code == 403
    assert (await client.get(f"{RENTAL}/properties")).json() == []


async def test_create_property_requires_authentication(client: AsyncClient, people) -> None:
    response = await client.post(
        f"{RENTAL}/properties",
        json={"name": "Deleon", "address": "1 Main St", "owner_id": people["owner"].id},
    )
    assert response.status_code == 401


async def test_stranger_cannot_update_or_delete(client: AsyncClient, people) -> None:
    prop = await _create_property(client, people["owner"])
    stranger = basic_auth(people["tenant"].email)

    update = await client.put(
        f"{RENTAL}/properties", json={"id": prop["id"], "name": "Mine"}, headers=stranger
    )
    assert update.status_code == 403
    delete = await client.delete(f"{RENTAL}/properties/{prop['id']}", headers=stranger)
    assert delete.status_code == 403

    unchanged = await client.get(f"{RENTAL}/properties/{prop['id']}")
    assert unchanged.json()["name"] == "Deleon"


async def test_missing_property_is_404(client: AsyncClient, people) -> None:
    assert (await client.get(f"{RENTAL}/properties/nope")).status_code == 404
    update = await client.put(
        f"{RENTAL}/properties",
        json={"id": "nope", "name": "X"},
        headers=basic_auth(people["owner"].email),
    )
    assert update.status_code == 404


async def test_property_read_is_cached_until_update(client: AsyncClient, people, cache) -> None:
    prop = await _create_property(client, people["owner"])
    key = f"propertyFullResponse::{prop['id']}"

    await client.get(f"{RENTAL}/properties/{prop['id']}")
    assert key in cache.store

    update = await client.put(
        f"{RENTAL}/properties",
        json={"id": prop["id"], "description": "Sea view"},
        headers=basic_auth(people["owner"].email),
    )
    assert update.status_code == 200
    assert key not in cache.store
    assert f"identityFullResponse::{people['owner'].id}" in cache.deleted

    fresh = await client.get(f"{RENTAL}/properties/{prop['id']}")
    assert fresh.json()["description"] == "Sea view"


async def test_advertise_and_rent(client: AsyncClient, people) -> None:
    prop = await _create_property(client, people["owner"])
    owner = basic_auth(people["owner"].email)
    tenant = basic_auth(people["tenant"].email)

    created = await client.post(
        f"{RENTAL}/advertisements",
        json={"title": "Cosy", "price": "100.00", "property_id": prop["id"]},
        headers=owner,
    )
    assert created.status_code == 201
    ad = created.json()
    assert Decimal(ad["price"]) == Decimal("100")
    assert ad["property"]["id"] == prop["id"]

    second = await client.post(
        f"{RENTAL}/advertisements",
        json={"title": "Again", "price": "1", "property_id": prop["id"]},
        headers=owner,
    )
    assert second.status_code == 409

    stranger_ad = await client.post(
        f"{RENTAL}/advertisements",
        json={"title": "Not mine", "price": "1", "property_id": prop["id"]},
        headers=tenant,
    )
    assert stranger_ad.status_code == 403

    on_behalf = await client.put(
        f"{RENTAL}/advertisements/rent-property",
        json={"advertisement_id": ad["id"], "tenant_id": people["tenant"].id},
        headers=owner,
    )
    assert on_behalf.status_code == 403

    rented = await client.put(
        f"{RENTAL}/advertisements/rent-property",
        json={"advertisement_id": ad["id"], "tenant_id": people["tenant"].id},
        headers=tenant,
    )
    assert rented.status_code == 200
    assert rented.json()["tenant"]["id"] == people["tenant"].id

    again = await client.put(
        f"{RENTAL}/advertisements/rent-property",
        json={"advertisement_id": ad["id"], "tenant_id": people["tenant"].id},
        headers=tenant,
    )
    assert again.status_code == 200
    assert again.json()["tenant"]["id"] == people["tenant"].id

    me = await client.get(f"{RENTAL}/identities/{people['tenant'].id}", headers=tenant)
    assert [p["id"] for p in me.json()["tenant_properties"]] == [prop["id"]]


async def test_advertisement_update_and_delete(client: AsyncClient, people) -> None:
    prop = await _create_property(client, people["owner"])
    owner = basic_auth(people["owner"].email)
    ad = (
        await client.post(
            f"{RENTAL}/advertisements",
            json={"title": "Cosy", "price": "100.00", "property_id": prop["id"]},
            headers=owner,
        )
    ).json()

    updated = await client.put(
        f"{RENTAL}/advertisements", json={"id": ad["id"], "title": "Roomy"}, headers=owner
    )
    assert updated.status_code == 200
    assert updated.json()["title"] == "Roomy"

    denied = await client.delete(
        f"{RENTAL}/advertisements/{ad['id']}", headers=basic_auth(people["tenant"].email)
    )
    assert denied.status_code == 403

    deleted = await client.delete(f"{RENTAL}/advertisements/{ad['id']}", headers=owner)
    assert deleted.status_code == 204
    assert (await client.get(f"{RENTAL}/advertisements/{ad['id']}")).status_code == 404
    assert (await client.get(f"{RENTAL}/properties/{prop['id']}")).json()["advertisement"] is None


async def test_property_images(client: AsyncClient, people) -> None:
    prop = await _create_property(client, people["owner"])
    owner = basic_auth(people["owner"].email)
    base = f"{RENTAL}/properties/{prop['id']}/images"

    uploaded = await client.post(
        base,
        files=[
            ("files", ("a.png", b"\x89PNG-a", "image/png")),
            ("files", ("b.jpg", b"\xff\xd8-b", "image/jpeg")),
        ],
        headers=owner,
    )
    assert uploaded.status_code == 201
    first, second = uploaded.json()
    assert first["preview"] is True
    assert second["preview"] is False

    raw = await client.get(f"{RENTAL}/images/{first['id']}")
    assert raw.status_code == 200
    assert raw.content == b"\x89PNG-a"
    assert raw.headers["content-type"] == "image/png"

    preview = await client.put(f"{base}/{second['id']}/preview", headers=owner)
    assert preview.status_code == 200
    assert preview.json()["preview"] is True
    images = (await client.get(f"{RENTAL}/properties/{prop['id']}")).json()["images"]
    assert {i["id"]: i["preview"] for i in images} == {first["id"]: False, second["id"]: True}

    removed = await client.delete(base, params={"image_ids": [second["id"]]}, headers=owner)
    assert removed.status_code == 204
    assert (await client.get(f"{RENTAL}/images/{second['id']}")).status_code == 404


async def test_non_image_upload_is_rejected(client: AsyncClient, people) -> None:
    prop = await _create_property(client, people["owner"])
    response = await client.post(
        f"{RENTAL}/properties/{prop['id']}/images",
        files=[("files", ("notes.txt", b"hello", "text/plain"))],
        headers=basic_auth(people["owner"].email),
    )
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_property_documents(client: AsyncClient, people) -> None:
    prop = await _create_property(client, people["owner"])
    owner = basic_auth(people["owner"].email)
    uploaded = await client.post(
        f"{RENTAL}/properties/{prop['id']}/documents",
        files=[("files", ("lease agreement.pdf", b"%PDF-1.4", "application/pdf"))],
        headers=owner,
    )
    assert uploaded.status_code == 201
    (doc,) = uploaded.json()

    raw = await client.get(f"{RENTAL}/documents/{doc['id']}")
    assert raw.status_code == 200
    assert raw.content == b"%PDF-1.4"
    assert "lease%20agreement.pdf" in raw.headers["content-disposition"]

    removed = await client.delete(
        f"{RENTAL}/properties/{prop['id']}/documents",
        params={"document_ids": [doc["id"]]},
        headers=owner,
    )
    assert removed.status_code == 204
    assert (await client.get(f"{RENTAL}/documents/{doc['id']}")).status_code == 404


async def test_delete_property(client: AsyncClient, people) -> None:
    prop = await _create_property(client, people["owner"])
    response = await client.delete(
        f"{RENTAL}/properties/{prop['id']}", headers=basic_auth(people["owner"].email)
    )
    assert response.status_code == 204
    assert (await client.get(f"{RENTAL}/properties/{prop['id']}")).status_code == 404


async def test_id_with_key_separator_is_404(client: AsyncClient) -> None:
    for path in ("properties", "categories", "advertisements"):
        response = await client.get(f"{RENTAL}/{path}/abc::def")
        assert response.status_code == 404
        assert response.json()["error"] == "RESOURCE_NOT_FOUND"

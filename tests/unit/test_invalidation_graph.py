"""Tests for the invalidation fan-out (EMBEDDING_GRAPH, keys_for, CacheInvalidator)."""

from types import SimpleNamespace

from estates.domain.enums import EntityType
from estates.infrastructure.cache.invalidation import (
    EMBEDDING_GRAPH,
    CacheInvalidator,
    keys_for,
)
from support import InMemoryCache


def _prop(
    pid: str,
    owner: str = "o1",
    tenant: str | None = None,
    category: str | None = None,
    ad: str | None = None,
) -> SimpleNamespace:
    return SimpleNamespace(
        id=pid,
        owner_id=owner,
        tenant_id=tenant,
        category_id=category,
        advertisement=SimpleNamespace(id=ad) if ad else None,
    )


def test_graph_covers_every_cached_entity_type() -> None:
    assert set(EMBEDDING_GRAPH) == set(EntityType)


def test_identity_fans_out_to_owned_tenanted_properties_and_buildings() -> None:
    identity = SimpleNamespace(
        id="i1",
        owned_properties=[SimpleNamespace(id="p1"), SimpleNamespace(id="p2")],
        tenant_properties=[SimpleNamespace(id="p3")],
        buildings=[SimpleNamespace(id="b1")],
    )
    assert keys_for(EntityType.IDENTITY, identity) == {
        "identityFullResponse::i1",
        "propertyFullResponse::p1",
        "propertyFullResponse::p2",
        "propertyFullResponse::p3",
        "buildingFullResponse::b1",
    }


def test_category_fans_out_to_properties_and_their_relations() -> None:
    category = SimpleNamespace(
        id="c1",
        properties=[
            _prop("p1", owner="o1", tenant="t1", ad="a1"),
            _prop("p2", owner="o2"),
        ],
    )
    assert keys_for(EntityType.CATEGORY, category) == {
        "categoryFullResponse::c1",
        "propertyFullResponse::p1",
        "propertyFullResponse::p2",
        "advertisementFullResponse::a1",
        "identityFullResponse::o1",
        "identityFullResponse::t1",
        "identityFullResponse::o2",
    }


def test_property_fans_out_to_owner_tenant_category_and_advertisement() -> None:
    prop = _prop("p1", owner="o1", tenant="t1", category="c1", ad="a1")
    assert keys_for(EntityType.PROPERTY, prop) == {
        "propertyFullResponse::p1",
        "identityFullResponse::o1",
        "identityFullResponse::t1",
        "categoryFullResponse::c1",
        "advertisementFullResponse::a1",
    }


def test_property_without_optional_relations_skips_them() -> None:
    assert keys_for(EntityType.PROPERTY, _prop("p1", owner="o1")) == {
        "propertyFullResponse::p1",
        "identityFullResponse::o1",
    }


def test_advertisement_fans_out_to_its_property() -> None:
    ad = SimpleNamespace(id="a1", property_id="p1")
    assert keys_for(EntityType.ADVERTISEMENT, ad) == {
        "advertisementFullResponse::a1",
        "propertyFullResponse::p1",
    }


def test_building_fans_out_to_its_identity() -> None:
    building = SimpleNamespace(id="b1", identity_id="i1")
    assert keys_for(EntityType.BUILDING, building) == {
        "buildingFullResponse::b1",
        "identityFullResponse::i1",
    }


def test_collect_before_and_after_reparenting_covers_old_and_new_category() -> None:
    invalidator = CacheInvalidator(InMemoryCache())
    prop = _prop("p1", category="old")
    invalidator.collect(EntityType.PROPERTY, prop)
    prop.category_id = "new"
    invalidator.collect(EntityType.PROPERTY, prop)
    assert {"categoryFullResponse::old", "categoryFullResponse::new"} <= invalidator.pending


async def test_flush_deletes_pending_keys_once() -> None:
    cache = InMemoryCache()
    cache.store["propertyFullResponse::p1"] = "{}"
    invalidator = CacheInvalidator(cache)
    invalidator.collect(EntityType.ADVERTISEMENT, SimpleNamespace(id="a1", property_id="p1"))

    assert await invalidator.flush() == 2
    assert "propertyFullResponse::p1" not in cache.store
    assert sorted(cache.deleted) == [
        "advertisementFullResponse::a1",
        "propertyFullResponse::p1",
    ]
    assert invalidator.pending == frozenset()


async def test_double_invalidation_is_idempotent() -> None:
    cache = InMemoryCache()
    building = SimpleNamespace(id="b1", identity_id="i1")
    first = CacheInvalidator(cache)
    first.collect(EntityType.BUILDING, building)
    await first.flush()
    second = CacheInvalidator(cache)
    second.collect(EntityType.BUILDING, building)
    await second.flush()

    assert cache.store == {}
    assert await first.flush() == 0


async def test_discard_drops_pending_keys() -> None:
    cache = InMemoryCache()
    invalidator = CacheInvalidator(cache)
    invalidator.collect_key(EntityType.CATEGORY, "c1")
    invalidator.discard()
    assert await invalidator.flush() == 0
    assert cache.calls["delete"] == 0


async def test_flush_with_unavailable_cache_skips_deletes() -> None:
    cache = InMemoryCache(available=False)
    invalidator = CacheInvalidator(cache)
    invalidator.collect_key(EntityType.CATEGORY, "c1")
    assert await invalidator.flush() == 0
    assert cache.calls["delete"] == 0
    assert invalidator.pending == frozenset()


async def test_flush_without_cache() -> None:
    invalidator = CacheInvalidator(None)
    invalidator.collect_key(EntityType.IDENTITY, "i1")
    assert await invalidator.flush() == 0

"""Tests for CollectionCache — lazy, list-once listings."""

import pytest

from highlight_sync.core.cache import CollectionCache
from tests.unit.fakes import FakeStore


def test_listing_fetches_once_per_collection(store: FakeStore) -> None:
    store.seed("books", [{"id": "b1"}])
    cache = CollectionCache(store, limit=50)

    first = cache.listing("books")
    second = cache.listing("books")

    assert first is second
    assert store.calls == [("list", "books", 50)]


def test_listing_is_tracked_separately_per_collection(store: FakeStore) -> None:
    cache = CollectionCache(store)

    cache.listing("books")
    cache.listing("highlights")
    cache.listing("books")

    assert [name for _kind, name, _arg in store.calls] == ["books", "highlights"]


def test_listing_is_not_refreshed_after_external_writes(store: FakeStore) -> None:
    cache = CollectionCache(store)
    assert cache.listing("books") == []

    store.seed("books", [{"id": "late"}])

    assert cache.listing("books") == []


def test_record_appends_to_listing(store: FakeStore) -> None:
    store.seed("highlights", [{"id": "h1"}])
    cache = CollectionCache(store)
    cache.listing("highlights")

    cache.record("highlights", {"id": "h2"})

    assert [d["id"] for d in cache.listing("highlights")] == ["h1", "h2"]
    assert len(store.calls) == 1


def test_record_requires_a_prior_listing(store: FakeStore) -> None:
    cache = CollectionCache(store)

    with pytest.raises(KeyError, match="never listed"):
        cache.record("books", {"id": "b1"})


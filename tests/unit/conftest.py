"""Shared test fixtures."""

from collections.abc import Iterator

import pytest
from loguru import logger

from highlight_sync.core.cache import CollectionCache
from highlight_sync.sync import Synchronizer
from tests.unit.fakes import FakeStore


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def cache(store: FakeStore) -> CollectionCache:
    return CollectionCache(store)


@pytest.fixture
def synchronizer(store: FakeStore, cache: CollectionCache) -> Synchronizer:
    return Synchronizer(store, cache)


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)

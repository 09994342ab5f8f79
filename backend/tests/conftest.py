"""Shared fixtures: fresh stores, services and API clients per test."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from idspace.main import create_app
from idspace.services.items import ItemService, ItemStore


@pytest.fixture
def store() -> ItemStore:
    """Store over the full base range."""
    return ItemStore()


@pytest.fixture
def small_store() -> ItemStore:
    """Store with a tiny base range, for tests that walk the whole id space."""
    return ItemStore(base_max=50)


@pytest.fixture
def service(store: ItemStore) -> ItemService:
    return ItemService(store)


@pytest.fixture
def small_service(small_store: ItemStore) -> ItemService:
    return ItemService(small_store)


@pytest.fixture
def api(store: ItemStore) -> Iterator[TestClient]:
    """TestClient for an app bound to the ``store`` fixture."""
    with TestClient(create_app(store)) as client:
        yield client

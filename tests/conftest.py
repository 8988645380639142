import pytest
from fastapi.testclient import TestClient

from app.db.store import DataStore
from app.main import create_app


@pytest.fixture
def store():
    """A freshly seeded store, private to one test."""
    data_store = DataStore().initialize(seed=True)
    yield data_store
    data_store.clear()


@pytest.fixture
def empty_store():
    data_store = DataStore().initialize(seed=False)
    yield data_store
    data_store.clear()


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))

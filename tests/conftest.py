import pytest
from fastapi.testclient import TestClient

from landing_api.app.core.config import Settings
from landing_api.app.core.store import InMemoryStore, init_store
from landing_api.app.main import create_app

TEST_PASSWORD = "test-secret"


@pytest.fixture
def store():
    """A freshly seeded store, independent from the module level app."""
    s = InMemoryStore()
    init_store(s)
    return s


@pytest.fixture
def app_settings():
    return Settings(whitelist_password=TEST_PASSWORD)


@pytest.fixture
def app(store, app_settings):
    return create_app(store=store, app_settings=app_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client

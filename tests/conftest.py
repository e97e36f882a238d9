import pytest
from fastapi.testclient import TestClient

from users_api.app.core.store import UserStore
from users_api.app.main import create_app
from users_api.app.services.user_service import UserService


@pytest.fixture
def store():
    """A fresh, empty store per test."""
    return UserStore()


@pytest.fixture
def service(store):
    return UserService(store)


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    return TestClient(app)

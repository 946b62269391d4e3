"""
pytest configuration and fixtures for the users API test suite.
"""

import pytest
from fastapi.testclient import TestClient

from app.adapters.memory_adapter import InMemoryUserAdapter
from app.config import Settings
from app.domain.errors import PersistenceError
from app.ports.user_port import UserPort
from main import create_app


class UnreachableUserStore(UserPort):
    """Every store round trip fails, as when MongoDB is down."""

    message = "localhost:27017: [Errno 111] Connection refused"

    async def list_users(self):
        raise PersistenceError(self.message)

    async def create_user(self, data):
        raise PersistenceError(self.message)

    async def update_user(self, user_id, data):
        raise PersistenceError(self.message)

    async def delete_user(self, user_id):
        raise PersistenceError(self.message)

    async def ping(self):
        raise PersistenceError(self.message)


@pytest.fixture
def settings():
    return Settings(store_backend="memory", _env_file=None)


@pytest.fixture
def store():
    return InMemoryUserAdapter()


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def unreachable_store():
    return UnreachableUserStore()


@pytest.fixture
def unreachable_client(settings, unreachable_store):
    app = create_app(settings=settings, store=unreachable_store)
    with TestClient(app) as test_client:
        yield test_client

"""Root conftest - shared fixtures: fake collection, repository, test app client.

Invariants:
    - Every test gets a fresh, empty FakeCollection
    - The app under test is built with an injected repository, so no store bootstrap runs
    - Settings ignore any .env file in the working directory
"""

import pytest
from httpx import ASGITransport, AsyncClient

from object_service.config import Settings
from object_service.infrastructure.database import MongoObjectRepository
from object_service.main import create_app
from tests.fake_mongo import FakeCollection


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def repository(collection):
    return MongoObjectRepository(collection)


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def app(settings, repository):
    return create_app(settings, repository=repository)


@pytest.fixture
async def client(app):
    """FastAPI test client over the in-memory repository."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

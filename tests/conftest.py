import httpx
import pytest
import pytest_asyncio
from mongomock_motor import AsyncMongoMockClient

from animal_api.app.core.config import Settings
from animal_api.app.main import create_app
from animal_api.app.services.animal_service import AnimalService

TEST_DATABASE = "animal_tst"


@pytest.fixture
def test_settings():
    return Settings(database_name=TEST_DATABASE)


@pytest_asyncio.fixture
async def mongo_client():
    client = AsyncMongoMockClient()
    yield client
    await client.drop_database(TEST_DATABASE)


@pytest.fixture
def app(test_settings, mongo_client):
    return create_app(test_settings, mongo_client=mongo_client)


@pytest.fixture
def service(app):
    # Bound to the same collection the app reads, for inserting fixtures.
    return AnimalService(app.state.animals)


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client

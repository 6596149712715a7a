"""
MongoDB integration.

This module owns the lifecycle of the process‑wide Motor client:
``create_client`` builds it, ``init_db`` prepares the collection and
``get_animal_service`` is the FastAPI dependency handing a service
bound to that collection to each request.

The client and collection are kept on ``app.state`` rather than in
module globals, which lets tests inject an in‑memory client through
``create_app``.  Connection pooling is left to the driver.
"""

import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from animal_api.app.core.config import Settings
from animal_api.app.services.animal_service import AnimalService


logger = logging.getLogger(__name__)


def create_client(app_settings: Settings) -> AsyncIOMotorClient:
    """Create a Motor client for the configured connection string.

    No network traffic happens here; the driver connects lazily on the
    first operation.
    """
    logger.info("Connecting to MongoDB database %r", app_settings.database_name)
    return AsyncIOMotorClient(
        app_settings.connection_string,
        serverSelectionTimeoutMS=app_settings.server_selection_timeout_ms,
    )


def get_collection(client: AsyncIOMotorClient, app_settings: Settings) -> AsyncIOMotorCollection:
    """Return the shared collection holding every animal."""
    return client[app_settings.database_name][app_settings.collection_name]


async def init_db(collection: AsyncIOMotorCollection) -> None:
    """Ensure the ``kind`` index used by list queries exists.

    Safe to run on every start; creating an existing index is a no-op.
    """
    await collection.create_index("kind")


def get_animal_service(request: Request) -> AnimalService:
    """FastAPI dependency returning a service bound to the app's collection."""
    return AnimalService(request.app.state.animals)

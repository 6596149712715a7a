"""
Main entrypoint for the Animal API.

This module assembles the FastAPI application, sets up logging and
includes the resource routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``, e.g.::

    uvicorn animal_api.app.main:app --reload

Tests call ``create_app`` directly and pass their own settings and an
in‑memory Mongo client.
"""

from typing import Optional

from fastapi import FastAPI
from motor.motor_asyncio import AsyncIOMotorClient

from .api.router import router
from .core.config import Settings, settings
from .core.db import create_client, get_collection, init_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging


def create_app(
    app_settings: Optional[Settings] = None,
    mongo_client: Optional[AsyncIOMotorClient] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use; defaults to the module‑level ``settings``.
    mongo_client : Optional[AsyncIOMotorClient]
        Pre‑built client.  When given, the collection is wired
        immediately and the app neither creates nor closes a client
        itself.  Otherwise a client is created on startup and closed
        on shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that startup can log.
    setup_logging(
        app_settings.log_level,
        logfile=app_settings.log_file or None,
        mongo_level=app_settings.mongo_log_level,
    )

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)
    app.state.settings = app_settings
    app.state.owns_mongo_client = mongo_client is None
    app.state.mongo_client = mongo_client
    if mongo_client is not None:
        app.state.animals = get_collection(mongo_client, app_settings)

    app.include_router(router)
    register_exception_handlers(app)

    @app.on_event("startup")
    async def startup_event() -> None:
        if app.state.mongo_client is None:
            app.state.mongo_client = create_client(app_settings)
            app.state.animals = get_collection(app.state.mongo_client, app_settings)
        await init_db(app.state.animals)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        if app.state.owns_mongo_client and app.state.mongo_client is not None:
            app.state.mongo_client.close()
            app.state.mongo_client = None

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

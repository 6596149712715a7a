"""Entry point for serving the Animal API.

Launches the FastAPI application under Uvicorn.  MongoDB settings are
read from the environment (see ``animal_api.app.core.config``); the
listen address comes from ``API_HOST`` and ``API_PORT``, defaulting
to ``0.0.0.0`` and ``8000``.

Usage:
    python run.py
"""
import asyncio
import os

from uvicorn import Config, Server

from animal_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    api_host = os.getenv("API_HOST", "0.0.0.0")
    api_port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=api_host, port=api_port, reload=False, log_config=None)
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass

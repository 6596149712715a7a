"""
Domain exceptions and their HTTP translation.

Services raise ``AnimalApiError`` subclasses; endpoints turn the
expected ones (``AnimalNotFoundError``) into ``HTTPException``.  The
handlers registered by ``register_exception_handlers`` cover the
remaining cases: malformed request bodies answer 400 instead of
FastAPI's default 422, and driver failures answer a bare 500 so no
connection details reach the client.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError


logger = logging.getLogger(__name__)


class AnimalApiError(Exception):
    """Base class for all domain exceptions."""


class AnimalNotFoundError(AnimalApiError):
    """No stored animal of the requested kind has the given identifier.

    Also raised when the identifier is not a valid ObjectId string, so
    that both cases produce the same 404 response.
    """

    def __init__(self, kind: str, identifier: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind.capitalize()} {identifier!r} not found")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def store_exception_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error("Store failure during %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the application's exception handlers to ``app``."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PyMongoError, store_exception_handler)

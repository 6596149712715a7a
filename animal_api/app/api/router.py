"""
Top‑level API router.

Aggregates the resource routers.  Routes are mounted at the root
(``/cats``, ``/dogs``) because existing clients address them without a
version prefix.
"""

from fastapi import APIRouter

from .endpoints import cats, dogs, health

router = APIRouter()

router.include_router(cats.router, prefix="/cats", tags=["cats"])
router.include_router(dogs.router, prefix="/dogs", tags=["dogs"])
router.include_router(health.router, prefix="/health", tags=["health"])

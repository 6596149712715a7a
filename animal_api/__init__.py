"""
Top‑level package for the Animal API.

The package provides no public exports; all functionality lives in
submodules under ``app``.  Run the service with::

    uvicorn animal_api.app.main:app
"""

__all__ = []

"""
Application package initializer.

The API is split into the usual layers: ``schemas`` describe the
resource shapes, ``services`` talk to the document store and
``api/endpoints`` translate HTTP requests into service calls.
Configuration, logging, database lifecycle and error mapping live in
``core``.
"""

from .main import app  # noqa: F401

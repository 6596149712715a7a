"""
Pydantic schema definitions for API payloads.

Schemas double as the persisted document shape: ``to_document`` and
``from_document`` map between the HTTP representation and what is
stored in the ``animals`` collection.
"""

"""
Service layer for cats and dogs.

``AnimalService`` is the single point of access to the shared
``animals`` collection.  It is constructed around a Motor collection
handle that the application creates at startup and passes in
explicitly; the service keeps no other state, so a new instance per
request is cheap.

Every method takes the variant class (``Cat`` or ``Dog``) it should
read or write.  Queries filter on the variant's ``kind`` tag, so
listing cats never returns a dog.  Driver errors are not caught here;
they propagate to the exception handlers in ``core.errors``.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Type, TypeVar

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError

from animal_api.app.core.errors import AnimalNotFoundError
from animal_api.app.schemas.animal import AnimalBase


logger = logging.getLogger(__name__)

AnimalT = TypeVar("AnimalT", bound=AnimalBase)


class AnimalService:
    """Typed insert and query operations over the animals collection."""

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self.collection = collection

    async def insert_one(self, record: AnimalT) -> AnimalT:
        """Persist ``record`` and fill in its store-assigned ``id``."""
        result = await self.collection.insert_one(record.to_document())
        record.id = str(result.inserted_id)
        logger.info("Created %s %s", record.document_kind(), record.id)
        return record

    async def insert_many(self, records: Sequence[AnimalBase]) -> List[AnimalBase]:
        """Persist a batch of records in one ordered insert.

        Each record's ``id`` is filled in from the corresponding
        inserted identifier.  An empty batch is a no-op.
        """
        if not records:
            return []
        result = await self.collection.insert_many([record.to_document() for record in records])
        for record, inserted_id in zip(records, result.inserted_ids):
            record.id = str(inserted_id)
        logger.info("Inserted %d animals", len(records))
        return list(records)

    async def find_all(self, model: Type[AnimalT]) -> List[AnimalT]:
        """Return every stored animal of the given variant.

        Documents tagged with the variant's kind that still fail to
        decode are skipped and logged.
        """
        animals: List[AnimalT] = []
        async for document in self.collection.find({"kind": model.document_kind()}):
            try:
                animals.append(model.from_document(document))
            except ValidationError as exc:
                logger.warning("Skipping malformed %s document %s: %s", model.document_kind(), document.get("_id"), exc)
        return animals

    async def find_by_id(self, model: Type[AnimalT], animal_id: str) -> AnimalT:
        """Return the animal of the given variant with identifier ``animal_id``.

        Raises ``AnimalNotFoundError`` if ``animal_id`` is not a valid
        ObjectId string, if no document of this kind has it, or if the
        stored document does not decode.
        """
        kind = model.document_kind()
        if not ObjectId.is_valid(animal_id):
            raise AnimalNotFoundError(kind, animal_id)
        document = await self.collection.find_one({"_id": ObjectId(animal_id), "kind": kind})
        if document is None:
            raise AnimalNotFoundError(kind, animal_id)
        try:
            return model.from_document(document)
        except ValidationError as exc:
            logger.warning("Stored %s %s does not decode: %s", kind, animal_id, exc)
            raise AnimalNotFoundError(kind, animal_id) from exc

"""
Pydantic models for cats and dogs.

``AnimalBase`` holds the fields every animal shares (``id`` and
``name``); ``Cat`` and ``Dog`` add their own flags.  All animals live
in one collection, so each variant carries a ``kind`` tag.  The tag is
written to the stored document but excluded from API responses, and a
document only decodes into the variant whose tag it carries.

JSON uses camelCase keys (``pottyTrained``); Python code uses
snake_case.  Both spellings are accepted on input and unknown keys are
ignored.  The ``*Create`` schemas describe request bodies for the
create endpoints and have no ``id``: identifiers are always assigned
by the store.
"""

from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class AnimalSchema(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
    }


class AnimalBase(AnimalSchema):
    """Fields shared by every stored animal."""

    id: Optional[str] = Field(None, description="Store-assigned ObjectId as a hex string", example="5f43a1b2c3d4e5f6a7b8c9d0")
    name: Optional[str] = Field(None, example="Loki")

    @classmethod
    def document_kind(cls) -> str:
        """Return the ``kind`` tag stored with documents of this variant."""
        return cls.model_fields["kind"].default

    def to_document(self) -> dict:
        """Return the document to persist: every field except ``id``, plus ``kind``."""
        document = self.model_dump(exclude={"id"})
        document["kind"] = self.document_kind()
        return document

    @classmethod
    def from_document(cls, document: Mapping[str, Any]):
        """Build a variant from a stored document.

        Raises ``pydantic.ValidationError`` if the document belongs to
        another variant or a flag is not a boolean.
        """
        data = dict(document)
        object_id = data.pop("_id", None)
        if object_id is not None:
            data["id"] = str(object_id)
        return cls.model_validate(data)


class Cat(AnimalBase):
    kind: Literal["cat"] = Field("cat", exclude=True)
    hisses: bool = Field(False, strict=True)


class Dog(AnimalBase):
    kind: Literal["dog"] = Field("dog", exclude=True)
    barks: bool = Field(False, strict=True)
    potty_trained: bool = Field(False, strict=True)


class CatCreate(AnimalSchema):
    """Schema for creating a cat."""

    name: Optional[str] = Field(None, example="Felix")
    hisses: bool = Field(False, strict=True, example=True)


class DogCreate(AnimalSchema):
    """Schema for creating a dog."""

    name: Optional[str] = Field(None, example="Barbkbark")
    barks: bool = Field(False, strict=True, example=True)
    potty_trained: bool = Field(False, strict=True, example=False)

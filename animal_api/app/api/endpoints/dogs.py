"""
Dog endpoints.

Dogs can be listed, fetched by identifier and created.  Records are
read‑only after creation; there are no update or delete routes.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from animal_api.app.core.db import get_animal_service
from animal_api.app.core.errors import AnimalNotFoundError
from animal_api.app.schemas.animal import Dog, DogCreate
from animal_api.app.services.animal_service import AnimalService

router = APIRouter()


@router.get("", response_model=List[Dog])
async def list_dogs(service: AnimalService = Depends(get_animal_service)) -> List[Dog]:
    """Return every stored dog, in no particular order."""
    return await service.find_all(Dog)


@router.get("/{dog_id}", response_model=Dog)
async def get_dog(dog_id: str, service: AnimalService = Depends(get_animal_service)) -> Dog:
    """Retrieve a single dog by ID.

    Returns HTTP 404 if no dog has this ID, including when the ID is
    not a well‑formed ObjectId.
    """
    try:
        return await service.find_by_id(Dog, dog_id)
    except AnimalNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Dog not found") from exc


@router.post("", response_model=Dog, status_code=status.HTTP_201_CREATED)
async def create_dog(
    dog_in: DogCreate,
    response: Response,
    service: AnimalService = Depends(get_animal_service),
) -> Dog:
    """Create a dog and point ``Location`` at its single‑dog route."""
    dog = await service.insert_one(Dog(**dog_in.model_dump()))
    response.headers["Location"] = f"/dogs/{dog.id}"
    return dog

"""
Cat endpoints, mirroring the dog routes.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from animal_api.app.core.db import get_animal_service
from animal_api.app.core.errors import AnimalNotFoundError
from animal_api.app.schemas.animal import Cat, CatCreate
from animal_api.app.services.animal_service import AnimalService

router = APIRouter()


@router.get("", response_model=List[Cat])
async def list_cats(service: AnimalService = Depends(get_animal_service)) -> List[Cat]:
    """Return every stored cat, in no particular order."""
    return await service.find_all(Cat)


@router.get("/{cat_id}", response_model=Cat)
async def get_cat(cat_id: str, service: AnimalService = Depends(get_animal_service)) -> Cat:
    """Retrieve a single cat by ID; 404 if absent or malformed."""
    try:
        return await service.find_by_id(Cat, cat_id)
    except AnimalNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cat not found") from exc


@router.post("", response_model=Cat, status_code=status.HTTP_201_CREATED)
async def create_cat(
    cat_in: CatCreate,
    response: Response,
    service: AnimalService = Depends(get_animal_service),
) -> Cat:
    cat = await service.insert_one(Cat(**cat_in.model_dump()))
    response.headers["Location"] = f"/cats/{cat.id}"
    return cat

"""
Insect API endpoints
"""
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session
from typing import Optional

from insect_shop.database import get_db
from insect_shop.services.insect_service import InsectService
from insect_shop.schemas.insect import (
    InsectCreate,
    InsectUpdate,
    InsectResponse,
    InsectListResponse
)

router = APIRouter(prefix="/insects", tags=["insects"])


def get_insect_service(db: Session = Depends(get_db)) -> InsectService:
    """Dependency to get InsectService instance"""
    return InsectService(db)


@router.post("", response_model=InsectResponse, status_code=status.HTTP_201_CREATED, summary="Create insect")
def create_insect(
    insect_data: InsectCreate,
    service: InsectService = Depends(get_insect_service)
):
    """
    Create a new insect listing
    
    - **species**: Species name (required, unique)
    - **price**: Price (required, must be non-negative)
    - **image_url**: Image URL (optional)
    """
    return service.create_insect(insect_data)


@router.get("", response_model=InsectListResponse, summary="Search insects")
def get_insects(
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0, description="Minimum price"),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0, description="Maximum price"),
    species_like: Optional[str] = Query(None, alias="speciesLike", min_length=1, description="Case-insensitive species substring"),
    service: InsectService = Depends(get_insect_service)
):
    """
    Retrieve insects ordered by species
    
    - **minPrice**: Only insects priced at least this much
    - **maxPrice**: Only insects priced at most this much
    - **speciesLike**: Case-insensitive partial match on species
    """
    return service.search_insects(
        min_price=min_price,
        max_price=max_price,
        species_like=species_like
    )


@router.get("/{insect_id}", response_model=InsectResponse, summary="Get insect by ID")
def get_insect(
    insect_id: int,
    service: InsectService = Depends(get_insect_service)
):
    """
    Retrieve a specific insect by ID
    
    - **insect_id**: Insect ID
    """
    return service.get_insect(insect_id)


@router.patch("/{insect_id}", response_model=InsectResponse, summary="Update insect")
def update_insect(
    insect_id: int,
    insect_data: InsectUpdate,
    service: InsectService = Depends(get_insect_service)
):
    """
    Update price and/or image of an insect
    
    Species cannot be changed.
    
    - **insect_id**: Insect ID
    """
    return service.update_insect(insect_id, insect_data)


@router.delete("/{insect_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete insect")
def delete_insect(
    insect_id: int,
    service: InsectService = Depends(get_insect_service)
):
    """
    Delete an insect
    
    - **insect_id**: Insect ID
    """
    service.delete_insect(insect_id)
    return None

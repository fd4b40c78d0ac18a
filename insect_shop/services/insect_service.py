"""
Insect Service - Business Logic Layer
"""
from typing import Optional
from sqlalchemy.orm import Session

from insect_shop.repositories.insect_repository import InsectRepository
from insect_shop.schemas.insect import (
    InsectCreate,
    InsectUpdate,
    InsectResponse,
    InsectListResponse
)


class InsectService:
    """Service layer for insect listings"""
    
    def __init__(self, db: Session):
        self.repository = InsectRepository(db)
    
    def search_insects(
        self,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        species_like: Optional[str] = None
    ) -> InsectListResponse:
        """Search insects by price range and species substring"""
        insects = self.repository.find_all(
            min_price=min_price,
            max_price=max_price,
            species_like=species_like
        )
        return InsectListResponse(
            insects=[InsectResponse.model_validate(i) for i in insects],
            total=len(insects)
        )
    
    def get_insect(self, insect_id: int) -> InsectResponse:
        """Get insect by ID"""
        return InsectResponse.model_validate(self.repository.get(insect_id))
    
    def create_insect(self, insect_data: InsectCreate) -> InsectResponse:
        """Create new insect listing"""
        insect = self.repository.create(insect_data.model_dump())
        return InsectResponse.model_validate(insect)
    
    def update_insect(self, insect_id: int, insect_data: InsectUpdate) -> InsectResponse:
        """Update price and/or image of an insect"""
        insect = self.repository.update(
            insect_id,
            insect_data.model_dump(exclude_unset=True, exclude_none=True)
        )
        return InsectResponse.model_validate(insect)
    
    def delete_insect(self, insect_id: int) -> None:
        """Delete insect"""
        self.repository.remove(insect_id)

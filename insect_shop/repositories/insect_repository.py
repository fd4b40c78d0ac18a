"""
Insect Repository - Data Access Layer
"""
import logging
from typing import List, Optional
from sqlalchemy import text
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from insect_shop.exceptions import DuplicateEntity, InvalidArgument, NotFound
from insect_shop.helpers.sql import escape_like, sql_for_partial_update
from insect_shop.models.insect import Insect

logger = logging.getLogger(__name__)


class InsectRepository:
    """Repository for Insect CRUD operations"""
    
    # Updatable field -> column; species is immutable
    COLUMN_NAMES = {
        "price": "price",
        "image_url": "image_url",
    }
    
    def __init__(self, db: Session):
        self.db = db
    
    def create(self, insect_data: dict) -> Insect:
        """
        Create new insect listing
        
        Args:
            insect_data: Dictionary with species, price, image_url
        
        Raises:
            DuplicateEntity: If an insect with the same species exists
        """
        insect = Insect(**insect_data)
        self.db.add(insect)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            species = insect_data.get("species")
            if self._species_exists(species):
                raise DuplicateEntity(f"Duplicate insect: {species}") from e
            raise InvalidArgument(f"Invalid insect data: {e.orig}") from e
        
        self.db.refresh(insect)
        logger.info("Created insect %s (%s)", insect.id, insect.species)
        return insect
    
    def find_all(
        self,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        species_like: Optional[str] = None
    ) -> List[Insect]:
        """
        Find insects matching all provided filters, ordered by species
        
        Raises:
            InvalidArgument: If min_price is greater than max_price
        """
        if min_price is not None and max_price is not None and min_price > max_price:
            raise InvalidArgument("Min price cannot be greater than max")
        
        query = self.db.query(Insect)
        if min_price is not None:
            query = query.filter(Insect.price >= min_price)
        if max_price is not None:
            query = query.filter(Insect.price <= max_price)
        if species_like:
            query = query.filter(Insect.species.ilike(f"%{escape_like(species_like)}%", escape="\\"))
        
        return query.order_by(Insect.species).all()
    
    def get_by_id(self, insect_id: int) -> Optional[Insect]:
        """Get insect by ID"""
        return self.db.query(Insect).filter(Insect.id == insect_id).first()
    
    def get(self, insect_id: int) -> Insect:
        """Get insect by ID or raise NotFound"""
        insect = self.get_by_id(insect_id)
        if not insect:
            raise NotFound(f"No insect: {insect_id}")
        return insect
    
    def update(self, insect_id: int, data: dict) -> Insect:
        """
        Partially update an insect
        
        Only price and image_url can change; other keys are ignored.
        
        Raises:
            InvalidArgument: If data holds no updatable field
            NotFound: If insect not found
        """
        update = sql_for_partial_update(data, self.COLUMN_NAMES)
        statement = text(
            f"UPDATE insects SET {update.set_clause} WHERE id = {update.next_placeholder}"
        )
        
        try:
            result = self.db.execute(statement, update.params(insect_id))
        except IntegrityError as e:
            self.db.rollback()
            raise InvalidArgument(f"Invalid insect data: {e.orig}") from e
        
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFound(f"No insect: {insect_id}")
        
        self.db.commit()
        return self.get(insect_id)
    
    def remove(self, insect_id: int) -> None:
        """
        Delete insect
        
        Raises:
            NotFound: If insect not found
        """
        insect = self.get(insect_id)
        self.db.delete(insect)
        self.db.commit()
        logger.info("Deleted insect %s", insect_id)
    
    def count(self) -> int:
        """Get total count of insects"""
        return self.db.query(Insect).count()
    
    def _species_exists(self, species: str) -> bool:
        return self.db.query(Insect.id).filter(Insect.species == species).first() is not None

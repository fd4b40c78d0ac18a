"""
SQLAlchemy Insect model
"""
from sqlalchemy import Column, Integer, String, Numeric, Text, CheckConstraint
from insect_shop.database import Base


class Insect(Base):
    """Insect listing database model"""
    
    __tablename__ = "insects"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    species = Column(String(255), nullable=False, unique=True, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    image_url = Column(Text, nullable=False, default="")
    
    # Constraints
    __table_args__ = (
        CheckConstraint('price >= 0', name='check_price_non_negative'),
    )
    
    def __repr__(self):
        return f"<Insect(id={self.id}, species='{self.species}', price={self.price})>"

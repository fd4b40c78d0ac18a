"""
SQLAlchemy User model
"""
from sqlalchemy import Column, Integer, String, Boolean, Text, JSON, CheckConstraint
from sqlalchemy.dialects.postgresql import JSONB
from insect_shop.database import Base


class User(Base):
    """User database model"""
    
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username = Column(String(25), nullable=False, unique=True, index=True)
    password_hash = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False)
    orders = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)  # Order ids
    
    # Constraints
    __table_args__ = (
        CheckConstraint("email LIKE '_%@%'", name='check_email_has_at'),
    )
    
    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', is_admin={self.is_admin})>"

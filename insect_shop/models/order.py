"""
SQLAlchemy Order model
"""
from sqlalchemy import Column, Integer, String, Numeric, DateTime, Text, JSON, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func
from insect_shop.database import Base


class Order(Base):
    """Order database model"""
    
    __tablename__ = "orders"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    phone = Column(String(20), nullable=False)
    delivery_address = Column(Text, nullable=False)
    submit_time = Column(DateTime, server_default=func.now(), nullable=False)
    total = Column(Numeric(10, 2), nullable=True)
    items = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)  # Insect ids
    user_order_id = Column(Integer, nullable=True, index=True)  # Logical reference to users.id
    
    # Constraints
    __table_args__ = (
        UniqueConstraint('user_order_id', 'submit_time', name='uq_order_user_submit_time'),
    )
    
    def __repr__(self):
        return f"<Order(id={self.id}, user_order_id={self.user_order_id}, submit_time={self.submit_time})>"

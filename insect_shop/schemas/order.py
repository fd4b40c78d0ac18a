"""
Pydantic schemas for order request/response validation
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime

from insect_shop.schemas.insect import InsectResponse


class OrderBase(BaseModel):
    """Base Order schema"""
    phone: str = Field(..., min_length=1, max_length=20, description="Contact phone")
    delivery_address: str = Field(..., min_length=1, description="Delivery address")
    user_order_id: Optional[int] = Field(None, gt=0, description="Ordering user ID")


class OrderCreate(OrderBase):
    """Schema for creating a new order"""
    items: list[int] = Field(..., min_length=1, description="Insect IDs")
    submit_time: Optional[datetime] = Field(None, description="Defaults to creation time")
    total: Optional[float] = Field(None, ge=0)


class OrderResponse(OrderBase):
    """Schema for order response"""
    id: int
    items: list[int]
    submit_time: datetime
    total: Optional[float]
    
    model_config = ConfigDict(from_attributes=True)


class OrderDetailResponse(OrderResponse):
    """Order with the insect rows behind its items"""
    items: list[InsectResponse]


class OrderListResponse(BaseModel):
    """Schema for list of orders response"""
    orders: list[OrderResponse]
    total: int


class OrderTotalResponse(BaseModel):
    """Schema for a computed order total"""
    order_id: int
    total: int

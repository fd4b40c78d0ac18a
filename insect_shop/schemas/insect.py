"""
Pydantic schemas for insect request/response validation
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class InsectBase(BaseModel):
    """Base Insect schema with common fields"""
    species: str = Field(..., min_length=1, max_length=255, description="Species name")
    price: float = Field(..., ge=0, description="Price (must be non-negative)")
    image_url: str = Field("", description="Image URL")


class InsectCreate(InsectBase):
    """Schema for creating a new insect listing"""
    pass


class InsectUpdate(BaseModel):
    """Schema for updating an insect (species is immutable)"""
    price: Optional[float] = Field(None, ge=0)
    image_url: Optional[str] = None
    
    model_config = ConfigDict(extra="forbid")


class InsectResponse(InsectBase):
    """Schema for insect response"""
    id: int
    
    model_config = ConfigDict(from_attributes=True)


class InsectListResponse(BaseModel):
    """Schema for list of insects response"""
    insects: list[InsectResponse]
    total: int

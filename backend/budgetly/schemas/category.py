"""
Category Pydantic schemas for API validation.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional
from budgetly.models.category import TransactionType


class CategoryBase(BaseModel):
    """Base category schema."""
    name: str = Field(..., min_length=1, max_length=50)
    icon: str = Field("circle", max_length=50)
    color: str = Field("#64748b", pattern=r"^#[0-9A-Fa-f]{6}$")
    type: TransactionType


class CategoryCreate(CategoryBase):
    """Schema for creating a category."""
    pass


class CategoryUpdate(BaseModel):
    """Schema for updating a category."""
    name: Optional[str] = Field(None, min_length=1, max_length=50)
    icon: Optional[str] = Field(None, max_length=50)
    color: Optional[str] = Field(None, pattern=r"^#[0-9A-Fa-f]{6}$")
    type: Optional[TransactionType] = None


class CategoryResponse(CategoryBase):
    """Schema for category response."""
    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CategoryList(BaseModel):
    """Schema for listing categories."""
    items: list[CategoryResponse]
    total: int

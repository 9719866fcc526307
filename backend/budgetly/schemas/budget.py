"""
Budget Pydantic schemas for API validation.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from decimal import Decimal
from typing import Optional
from budgetly.models.budget import BudgetPeriod
from budgetly.schemas.category import CategoryResponse


class BudgetBase(BaseModel):
    """Base budget schema."""
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    period: BudgetPeriod = BudgetPeriod.monthly
    is_active: bool = True


class BudgetCreate(BudgetBase):
    """Schema for creating a budget."""
    category_id: str = Field(..., min_length=1, max_length=36)


class BudgetUpdate(BaseModel):
    """Only amount, period and the active flag can change after creation."""
    amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    period: Optional[BudgetPeriod] = None
    is_active: Optional[bool] = None


class BudgetResponse(BudgetBase):
    """Schema for budget response."""
    id: str
    user_id: str
    category_id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BudgetWithCategory(BudgetResponse):
    category: CategoryResponse


class BudgetList(BaseModel):
    items: list[BudgetWithCategory]
    total: int


class CategoryWithBudget(CategoryResponse):
    """A category together with its budget row, if it has one."""
    budget: Optional[BudgetResponse] = None

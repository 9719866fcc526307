"""
Transaction schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional
import datetime as dt
from decimal import Decimal
from budgetly.models.category import TransactionType
from budgetly.schemas.category import CategoryResponse


class TransactionBase(BaseModel):
    category_id: Optional[str] = None
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    type: TransactionType
    description: str = Field(..., min_length=1, max_length=100)
    date: dt.date
    notes: Optional[str] = Field(None, max_length=500)


class TransactionCreate(TransactionBase):
    pass


class TransactionUpdate(BaseModel):
    category_id: Optional[str] = None
    amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    type: Optional[TransactionType] = None
    description: Optional[str] = Field(None, min_length=1, max_length=100)
    date: Optional[dt.date] = None
    notes: Optional[str] = Field(None, max_length=500)


class TransactionResponse(BaseModel):
    id: str
    user_id: str
    category_id: Optional[str]
    amount: Decimal
    type: TransactionType
    description: str
    date: dt.date
    notes: Optional[str]
    category: Optional[CategoryResponse] = None
    created_at: dt.datetime
    updated_at: dt.datetime

    class Config:
        from_attributes = True


class TransactionListResponse(BaseModel):
    items: list[TransactionResponse]
    total: int

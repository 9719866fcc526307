"""
Profile schemas.
"""

from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = Field(None, min_length=2, max_length=100)
    currency: str = Field(..., pattern=r"^[A-Za-z]{3}$")

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.upper()


class ProfileResponse(BaseModel):
    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    currency: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

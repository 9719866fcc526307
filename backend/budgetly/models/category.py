"""
Category database model.
"""

import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Enum, Index
from sqlalchemy.orm import relationship
from budgetly.database import Base


class TransactionType(str, enum.Enum):
    """Direction of money, shared by categories and transactions."""
    income = "income"
    expense = "expense"


class Category(Base):
    """User-owned label attached to transactions."""

    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False)
    name = Column(String(50), nullable=False)
    icon = Column(String(50), nullable=False, default="circle")
    color = Column(String(7), nullable=False, default="#64748b")  # Hex color
    type = Column(Enum(TransactionType), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="category")
    budgets = relationship("Budget", back_populates="category", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_category_user_type", "user_id", "type"),
    )

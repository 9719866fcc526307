"""
Budget database model.
"""

import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, Numeric, Enum, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from budgetly.database import Base


class BudgetPeriod(str, enum.Enum):
    """Recurrence unit a budget is measured over."""
    weekly = "weekly"
    monthly = "monthly"
    yearly = "yearly"


class Budget(Base):
    """Spending ceiling for one expense category."""

    __tablename__ = "budgets"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)
    category_id = Column(String(36), ForeignKey("categories.id", ondelete="CASCADE"), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    period = Column(Enum(BudgetPeriod), nullable=False, default=BudgetPeriod.monthly)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    category = relationship("Category", back_populates="budgets")

    # One budget per category per user
    __table_args__ = (
        UniqueConstraint("user_id", "category_id", name="uq_budget_user_category"),
    )

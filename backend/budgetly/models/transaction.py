"""
Transaction database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Date, Numeric, Text, Enum, ForeignKey, Index
from sqlalchemy.orm import relationship
from budgetly.database import Base
from budgetly.models.category import TransactionType


class Transaction(Base):
    """Transaction model. Amounts are always positive, `type` gives the direction."""

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False)
    category_id = Column(String(36), ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)
    amount = Column(Numeric(12, 2), nullable=False)
    type = Column(Enum(TransactionType), nullable=False)
    description = Column(String(100), nullable=False)
    date = Column(Date, nullable=False, index=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    category = relationship("Category", back_populates="transactions")

    # Indexes for common queries
    __table_args__ = (
        Index("idx_transaction_user_date", "user_id", "date"),
        Index("idx_transaction_category", "category_id"),
    )

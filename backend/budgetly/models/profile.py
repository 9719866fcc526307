"""
Profile database model.
"""

from datetime import datetime
from sqlalchemy import Column, String, DateTime
from budgetly.database import Base
from budgetly.config import settings


class Profile(Base):
    """Display preferences for a user. The id is the identity provider's user id."""

    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True)
    email = Column(String(255), nullable=True)
    full_name = Column(String(100), nullable=True)
    currency = Column(String(3), nullable=False, default=lambda: settings.default_currency)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

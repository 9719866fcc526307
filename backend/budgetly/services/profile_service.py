"""Service for user profiles (display name and currency)."""

import logging
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from budgetly.models.profile import Profile
from budgetly.schemas.profile import ProfileUpdate
from budgetly.services.results import ErrorKind, WriteResult

logger = logging.getLogger(__name__)


def get_profile(db: Session, user_id: Optional[str]) -> Optional[Profile]:
    if user_id is None:
        return None
    return db.query(Profile).filter(Profile.id == user_id).first()


def update_profile(db: Session, user_id: Optional[str], data: ProfileUpdate) -> WriteResult:
    """Set name and currency, creating the profile row on first use."""
    if user_id is None:
        return WriteResult.unauthenticated()

    profile = get_profile(db, user_id)
    if profile is None:
        profile = Profile(id=user_id)
        db.add(profile)

    if data.full_name is not None:
        profile.full_name = data.full_name
    profile.currency = data.currency

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to update profile {user_id}: {e}")
        return WriteResult.failure(ErrorKind.store_failure, str(e))

    db.refresh(profile)
    return WriteResult.success(profile)

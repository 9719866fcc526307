"""
Profile API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional

from budgetly.api.errors import unwrap
from budgetly.dependencies import get_db, get_current_user_id
from budgetly.schemas.profile import ProfileResponse, ProfileUpdate
from budgetly.services import profile_service

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=Optional[ProfileResponse])
def get_profile(
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    return profile_service.get_profile(db, user_id)


@router.patch("", response_model=ProfileResponse)
def update_profile(
    update: ProfileUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """Update display name and currency."""
    return unwrap(profile_service.update_profile(db, user_id, update))

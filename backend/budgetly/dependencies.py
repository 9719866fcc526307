"""
FastAPI dependencies.
"""

from typing import Generator, Optional
from fastapi import Header
from sqlalchemy.orm import Session
from budgetly.database import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user_id(
    x_user_id: Optional[str] = Header(None, alias="X-User-Id")
) -> Optional[str]:
    """
    Identity of the caller as forwarded by the identity provider.
    None means the request is unauthenticated.
    """
    if x_user_id is None or not x_user_id.strip():
        return None
    return x_user_id.strip()

"""
Category API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional

from budgetly.api.errors import unwrap
from budgetly.dependencies import get_db, get_current_user_id
from budgetly.models.category import TransactionType
from budgetly.schemas.budget import CategoryWithBudget
from budgetly.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryList,
)
from budgetly.services import category_service

router = APIRouter()


@router.get("", response_model=CategoryList)
def list_categories(
    type: Optional[TransactionType] = None,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """List the caller's categories, optionally only income or expense."""
    categories = category_service.list_categories(db, user_id, type=type)
    return CategoryList(
        items=[CategoryResponse.model_validate(c) for c in categories],
        total=len(categories)
    )


@router.get("/with-budgets", response_model=List[CategoryWithBudget])
def list_categories_with_budgets(
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """List categories together with their budget, if any."""
    return category_service.get_categories_with_budgets(db, user_id)


@router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
    category: CategoryCreate,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """Create a new category."""
    return unwrap(category_service.create_category(db, user_id, category))


@router.post("/defaults", response_model=CategoryList, status_code=201)
def create_default_categories(
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """Create the starter categories for a user who has none."""
    categories = unwrap(category_service.create_default_categories(db, user_id))
    return CategoryList(
        items=[CategoryResponse.model_validate(c) for c in categories],
        total=len(categories)
    )


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: str,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """Get a specific category."""
    category = category_service.get_category(db, user_id, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.patch("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: str,
    category_update: CategoryUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """Update a category."""
    return unwrap(category_service.update_category(db, user_id, category_id, category_update))


@router.delete("/{category_id}", status_code=204)
def delete_category(
    category_id: str,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """Delete a category. Its transactions become uncategorized."""
    unwrap(category_service.delete_category(db, user_id, category_id))
    return None

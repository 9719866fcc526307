"""
Budget API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from budgetly.api.errors import unwrap
from budgetly.dependencies import get_db, get_current_user_id
from budgetly.schemas.budget import (
    BudgetCreate,
    BudgetUpdate,
    BudgetResponse,
    BudgetWithCategory,
    BudgetList,
)
from budgetly.schemas.category import CategoryResponse
from budgetly.schemas.dashboard import BudgetSnapshotList
from budgetly.services import aggregation_service, budget_service

router = APIRouter(prefix="/budgets", tags=["budgets"])


@router.get("", response_model=BudgetList)
def list_budgets(
    active_only: bool = False,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """List budgets with their categories."""
    budgets = budget_service.list_budgets(db, user_id, active_only=active_only)
    return BudgetList(
        items=[BudgetWithCategory.model_validate(b) for b in budgets],
        total=len(budgets)
    )


@router.get("/with-spending", response_model=BudgetSnapshotList)
def list_budgets_with_spending(
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """Active budgets with what has been spent in each one's current window."""
    snapshots = aggregation_service.get_budgets_with_spending(db, user_id)
    return BudgetSnapshotList(items=snapshots, total=len(snapshots))


@router.get("/unbudgeted-categories", response_model=List[CategoryResponse])
def list_unbudgeted_categories(
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """Expense categories that have no budget yet."""
    return budget_service.get_unbudgeted_categories(db, user_id)


@router.post("", response_model=BudgetResponse, status_code=201)
def create_budget(
    budget: BudgetCreate,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """Create a budget. Only one budget is allowed per category."""
    return unwrap(budget_service.create_budget(db, user_id, budget))


@router.patch("/{budget_id}", response_model=BudgetResponse)
def update_budget(
    budget_id: str,
    budget_update: BudgetUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """Update amount, period or active flag."""
    return unwrap(budget_service.update_budget(db, user_id, budget_id, budget_update))


@router.delete("/{budget_id}", status_code=204)
def delete_budget(
    budget_id: str,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    unwrap(budget_service.delete_budget(db, user_id, budget_id))
    return None

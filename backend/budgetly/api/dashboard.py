"""
Dashboard API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from datetime import date
from typing import Optional

from budgetly.config import settings
from budgetly.dependencies import get_db, get_current_user_id
from budgetly.schemas.dashboard import (
    CategorySpending,
    DateRange,
    MonthlySpendingPoint,
    PeriodSummary,
)
from budgetly.services import aggregation_service
from budgetly.services.periods import month_range, resolve_period

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def resolve_window(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    month: Optional[str] = Query(None, description="YYYY-MM format"),
) -> DateRange:
    """
    Window for summary endpoints: explicit start/end, else a YYYY-MM month,
    else the current month.
    """
    if start_date or end_date:
        if not (start_date and end_date):
            raise HTTPException(status_code=422, detail="start_date and end_date must be given together")
        if start_date > end_date:
            raise HTTPException(status_code=422, detail="start_date must not be after end_date")
        return DateRange(start=start_date, end=end_date)

    if month:
        try:
            year, m = map(int, month.split('-'))
            return month_range(year, m)
        except ValueError:
            raise HTTPException(status_code=422, detail="month must be in YYYY-MM format")

    return resolve_period("monthly")


@router.get("/summary", response_model=PeriodSummary)
def get_dashboard_summary(
    window: DateRange = Depends(resolve_window),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """
    Income, expense and balance for a window.
    Returns: income, expense, balance
    """
    return aggregation_service.get_period_summary(db, user_id, window)


@router.get("/spending-by-category", response_model=list[CategorySpending])
def get_spending_by_category(
    window: DateRange = Depends(resolve_window),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """Expense totals per category, largest first."""
    return aggregation_service.get_spending_by_category(db, user_id, window)


@router.get("/history", response_model=list[MonthlySpendingPoint])
def get_monthly_history(
    months: int = Query(settings.history_months_default, ge=1, le=settings.history_months_max),
    category_id: Optional[str] = None,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """
    Expense totals for the last N months, oldest first.
    Returns: [{month, total}, ...]
    """
    return aggregation_service.get_monthly_history(db, user_id, months=months, category_id=category_id)


@router.get("/period/{period}", response_model=DateRange)
def get_period_window(
    period: str,
    reference: Optional[date] = Query(None, alias="date"),
):
    """Concrete window for weekly, monthly or yearly. Unknown periods mean monthly."""
    return resolve_period(period, reference)

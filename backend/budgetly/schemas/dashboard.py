"""
Dashboard schemas.
"""

import enum
from pydantic import BaseModel, ConfigDict
from datetime import date
from typing import List, Tuple
from budgetly.models.budget import BudgetPeriod
from budgetly.schemas.category import CategoryResponse


class DateRange(BaseModel):
    """Inclusive calendar-day window."""
    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    def as_iso(self) -> Tuple[str, str]:
        return self.start.isoformat(), self.end.isoformat()


class PeriodSummary(BaseModel):
    income: float
    expense: float
    balance: float


class CategorySpending(BaseModel):
    category_id: str
    name: str
    color: str
    total: float


class MonthlySpendingPoint(BaseModel):
    month: str
    total: float


class BudgetStatus(str, enum.Enum):
    ok = "ok"
    near_limit = "near_limit"
    over_budget = "over_budget"


class BudgetStatusInfo(BaseModel):
    """Progress of a budget: capped percentage plus either remaining or overage."""
    model_config = ConfigDict(frozen=True)

    percentage: int
    status: BudgetStatus
    remaining: float
    overage: float

    @property
    def over_budget(self) -> bool:
        return self.status == BudgetStatus.over_budget

    @property
    def near_limit(self) -> bool:
        return self.status == BudgetStatus.near_limit


class BudgetSnapshot(BaseModel):
    """
    Read-only view of a budget evaluated against its current window.
    Computed on every read, never persisted.
    """
    model_config = ConfigDict(frozen=True)

    budget_id: str
    category: CategoryResponse
    amount: float
    period: BudgetPeriod
    is_active: bool
    start: date
    end: date
    spent: float
    percentage: int
    status: BudgetStatus
    remaining: float
    overage: float


class BudgetSnapshotList(BaseModel):
    items: List[BudgetSnapshot]
    total: int

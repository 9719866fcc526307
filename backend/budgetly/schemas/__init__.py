"""
Pydantic schemas package.
"""

from budgetly.schemas.category import (
    CategoryBase,
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryList,
)
from budgetly.schemas.budget import (
    BudgetBase,
    BudgetCreate,
    BudgetUpdate,
    BudgetResponse,
    BudgetWithCategory,
    BudgetList,
    CategoryWithBudget,
)
from budgetly.schemas.transaction import (
    TransactionBase,
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    TransactionListResponse,
)
from budgetly.schemas.dashboard import (
    DateRange,
    PeriodSummary,
    CategorySpending,
    MonthlySpendingPoint,
    BudgetStatus,
    BudgetStatusInfo,
    BudgetSnapshot,
    BudgetSnapshotList,
)
from budgetly.schemas.profile import ProfileUpdate, ProfileResponse

__all__ = [
    "CategoryBase",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "CategoryList",
    "BudgetBase",
    "BudgetCreate",
    "BudgetUpdate",
    "BudgetResponse",
    "BudgetWithCategory",
    "BudgetList",
    "CategoryWithBudget",
    "TransactionBase",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionResponse",
    "TransactionListResponse",
    "DateRange",
    "PeriodSummary",
    "CategorySpending",
    "MonthlySpendingPoint",
    "BudgetStatus",
    "BudgetStatusInfo",
    "BudgetSnapshot",
    "BudgetSnapshotList",
    "ProfileUpdate",
    "ProfileResponse",
]

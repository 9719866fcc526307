"""
Spending aggregation: period totals, category breakdowns, monthly
history and budget progress.

Every function takes the caller's user id explicitly. With no user the
reads return empty results instead of raising; store errors propagate.
Money is folded as Decimal and only turned into floats for the response
models.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from budgetly.config import settings
from budgetly.models.category import Category, TransactionType
from budgetly.models.transaction import Transaction
from budgetly.schemas.category import CategoryResponse
from budgetly.schemas.dashboard import (
    BudgetSnapshot,
    BudgetStatus,
    BudgetStatusInfo,
    CategorySpending,
    DateRange,
    MonthlySpendingPoint,
    PeriodSummary,
)
from budgetly.services.budget_service import list_budgets
from budgetly.services.periods import month_label, month_range, resolve_period, shift_month

ZERO = Decimal("0")
UNCATEGORIZED_KEY = "uncategorized"
UNCATEGORIZED_NAME = "Uncategorized"

Number = Union[Decimal, int, float]


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def calculate_percentage(value: Number, total: Number) -> int:
    """Share of `total` used by `value`, rounded half up and capped at 100."""
    value, total = _to_decimal(value), _to_decimal(total)
    if total == 0:
        return 0
    pct = (value / total * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return min(int(pct), 100)


def classify_budget(
    spent: Number,
    amount: Number,
    near_limit_percent: Optional[int] = None
) -> BudgetStatusInfo:
    """
    Over budget when spent strictly exceeds the amount. Near limit when the
    capped percentage reaches the threshold without being over.
    """
    if near_limit_percent is None:
        near_limit_percent = settings.near_limit_percent

    spent, amount = _to_decimal(spent), _to_decimal(amount)
    percentage = calculate_percentage(spent, amount)

    if spent > amount:
        return BudgetStatusInfo(
            percentage=percentage,
            status=BudgetStatus.over_budget,
            remaining=0.0,
            overage=float(spent - amount),
        )

    status = BudgetStatus.near_limit if percentage >= near_limit_percent else BudgetStatus.ok
    return BudgetStatusInfo(
        percentage=percentage,
        status=status,
        remaining=float(amount - spent),
        overage=0.0,
    )


def _sum_expenses(
    db: Session,
    user_id: str,
    window: DateRange,
    category_id: Optional[str] = None
) -> Decimal:
    query = db.query(Transaction.amount).filter(
        Transaction.user_id == user_id,
        Transaction.type == TransactionType.expense,
        Transaction.date >= window.start,
        Transaction.date <= window.end
    )
    if category_id:
        query = query.filter(Transaction.category_id == category_id)

    return sum((_to_decimal(row.amount) for row in query.all()), ZERO)


def get_period_summary(db: Session, user_id: Optional[str], date_range: DateRange) -> PeriodSummary:
    """Income, expense and their difference for an inclusive window."""
    if user_id is None:
        return PeriodSummary(income=0.0, expense=0.0, balance=0.0)

    rows = db.query(Transaction.amount, Transaction.type).filter(
        Transaction.user_id == user_id,
        Transaction.date >= date_range.start,
        Transaction.date <= date_range.end
    ).all()

    income = ZERO
    expense = ZERO
    for row in rows:
        if row.type == TransactionType.income:
            income += _to_decimal(row.amount)
        else:
            expense += _to_decimal(row.amount)

    return PeriodSummary(
        income=float(income),
        expense=float(expense),
        balance=float(income - expense),
    )


def get_monthly_summary(
    db: Session,
    user_id: Optional[str],
    reference: Optional[date] = None
) -> PeriodSummary:
    return get_period_summary(db, user_id, resolve_period("monthly", reference))


def get_spending_by_category(
    db: Session,
    user_id: Optional[str],
    date_range: Optional[DateRange] = None,
    today: Optional[date] = None
) -> List[CategorySpending]:
    """
    Expense totals per category for the window (default: current month),
    largest first. Transactions without a live category are pooled under
    "Uncategorized". Equal totals keep the order they were first seen in.
    """
    if user_id is None:
        return []

    window = date_range or resolve_period("monthly", today)

    rows = db.query(
        Transaction.amount,
        Category.id.label("category_id"),
        Category.name.label("category_name"),
        Category.color.label("category_color"),
    ).outerjoin(
        Category, Transaction.category_id == Category.id
    ).filter(
        Transaction.user_id == user_id,
        Transaction.type == TransactionType.expense,
        Transaction.date >= window.start,
        Transaction.date <= window.end
    ).order_by(
        Transaction.date,
        Transaction.created_at,
        Transaction.id
    ).all()

    groups = {}
    for row in rows:
        key = row.category_id or UNCATEGORIZED_KEY
        group = groups.get(key)
        if group is None:
            group = groups[key] = {
                "name": row.category_name or UNCATEGORIZED_NAME,
                "color": row.category_color or settings.uncategorized_color,
                "total": ZERO,
            }
        group["total"] += _to_decimal(row.amount)

    ordered = sorted(groups.items(), key=lambda item: item[1]["total"], reverse=True)

    return [
        CategorySpending(
            category_id=key,
            name=group["name"],
            color=group["color"],
            total=float(group["total"]),
        )
        for key, group in ordered
    ]


def get_monthly_history(
    db: Session,
    user_id: Optional[str],
    months: int = 6,
    category_id: Optional[str] = None,
    today: Optional[date] = None
) -> List[MonthlySpendingPoint]:
    """
    Expense totals for the last `months` calendar months, oldest first,
    ending with the current month. Empty months are reported as 0.
    """
    if user_id is None or months < 1:
        return []

    today = today or date.today()
    history = []

    for i in range(months - 1, -1, -1):
        year, month = shift_month(today.year, today.month, -i)
        window = month_range(year, month)
        total = _sum_expenses(db, user_id, window, category_id)

        history.append(MonthlySpendingPoint(
            month=month_label(year, month),
            total=float(total),
        ))

    return history


def get_budgets_with_spending(
    db: Session,
    user_id: Optional[str],
    today: Optional[date] = None
) -> List[BudgetSnapshot]:
    """
    Active budgets, each measured against its own period's window as of
    `today` (default: now).
    """
    if user_id is None:
        return []

    budgets = list_budgets(db, user_id, active_only=True)
    snapshots = []

    for budget in budgets:
        window = resolve_period(budget.period, today)
        spent = _sum_expenses(db, user_id, window, budget.category_id)
        info = classify_budget(spent, budget.amount)

        snapshots.append(BudgetSnapshot(
            budget_id=budget.id,
            category=CategoryResponse.model_validate(budget.category),
            amount=float(budget.amount),
            period=budget.period,
            is_active=budget.is_active,
            start=window.start,
            end=window.end,
            spent=float(spent),
            percentage=info.percentage,
            status=info.status,
            remaining=info.remaining,
            overage=info.overage,
        ))

    return snapshots

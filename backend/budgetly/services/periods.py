"""Turn a symbolic budget period into a concrete calendar window."""

import calendar
from datetime import date, datetime, timedelta
from typing import Optional, Tuple, Union

from budgetly.models.budget import BudgetPeriod
from budgetly.schemas.dashboard import DateRange

MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _coerce_period(period: Union[BudgetPeriod, str, None]) -> BudgetPeriod:
    if isinstance(period, BudgetPeriod):
        return period
    try:
        return BudgetPeriod(period)
    except ValueError:
        return BudgetPeriod.monthly


def month_range(year: int, month: int) -> DateRange:
    """First through last day of a calendar month."""
    last_day = calendar.monthrange(year, month)[1]
    return DateRange(start=date(year, month, 1), end=date(year, month, last_day))


def month_label(year: int, month: int) -> str:
    """English "Mon YYYY" label, independent of the process locale."""
    return f"{MONTH_ABBR[month - 1]} {year}"


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move (year, month) by `delta` months, rolling over year boundaries."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def resolve_period(
    period: Union[BudgetPeriod, str, None],
    reference: Optional[date] = None
) -> DateRange:
    """
    Inclusive window containing `reference` (default today).

    Weeks run Sunday through Saturday. Anything that is not a known
    period is treated as monthly.
    """
    reference = reference or date.today()
    if isinstance(reference, datetime):
        reference = reference.date()
    kind = _coerce_period(period)

    if kind == BudgetPeriod.weekly:
        # date.weekday(): Monday=0 .. Sunday=6
        days_since_sunday = (reference.weekday() + 1) % 7
        start = reference - timedelta(days=days_since_sunday)
        return DateRange(start=start, end=start + timedelta(days=6))

    if kind == BudgetPeriod.yearly:
        return DateRange(start=date(reference.year, 1, 1), end=date(reference.year, 12, 31))

    return month_range(reference.year, reference.month)

"""
Database models package.
"""

from budgetly.models.category import Category, TransactionType
from budgetly.models.transaction import Transaction
from budgetly.models.budget import Budget, BudgetPeriod
from budgetly.models.profile import Profile

__all__ = [
    "Category",
    "TransactionType",
    "Transaction",
    "Budget",
    "BudgetPeriod",
    "Profile",
]

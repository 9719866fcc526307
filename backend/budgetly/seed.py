"""
Seed script for a user's default categories.

Usage: python -m budgetly.seed <user_id>
"""

import sys

from budgetly.database import Base, SessionLocal, engine
from budgetly.models import TransactionType


DEFAULT_CATEGORIES = [
    # Income
    {"name": "Salary", "icon": "briefcase", "color": "#22c55e", "type": TransactionType.income},
    {"name": "Freelance", "icon": "laptop", "color": "#10b981", "type": TransactionType.income},
    {"name": "Investments", "icon": "trending-up", "color": "#14b8a6", "type": TransactionType.income},
    {"name": "Other Income", "icon": "plus-circle", "color": "#06b6d4", "type": TransactionType.income},
    # Expense
    {"name": "Food & Dining", "icon": "utensils", "color": "#ef4444", "type": TransactionType.expense},
    {"name": "Transportation", "icon": "car", "color": "#f97316", "type": TransactionType.expense},
    {"name": "Shopping", "icon": "shopping-bag", "color": "#f59e0b", "type": TransactionType.expense},
    {"name": "Entertainment", "icon": "gamepad-2", "color": "#eab308", "type": TransactionType.expense},
    {"name": "Bills & Utilities", "icon": "receipt", "color": "#84cc16", "type": TransactionType.expense},
    {"name": "Healthcare", "icon": "heart-pulse", "color": "#ec4899", "type": TransactionType.expense},
    {"name": "Housing", "icon": "home", "color": "#8b5cf6", "type": TransactionType.expense},
    {"name": "Education", "icon": "graduation-cap", "color": "#6366f1", "type": TransactionType.expense},
    {"name": "Other Expenses", "icon": "more-horizontal", "color": "#64748b", "type": TransactionType.expense},
]


def seed_categories(user_id: str):
    """Create the default categories for a user who has none yet."""
    from budgetly.services import category_service

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        result = category_service.create_default_categories(db, user_id)
        if result.ok:
            print(f"Successfully seeded {len(result.data)} categories for {user_id}")
        else:
            print(f"Not seeded: {result.error.detail}")
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python -m budgetly.seed <user_id>")
        sys.exit(1)
    seed_categories(sys.argv[1])

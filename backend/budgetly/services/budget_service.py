"""Service for budget declarations: one budget per category per user."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from budgetly.models.budget import Budget
from budgetly.models.category import Category, TransactionType
from budgetly.schemas.budget import BudgetCreate, BudgetUpdate
from budgetly.services.category_service import get_category, list_categories
from budgetly.services.results import ErrorKind, WriteResult

logger = logging.getLogger(__name__)

DUPLICATE_BUDGET = "A budget already exists for this category"


def list_budgets(db: Session, user_id: Optional[str], active_only: bool = False) -> List[Budget]:
    """Budgets for the user with their category loaded, oldest first."""
    if user_id is None:
        return []

    query = db.query(Budget).options(joinedload(Budget.category)).filter(
        Budget.user_id == user_id
    )
    if active_only:
        query = query.filter(Budget.is_active == True)

    return query.order_by(Budget.created_at, Budget.id).all()


def get_budget(db: Session, user_id: Optional[str], budget_id: str) -> Optional[Budget]:
    if user_id is None:
        return None
    return db.query(Budget).filter(
        Budget.id == budget_id,
        Budget.user_id == user_id
    ).first()


def find_budget_for_category(db: Session, user_id: str, category_id: str) -> Optional[Budget]:
    return db.query(Budget).filter(
        Budget.user_id == user_id,
        Budget.category_id == category_id
    ).first()


def create_budget(db: Session, user_id: Optional[str], data: BudgetCreate) -> WriteResult:
    """
    Declare a budget for an expense category.

    The existing-row lookup gives a readable conflict in the common case.
    Concurrent creates that both pass the lookup are stopped by the
    (user_id, category_id) unique constraint and reported the same way.
    """
    if user_id is None:
        return WriteResult.unauthenticated()

    category = get_category(db, user_id, data.category_id)
    if not category:
        return WriteResult.failure(ErrorKind.not_found, "Category not found")
    if category.type != TransactionType.expense:
        logger.info(f"Rejected budget on income category {category.id} for {user_id}")
        return WriteResult.failure(
            ErrorKind.validation_failed,
            "Budgets can only be set on expense categories"
        )

    if find_budget_for_category(db, user_id, data.category_id):
        logger.info(f"Rejected duplicate budget for category {data.category_id} ({user_id})")
        return WriteResult.failure(ErrorKind.conflict, DUPLICATE_BUDGET)

    budget = Budget(
        user_id=user_id,
        category_id=data.category_id,
        amount=data.amount,
        period=data.period,
        is_active=data.is_active,
    )
    try:
        db.add(budget)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info(f"Budget insert for category {data.category_id} lost a race ({user_id})")
        return WriteResult.failure(ErrorKind.conflict, DUPLICATE_BUDGET)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create budget for {user_id}: {e}")
        return WriteResult.failure(ErrorKind.store_failure, str(e))

    db.refresh(budget)
    logger.debug(f"Created budget {budget.id} for {user_id}")
    return WriteResult.success(budget)


def update_budget(
    db: Session,
    user_id: Optional[str],
    budget_id: str,
    data: BudgetUpdate
) -> WriteResult:
    """Change amount, period or the active flag. The category is fixed."""
    if user_id is None:
        return WriteResult.unauthenticated()

    budget = get_budget(db, user_id, budget_id)
    if not budget:
        return WriteResult.failure(ErrorKind.not_found, "Budget not found")

    if data.amount is not None:
        budget.amount = data.amount
    if data.period is not None:
        budget.period = data.period
    if data.is_active is not None:
        budget.is_active = data.is_active

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to update budget {budget_id}: {e}")
        return WriteResult.failure(ErrorKind.store_failure, str(e))

    db.refresh(budget)
    return WriteResult.success(budget)


def delete_budget(db: Session, user_id: Optional[str], budget_id: str) -> WriteResult:
    if user_id is None:
        return WriteResult.unauthenticated()

    budget = get_budget(db, user_id, budget_id)
    if not budget:
        return WriteResult.failure(ErrorKind.not_found, "Budget not found")

    try:
        db.delete(budget)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to delete budget {budget_id}: {e}")
        return WriteResult.failure(ErrorKind.store_failure, str(e))

    return WriteResult.success()


def get_unbudgeted_categories(db: Session, user_id: Optional[str]) -> List[Category]:
    """Expense categories with no budget row at all, active or not."""
    if user_id is None:
        return []

    categories = list_categories(db, user_id, type=TransactionType.expense)
    if not categories:
        return []

    budgeted_ids = {
        row.category_id
        for row in db.query(Budget.category_id).filter(Budget.user_id == user_id).all()
    }
    return [c for c in categories if c.id not in budgeted_ids]

"""Service for user-owned categories."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from budgetly.models.budget import Budget
from budgetly.models.category import Category, TransactionType
from budgetly.schemas.budget import BudgetResponse, CategoryWithBudget
from budgetly.schemas.category import CategoryCreate, CategoryUpdate
from budgetly.services.results import ErrorKind, WriteResult

logger = logging.getLogger(__name__)


def list_categories(
    db: Session,
    user_id: Optional[str],
    type: Optional[TransactionType] = None
) -> List[Category]:
    """Categories owned by the user, ordered by name."""
    if user_id is None:
        return []

    query = db.query(Category).filter(Category.user_id == user_id)
    if type is not None:
        query = query.filter(Category.type == type)

    return query.order_by(Category.name, Category.created_at, Category.id).all()


def get_category(db: Session, user_id: Optional[str], category_id: str) -> Optional[Category]:
    if user_id is None:
        return None
    return db.query(Category).filter(
        Category.id == category_id,
        Category.user_id == user_id
    ).first()


def get_categories_with_budgets(db: Session, user_id: Optional[str]) -> List[CategoryWithBudget]:
    """Every category with its budget row, or None where it has no budget."""
    categories = list_categories(db, user_id)
    if not categories:
        return []

    budgets = {
        b.category_id: b
        for b in db.query(Budget).filter(Budget.user_id == user_id).all()
    }

    items = []
    for category in categories:
        item = CategoryWithBudget.model_validate(category)
        budget = budgets.get(category.id)
        item.budget = BudgetResponse.model_validate(budget) if budget else None
        items.append(item)
    return items


def create_category(db: Session, user_id: Optional[str], data: CategoryCreate) -> WriteResult:
    if user_id is None:
        return WriteResult.unauthenticated()

    category = Category(
        user_id=user_id,
        name=data.name,
        icon=data.icon,
        color=data.color,
        type=data.type,
    )
    try:
        db.add(category)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create category for {user_id}: {e}")
        return WriteResult.failure(ErrorKind.store_failure, str(e))

    db.refresh(category)
    logger.debug(f"Created category {category.id} for {user_id}")
    return WriteResult.success(category)


def update_category(
    db: Session,
    user_id: Optional[str],
    category_id: str,
    data: CategoryUpdate
) -> WriteResult:
    if user_id is None:
        return WriteResult.unauthenticated()

    category = get_category(db, user_id, category_id)
    if not category:
        return WriteResult.failure(ErrorKind.not_found, "Category not found")

    if data.type == TransactionType.income and category.budgets:
        logger.info(f"Rejected type change on budgeted category {category_id} ({user_id})")
        return WriteResult.failure(
            ErrorKind.validation_failed,
            "A category with a budget must stay an expense category"
        )

    for field, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(category, field, value)

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to update category {category_id}: {e}")
        return WriteResult.failure(ErrorKind.store_failure, str(e))

    db.refresh(category)
    return WriteResult.success(category)


def delete_category(db: Session, user_id: Optional[str], category_id: str) -> WriteResult:
    """
    Delete a category. Its transactions become uncategorized and any
    budget declared on it goes away with it.
    """
    if user_id is None:
        return WriteResult.unauthenticated()

    category = get_category(db, user_id, category_id)
    if not category:
        return WriteResult.failure(ErrorKind.not_found, "Category not found")

    try:
        # Transactions keep their rows with category_id nulled, budgets cascade
        db.delete(category)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to delete category {category_id}: {e}")
        return WriteResult.failure(ErrorKind.store_failure, str(e))

    return WriteResult.success()


def create_default_categories(db: Session, user_id: Optional[str]) -> WriteResult:
    """Give a new user the starter set of income and expense categories."""
    from budgetly.seed import DEFAULT_CATEGORIES

    if user_id is None:
        return WriteResult.unauthenticated()

    existing = db.query(Category.id).filter(Category.user_id == user_id).first()
    if existing:
        return WriteResult.failure(ErrorKind.conflict, "Categories already exist")

    categories = [Category(user_id=user_id, **cat) for cat in DEFAULT_CATEGORIES]
    try:
        db.add_all(categories)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create default categories for {user_id}: {e}")
        return WriteResult.failure(ErrorKind.store_failure, str(e))

    logger.info(f"Created {len(categories)} default categories for {user_id}")
    return WriteResult.success(categories)

"""Service for querying and editing a user's transactions."""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import SQLAlchemyError

from budgetly.models.category import Category, TransactionType
from budgetly.models.transaction import Transaction
from budgetly.schemas.transaction import TransactionCreate, TransactionUpdate
from budgetly.services.periods import resolve_period
from budgetly.services.results import ErrorKind, WriteResult

logger = logging.getLogger(__name__)


def list_transactions(
    db: Session,
    user_id: Optional[str],
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    type: Optional[TransactionType] = None,
    category_id: Optional[str] = None,
    limit: Optional[int] = None
) -> List[Transaction]:
    """
    Transactions for the user, newest first, each with its category loaded.
    Both date bounds are inclusive.
    """
    if user_id is None:
        return []

    query = db.query(Transaction).options(joinedload(Transaction.category)).filter(
        Transaction.user_id == user_id
    )

    if start_date:
        query = query.filter(Transaction.date >= start_date)
    if end_date:
        query = query.filter(Transaction.date <= end_date)
    if type is not None:
        query = query.filter(Transaction.type == type)
    if category_id:
        query = query.filter(Transaction.category_id == category_id)

    query = query.order_by(
        Transaction.date.desc(),
        Transaction.created_at.desc(),
        Transaction.id
    )
    if limit:
        query = query.limit(limit)

    return query.all()


def get_monthly_transactions(
    db: Session,
    user_id: Optional[str],
    reference: Optional[date] = None
) -> List[Transaction]:
    window = resolve_period("monthly", reference)
    return list_transactions(db, user_id, start_date=window.start, end_date=window.end)


def get_recent_transactions(db: Session, user_id: Optional[str], limit: int = 5) -> List[Transaction]:
    return list_transactions(db, user_id, limit=limit)


def get_transaction(db: Session, user_id: Optional[str], transaction_id: str) -> Optional[Transaction]:
    if user_id is None:
        return None
    return db.query(Transaction).filter(
        Transaction.id == transaction_id,
        Transaction.user_id == user_id
    ).first()


def _owns_category(db: Session, user_id: str, category_id: str) -> bool:
    return db.query(Category.id).filter(
        Category.id == category_id,
        Category.user_id == user_id
    ).first() is not None


def create_transaction(db: Session, user_id: Optional[str], data: TransactionCreate) -> WriteResult:
    if user_id is None:
        return WriteResult.unauthenticated()

    category_id = data.category_id or None
    if category_id and not _owns_category(db, user_id, category_id):
        return WriteResult.failure(ErrorKind.not_found, "Category not found")

    transaction = Transaction(
        user_id=user_id,
        category_id=category_id,
        amount=data.amount,
        type=data.type,
        description=data.description,
        date=data.date,
        notes=data.notes or None,
    )
    try:
        db.add(transaction)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create transaction for {user_id}: {e}")
        return WriteResult.failure(ErrorKind.store_failure, str(e))

    db.refresh(transaction)
    logger.debug(f"Created transaction {transaction.id} for {user_id}")
    return WriteResult.success(transaction)


def update_transaction(
    db: Session,
    user_id: Optional[str],
    transaction_id: str,
    data: TransactionUpdate
) -> WriteResult:
    """Apply the supplied fields. An explicit null category_id uncategorizes."""
    if user_id is None:
        return WriteResult.unauthenticated()

    transaction = get_transaction(db, user_id, transaction_id)
    if not transaction:
        return WriteResult.failure(ErrorKind.not_found, "Transaction not found")

    update_data = data.model_dump(exclude_unset=True)
    category_id = update_data.get("category_id")
    if category_id and not _owns_category(db, user_id, category_id):
        return WriteResult.failure(ErrorKind.not_found, "Category not found")

    for field, value in update_data.items():
        if value is None and field not in ("category_id", "notes"):
            continue
        setattr(transaction, field, value)

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to update transaction {transaction_id}: {e}")
        return WriteResult.failure(ErrorKind.store_failure, str(e))

    db.refresh(transaction)
    return WriteResult.success(transaction)


def delete_transaction(db: Session, user_id: Optional[str], transaction_id: str) -> WriteResult:
    if user_id is None:
        return WriteResult.unauthenticated()

    transaction = get_transaction(db, user_id, transaction_id)
    if not transaction:
        return WriteResult.failure(ErrorKind.not_found, "Transaction not found")

    try:
        db.delete(transaction)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to delete transaction {transaction_id}: {e}")
        return WriteResult.failure(ErrorKind.store_failure, str(e))

    return WriteResult.success()

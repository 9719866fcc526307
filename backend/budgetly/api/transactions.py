"""
Transaction API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date

from budgetly.api.errors import unwrap
from budgetly.dependencies import get_db, get_current_user_id
from budgetly.models.category import TransactionType
from budgetly.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
    TransactionUpdate,
    TransactionListResponse
)
from budgetly.services import transaction_service

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    type: Optional[TransactionType] = None,
    category_id: Optional[str] = None,
    limit: Optional[int] = Query(None, ge=1, le=500),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """List transactions with filtering, newest first"""
    transactions = transaction_service.list_transactions(
        db,
        user_id,
        start_date=start_date,
        end_date=end_date,
        type=type,
        category_id=category_id,
        limit=limit
    )
    return TransactionListResponse(
        items=[TransactionResponse.model_validate(t) for t in transactions],
        total=len(transactions)
    )


@router.get("/recent", response_model=List[TransactionResponse])
def get_recent_transactions(
    limit: int = Query(5, ge=1, le=50),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """Most recent transactions for the dashboard widget"""
    transactions = transaction_service.get_recent_transactions(db, user_id, limit=limit)
    return [TransactionResponse.model_validate(t) for t in transactions]


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    transaction: TransactionCreate,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    created = unwrap(transaction_service.create_transaction(db, user_id, transaction))
    return TransactionResponse.model_validate(created)


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """Get a single transaction"""
    transaction = transaction_service.get_transaction(db, user_id, transaction_id)
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return TransactionResponse.model_validate(transaction)


@router.patch("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: str,
    update: TransactionUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    """Update a transaction"""
    updated = unwrap(transaction_service.update_transaction(db, user_id, transaction_id, update))
    return TransactionResponse.model_validate(updated)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_current_user_id)
):
    unwrap(transaction_service.delete_transaction(db, user_id, transaction_id))
    return None

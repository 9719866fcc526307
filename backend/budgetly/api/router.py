"""
Main API router.
"""

from fastapi import APIRouter
from budgetly.api import budgets, categories, dashboard, profile, transactions

api_router = APIRouter()

api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(budgets.router)
api_router.include_router(transactions.router)
api_router.include_router(dashboard.router)
api_router.include_router(profile.router)

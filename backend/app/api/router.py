"""
Main API router.
"""

from fastapi import APIRouter
from app.api import analytics, auth, budgets, categories, expenses

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(expenses.router)
api_router.include_router(budgets.router)
api_router.include_router(analytics.router)

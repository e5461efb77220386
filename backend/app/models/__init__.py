"""
Database models package.
"""

from app.models.user import User
from app.models.category import Category
from app.models.expense import Expense
from app.models.budget import Budget, BudgetPeriod

__all__ = [
    "User",
    "Category",
    "Expense",
    "Budget",
    "BudgetPeriod",
]

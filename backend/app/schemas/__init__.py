"""
Pydantic schemas package.
"""

from app.schemas.common import ApiModel, DeleteResponse, JsonDecimal, UtcDatetime
from app.schemas.category import (
    CategoryPayload,
    CategoryResponse,
    CategoryList,
    CategoryMutationResponse,
)
from app.schemas.expense import (
    ExpensePayload,
    ExpenseResponse,
    ExpenseListResponse,
    ExpenseMutationResponse,
    Pagination,
)
from app.schemas.budget import (
    BudgetPayload,
    BudgetResponse,
    BudgetList,
    BudgetMutationResponse,
)
from app.schemas.analytics import (
    AnalyticsSummary,
    BudgetProgressItem,
    CategorySpend,
    DailySpend,
)
from app.schemas.user import MeResponse, UserResponse

__all__ = [
    "ApiModel",
    "DeleteResponse",
    "JsonDecimal",
    "UtcDatetime",
    "CategoryPayload",
    "CategoryResponse",
    "CategoryList",
    "CategoryMutationResponse",
    "ExpensePayload",
    "ExpenseResponse",
    "ExpenseListResponse",
    "ExpenseMutationResponse",
    "Pagination",
    "BudgetPayload",
    "BudgetResponse",
    "BudgetList",
    "BudgetMutationResponse",
    "AnalyticsSummary",
    "BudgetProgressItem",
    "CategorySpend",
    "DailySpend",
    "MeResponse",
    "UserResponse",
]

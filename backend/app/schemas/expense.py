"""
Expense schemas.
"""

from pydantic import Field
from typing import Optional
from decimal import Decimal

from app.schemas.common import ApiModel, JsonDecimal, UtcDatetime


class ExpensePayload(ApiModel):
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, allow_inf_nan=False)
    category_id: Optional[str] = None
    note: Optional[str] = Field(None, max_length=500)
    date: UtcDatetime


class ExpenseResponse(ApiModel):
    id: str
    amount: JsonDecimal
    category_id: Optional[str]
    note: Optional[str]
    date: UtcDatetime
    created_at: UtcDatetime


class Pagination(ApiModel):
    limit: int
    offset: int
    total: int


class ExpenseListResponse(ApiModel):
    data: list[ExpenseResponse]
    pagination: Pagination


class ExpenseMutationResponse(ApiModel):
    expense: ExpenseResponse

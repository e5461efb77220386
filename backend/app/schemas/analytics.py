"""
Analytics response schemas.
"""

from typing import Optional

from app.schemas.common import ApiModel, JsonDecimal


class CategorySpend(ApiModel):
    category_id: Optional[str]
    category_name: Optional[str]
    amount: JsonDecimal


class DailySpend(ApiModel):
    date: str
    amount: JsonDecimal


class AnalyticsSummary(ApiModel):
    total: JsonDecimal
    by_category: list[CategorySpend]
    daily: list[DailySpend]


class BudgetProgressItem(ApiModel):
    budget_id: str
    category_name: str
    limit: JsonDecimal
    spent: JsonDecimal
    remaining: JsonDecimal
    progress: JsonDecimal

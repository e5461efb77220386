"""
Budget schemas.
"""

from pydantic import Field, model_validator
from typing import Optional
from decimal import Decimal

from app.models.budget import BudgetPeriod
from app.schemas.common import ApiModel, JsonDecimal, UtcDatetime


class BudgetPayload(ApiModel):
    category_id: Optional[str] = None
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, allow_inf_nan=False)
    period: BudgetPeriod
    start_date: UtcDatetime
    end_date: Optional[UtcDatetime] = None

    @model_validator(mode="after")
    def check_window(self):
        if self.period == BudgetPeriod.custom and self.end_date is None:
            raise ValueError("endDate is required when period is custom.")
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("endDate must be after or equal to startDate.")
        return self


class BudgetResponse(ApiModel):
    id: str
    category_id: Optional[str]
    category_name: Optional[str]
    amount: JsonDecimal
    period: BudgetPeriod
    start_date: UtcDatetime
    end_date: Optional[UtcDatetime]
    created_at: UtcDatetime


class BudgetList(ApiModel):
    budgets: list[BudgetResponse]


class BudgetMutationResponse(ApiModel):
    budget: BudgetResponse

"""
Analytics API endpoints.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.config import settings
from app.dependencies import get_db, get_current_user
from app.errors import InvalidRange
from app.models import User
from app.schemas.analytics import (
    AnalyticsSummary,
    BudgetProgressItem,
    CategorySpend,
    DailySpend,
)
from app.services import analytics_service
from app.services.date_ranges import Interval, resolve_range

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analytics", tags=["analytics"])


def _resolve(
    month: Optional[str],
    from_: Optional[str],
    to: Optional[str],
    require_explicit: bool
) -> Interval:
    try:
        return resolve_range(
            month,
            from_,
            to,
            require_explicit=require_explicit,
            default_days=settings.summary_default_days,
        )
    except InvalidRange as e:
        raise HTTPException(status_code=400, detail=e.to_detail())


@router.get("/summary", response_model=AnalyticsSummary)
def get_summary(
    month: Optional[str] = Query(None, description="YYYY-MM format"),
    from_: Optional[str] = Query(None, alias="from", description="ISO-8601 UTC timestamp"),
    to: Optional[str] = Query(None, description="ISO-8601 UTC timestamp"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Spending summary for a month, an explicit range, or the last 30 days.
    Returns: total, byCategory, daily
    """
    interval = _resolve(month, from_, to, require_explicit=False)
    summary = analytics_service.build_summary(db, user.id, interval)

    return AnalyticsSummary(
        total=summary.total,
        by_category=[
            CategorySpend(
                category_id=row.category_id,
                category_name=row.category_name,
                amount=row.amount
            )
            for row in summary.by_category
        ],
        daily=[DailySpend(date=row.date, amount=row.amount) for row in summary.daily]
    )


@router.get("/budgets", response_model=list[BudgetProgressItem])
def get_budget_progress(
    month: Optional[str] = Query(None, description="YYYY-MM format"),
    from_: Optional[str] = Query(None, alias="from", description="ISO-8601 UTC timestamp"),
    to: Optional[str] = Query(None, description="ISO-8601 UTC timestamp"),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Progress of every budget overlapping the requested month or range.
    Returns: [{budgetId, categoryName, limit, spent, remaining, progress}, ...]
    """
    interval = _resolve(month, from_, to, require_explicit=True)
    progress = analytics_service.build_budget_progress(db, user.id, interval)

    return [
        BudgetProgressItem(
            budget_id=item.budget_id,
            category_name=item.category_name,
            limit=item.limit,
            spent=item.spent,
            remaining=item.remaining,
            progress=item.progress
        )
        for item in progress
    ]

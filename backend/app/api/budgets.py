"""
Budget API endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.categories import find_usable_category
from app.dependencies import get_db, get_current_user
from app.models import Budget, User
from app.schemas.budget import (
    BudgetPayload,
    BudgetResponse,
    BudgetList,
    BudgetMutationResponse,
)
from app.schemas.common import DeleteResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/budgets", tags=["budgets"])


def format_budget(budget: Budget) -> BudgetResponse:
    return BudgetResponse(
        id=budget.id,
        category_id=budget.category_id,
        category_name=budget.category.name if budget.category else None,
        amount=budget.amount,
        period=budget.period,
        start_date=budget.start_date,
        end_date=budget.end_date,
        created_at=budget.created_at
    )


def get_owned_budget(db: Session, user: User, budget_id: str) -> Budget:
    budget = db.query(Budget).filter(Budget.id == budget_id).first()
    if not budget or budget.user_id != user.id:
        raise HTTPException(status_code=404, detail="Budget not found or not owned by user.")
    return budget


@router.get("", response_model=BudgetList)
def list_budgets(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the user's budgets, newest first."""
    budgets = db.query(Budget).filter(
        Budget.user_id == user.id
    ).order_by(Budget.created_at.desc()).all()

    return BudgetList(budgets=[format_budget(b) for b in budgets])


@router.post("", response_model=BudgetMutationResponse, status_code=201)
def create_budget(
    payload: BudgetPayload,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a budget for one category or for all of them."""
    category_id = None
    if payload.category_id:
        category_id = find_usable_category(db, user, payload.category_id).id

    budget = Budget(
        user_id=user.id,
        category_id=category_id,
        amount=payload.amount,
        period=payload.period,
        start_date=payload.start_date,
        end_date=payload.end_date
    )
    db.add(budget)
    db.commit()
    db.refresh(budget)
    logger.info("Created budget %s for user %s", budget.id, user.id)

    return BudgetMutationResponse(budget=format_budget(budget))


@router.put("/{budget_id}", response_model=BudgetMutationResponse)
def update_budget(
    budget_id: str,
    payload: BudgetPayload,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Replace a budget's fields.
    An omitted categoryId keeps the current category; an explicit null clears it.
    """
    budget = get_owned_budget(db, user, budget_id)

    if "category_id" in payload.model_fields_set:
        if payload.category_id is None:
            budget.category_id = None
        else:
            budget.category_id = find_usable_category(db, user, payload.category_id).id

    budget.amount = payload.amount
    budget.period = payload.period
    budget.start_date = payload.start_date
    budget.end_date = payload.end_date

    db.commit()
    db.refresh(budget)
    logger.info("Updated budget %s for user %s", budget.id, user.id)
    return BudgetMutationResponse(budget=format_budget(budget))


@router.delete("/{budget_id}", response_model=DeleteResponse)
def delete_budget(
    budget_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a budget"""
    budget = get_owned_budget(db, user, budget_id)
    db.delete(budget)
    db.commit()
    logger.info("Deleted budget %s for user %s", budget_id, user.id)
    return DeleteResponse()

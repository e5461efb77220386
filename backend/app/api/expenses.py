"""
Expense API endpoints.
"""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api.categories import find_usable_category
from app.config import settings
from app.dependencies import get_db, get_current_user
from app.models import Expense, User
from app.schemas.common import DeleteResponse
from app.schemas.expense import (
    ExpensePayload,
    ExpenseResponse,
    ExpenseListResponse,
    ExpenseMutationResponse,
    Pagination,
)
from app.services.date_ranges import as_utc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["expenses"])


def get_owned_expense(db: Session, user: User, expense_id: str) -> Expense:
    expense = db.query(Expense).filter(
        Expense.id == expense_id,
        Expense.user_id == user.id
    ).first()
    if not expense:
        raise HTTPException(status_code=404, detail="Expense not found.")
    return expense


def resolve_category_id(db: Session, user: User, category_id: Optional[str]) -> Optional[str]:
    if not category_id:
        return None
    return find_usable_category(db, user, category_id).id


@router.get("", response_model=ExpenseListResponse)
def list_expenses(
    from_: Optional[datetime] = Query(None, alias="from"),
    to: Optional[datetime] = Query(None),
    category_id: Optional[str] = Query(None, alias="categoryId"),
    limit: int = Query(settings.expense_page_size_default, ge=1, le=settings.expense_page_size_max),
    offset: int = Query(0, ge=0),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the user's expenses, newest first, with optional date and category filters."""
    query = db.query(Expense).filter(Expense.user_id == user.id)

    if category_id:
        query = query.filter(Expense.category_id == category_id)
    if from_:
        query = query.filter(Expense.date >= as_utc(from_))
    if to:
        query = query.filter(Expense.date <= as_utc(to))

    total = query.count()
    expenses = query.order_by(Expense.date.desc()).offset(offset).limit(limit).all()

    return ExpenseListResponse(
        data=[ExpenseResponse.model_validate(e) for e in expenses],
        pagination=Pagination(limit=limit, offset=offset, total=total)
    )


@router.post("", response_model=ExpenseMutationResponse, status_code=201)
def create_expense(
    payload: ExpensePayload,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Record a new expense."""
    expense = Expense(
        user_id=user.id,
        category_id=resolve_category_id(db, user, payload.category_id),
        amount=payload.amount,
        note=payload.note,
        date=payload.date
    )
    db.add(expense)
    db.commit()
    db.refresh(expense)
    logger.info("Created expense %s for user %s", expense.id, user.id)

    return ExpenseMutationResponse(expense=ExpenseResponse.model_validate(expense))


@router.get("/{expense_id}", response_model=ExpenseMutationResponse)
def get_expense(
    expense_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a single expense"""
    expense = get_owned_expense(db, user, expense_id)
    return ExpenseMutationResponse(expense=ExpenseResponse.model_validate(expense))


@router.put("/{expense_id}", response_model=ExpenseMutationResponse)
def update_expense(
    expense_id: str,
    payload: ExpensePayload,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Replace an expense's fields."""
    expense = get_owned_expense(db, user, expense_id)

    expense.category_id = resolve_category_id(db, user, payload.category_id)
    expense.amount = payload.amount
    expense.note = payload.note
    expense.date = payload.date

    db.commit()
    db.refresh(expense)
    logger.info("Updated expense %s for user %s", expense.id, user.id)
    return ExpenseMutationResponse(expense=ExpenseResponse.model_validate(expense))


@router.delete("/{expense_id}", response_model=DeleteResponse)
def delete_expense(
    expense_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an expense"""
    expense = get_owned_expense(db, user, expense_id)
    db.delete(expense)
    db.commit()
    logger.info("Deleted expense %s for user %s", expense_id, user.id)
    return DeleteResponse()

"""
Category API endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.dependencies import get_db, get_current_user
from app.models import Category, Expense, User
from app.schemas.category import (
    CategoryPayload,
    CategoryResponse,
    CategoryList,
    CategoryMutationResponse,
)
from app.schemas.common import DeleteResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def find_usable_category(db: Session, user: User, category_id: str) -> Category:
    """Look up a category the user may attach to records (own or global)."""
    category = db.query(Category).filter(
        Category.id == category_id,
        or_(Category.user_id == user.id, Category.user_id.is_(None))
    ).first()
    if not category:
        raise HTTPException(status_code=404, detail="Category not found for this user.")
    return category


def get_owned_category(db: Session, user: User, category_id: str) -> Category:
    category = db.query(Category).filter(Category.id == category_id).first()
    if not category or category.user_id != user.id:
        raise HTTPException(status_code=404, detail="Category not found or not owned by user.")
    return category


@router.get("", response_model=CategoryList)
def list_categories(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the user's categories together with global ones."""
    categories = db.query(Category).filter(
        or_(Category.user_id == user.id, Category.user_id.is_(None))
    ).order_by(Category.name.asc()).all()

    return CategoryList(
        categories=[CategoryResponse.model_validate(c) for c in categories]
    )


@router.post("", response_model=CategoryMutationResponse, status_code=201)
def create_category(
    payload: CategoryPayload,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a category owned by the user."""
    category = Category(
        user_id=user.id,
        name=payload.name,
        color=payload.color,
        icon=payload.icon
    )
    db.add(category)
    db.commit()
    db.refresh(category)
    logger.info("Created category %s for user %s", category.id, user.id)

    return CategoryMutationResponse(category=CategoryResponse.model_validate(category))


@router.put("/{category_id}", response_model=CategoryMutationResponse)
def update_category(
    category_id: str,
    payload: CategoryPayload,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Replace a category's fields. Global categories cannot be edited."""
    category = get_owned_category(db, user, category_id)

    category.name = payload.name
    category.color = payload.color
    category.icon = payload.icon

    db.commit()
    db.refresh(category)
    logger.info("Updated category %s for user %s", category.id, user.id)
    return CategoryMutationResponse(category=CategoryResponse.model_validate(category))


@router.delete("/{category_id}", response_model=DeleteResponse)
def delete_category(
    category_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a category unless the user's expenses still reference it."""
    category = get_owned_category(db, user, category_id)

    in_use = db.query(Expense).filter(
        Expense.category_id == category_id,
        Expense.user_id == user.id
    ).count()
    if in_use > 0:
        raise HTTPException(
            status_code=409,
            detail={
                "message": "Cannot delete category that is used by expenses.",
                "expensesUsingCategory": in_use,
            }
        )

    db.delete(category)
    db.commit()
    logger.info("Deleted category %s for user %s", category_id, user.id)
    return DeleteResponse()

"""
Budget database model.
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Enum, Numeric, ForeignKey, Index
from sqlalchemy.orm import relationship
import enum
from app.database import Base


class BudgetPeriod(str, enum.Enum):
    """Budget period enumeration."""
    weekly = "weekly"
    monthly = "monthly"
    custom = "custom"


class Budget(Base):
    """Spending limit over a window. A null category applies to all categories,
    a null end_date leaves the budget open-ended."""

    __tablename__ = "budgets"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=True)
    amount = Column(Numeric(12, 2), nullable=False)  # The limit
    period = Column(Enum(BudgetPeriod), nullable=False)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="budgets")
    category = relationship("Category", back_populates="budgets")

    __table_args__ = (
        Index("idx_budget_user_window", "user_id", "start_date", "end_date"),
    )

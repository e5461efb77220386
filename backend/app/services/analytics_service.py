"""Service for spending summaries and budget progress."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Optional, Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.errors import InternalConsistencyFault
from app.models.budget import Budget
from app.models.category import Category
from app.models.expense import Expense
from app.services.date_ranges import Interval, as_utc

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All categories"
UNKNOWN_CATEGORY = "Unknown category"

ZERO = Decimal("0")
HUNDRED = Decimal("100")


class ExpenseEntry(NamedTuple):
    date: datetime
    amount: Decimal


@dataclass
class PartitionedExpenses:
    """Expenses in input order, overall and grouped by category id (None = uncategorized)."""

    entries: List[ExpenseEntry] = field(default_factory=list)
    by_category: Dict[Optional[str], List[ExpenseEntry]] = field(default_factory=dict)


@dataclass(frozen=True)
class CategoryTotal:
    category_id: Optional[str]
    category_name: Optional[str]
    amount: Decimal


@dataclass(frozen=True)
class DailyTotal:
    date: str  # YYYY-MM-DD
    amount: Decimal


@dataclass(frozen=True)
class SummaryResult:
    total: Decimal
    by_category: List[CategoryTotal]
    daily: List[DailyTotal]


@dataclass(frozen=True)
class BudgetProgress:
    budget_id: str
    category_name: str
    limit: Decimal
    spent: Decimal
    remaining: Decimal
    progress: Decimal


def to_decimal(value: Any) -> Decimal:
    """
    Convert a stored amount to an exact Decimal.

    Floats are refused rather than converted, as are None and non-finite
    values: any of those means upstream validation was bypassed.
    """
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int) and not isinstance(value, bool):
        amount = Decimal(value)
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            raise InternalConsistencyFault(f"Amount {value!r} is not a decimal number.")
    else:
        raise InternalConsistencyFault(
            f"Amount of type {type(value).__name__} is not an exact decimal."
        )

    if not amount.is_finite():
        raise InternalConsistencyFault(f"Amount {value!r} is not finite.")
    return amount


def partition_expenses(expenses: Iterable[Any]) -> PartitionedExpenses:
    """Reshape expense records into (date, amount) entries, overall and per category."""
    partitioned = PartitionedExpenses()

    for expense in expenses:
        entry = ExpenseEntry(date=as_utc(expense.date), amount=to_decimal(expense.amount))
        partitioned.entries.append(entry)
        partitioned.by_category.setdefault(expense.category_id, []).append(entry)

    return partitioned


def _iter_in_interval(expenses: Iterable[Any], interval: Interval):
    for expense in expenses:
        entry_date = as_utc(expense.date)
        amount = to_decimal(expense.amount)
        if interval.contains(entry_date):
            yield entry_date, amount, expense.category_id


def _day_key(instant: datetime) -> str:
    return as_utc(instant).date().isoformat()


def compute_summary(
    expenses: Iterable[Any],
    interval: Interval,
    category_names: Mapping[str, str],
) -> SummaryResult:
    """
    Total, per-category and per-day spend for the expenses inside ``interval``.

    Category rows keep the order in which each category was first seen; daily
    rows are sorted by date. An uncategorized bucket has a null id and name.
    """
    total = ZERO
    category_totals: Dict[Optional[str], Decimal] = {}
    daily_totals: Dict[str, Decimal] = {}

    for entry_date, amount, category_id in _iter_in_interval(expenses, interval):
        total += amount
        category_totals[category_id] = category_totals.get(category_id, ZERO) + amount
        day = _day_key(entry_date)
        daily_totals[day] = daily_totals.get(day, ZERO) + amount

    by_category = [
        CategoryTotal(
            category_id=category_id,
            category_name=(
                category_names.get(category_id, UNKNOWN_CATEGORY)
                if category_id is not None
                else None
            ),
            amount=amount,
        )
        for category_id, amount in category_totals.items()
    ]

    daily = [DailyTotal(date=day, amount=daily_totals[day]) for day in sorted(daily_totals)]

    logger.debug(
        "Summary: total=%s categories=%d days=%d", total, len(by_category), len(daily)
    )
    return SummaryResult(total=total, by_category=by_category, daily=daily)


def budget_category_name(budget: Any, category_names: Mapping[str, str]) -> str:
    if budget.category_id is None:
        return ALL_CATEGORIES
    return category_names.get(budget.category_id, UNKNOWN_CATEGORY)


def effective_window(budget: Any, interval: Interval) -> Interval:
    """Intersect the budget's own window with the query interval.

    The result may be empty (end before start) when they do not overlap.
    """
    budget_start = as_utc(budget.start_date)
    budget_end = as_utc(budget.end_date) if budget.end_date is not None else None

    start = max(budget_start, interval.start)
    end = min(budget_end, interval.end) if budget_end is not None else interval.end
    return Interval(start=start, end=end)


def calculate_progress(limit: Decimal, spent: Decimal) -> Decimal:
    """Percent of the limit spent. Unclamped; 0 for a non-positive limit."""
    if limit > 0:
        return (spent / limit) * HUNDRED
    return ZERO


def compute_budget_progress(
    budgets: Sequence[Any],
    partitioned: PartitionedExpenses,
    category_names: Mapping[str, str],
    interval: Interval,
) -> List[BudgetProgress]:
    """Spent, remaining and progress for each budget, in the order given."""
    results = []

    for budget in budgets:
        limit = to_decimal(budget.amount)
        window = effective_window(budget, interval)

        spent = ZERO
        if window.end >= window.start:
            if budget.category_id is not None:
                candidates = partitioned.by_category.get(budget.category_id, [])
            else:
                candidates = partitioned.entries

            for entry in candidates:
                if window.contains(entry.date):
                    spent += entry.amount

        results.append(BudgetProgress(
            budget_id=str(budget.id),
            category_name=budget_category_name(budget, category_names),
            limit=limit,
            spent=spent,
            remaining=limit - spent,
            progress=calculate_progress(limit, spent),
        ))

    logger.debug("Computed progress for %d budgets", len(results))
    return results


def get_category_names(
    db: Session,
    user_id: str,
    category_ids: Optional[Iterable[str]] = None
) -> Dict[str, str]:
    """Names of the user's own and global categories, optionally limited to some ids."""
    query = db.query(Category.id, Category.name).filter(
        or_(Category.user_id == user_id, Category.user_id.is_(None))
    )
    if category_ids is not None:
        ids = [cid for cid in set(category_ids) if cid is not None]
        if not ids:
            return {}
        query = query.filter(Category.id.in_(ids))

    return {str(cid): name for cid, name in query.all()}


def get_expenses_in_range(db: Session, user_id: str, interval: Interval) -> List[Expense]:
    return db.query(Expense).filter(
        Expense.user_id == user_id,
        Expense.date >= interval.start,
        Expense.date <= interval.end
    ).order_by(Expense.date.asc(), Expense.created_at.asc()).all()


def get_budgets_overlapping(db: Session, user_id: str, interval: Interval) -> List[Budget]:
    """Budgets whose own window overlaps the interval, newest first."""
    return db.query(Budget).filter(
        Budget.user_id == user_id,
        Budget.start_date <= interval.end,
        or_(Budget.end_date.is_(None), Budget.end_date >= interval.start)
    ).order_by(Budget.created_at.desc()).all()


def build_summary(db: Session, user_id: str, interval: Interval) -> SummaryResult:
    """Fetch the user's expenses for the interval and summarize them."""
    expenses = get_expenses_in_range(db, user_id, interval)
    category_names = get_category_names(
        db, user_id, (e.category_id for e in expenses)
    )
    return compute_summary(expenses, interval, category_names)


def build_budget_progress(db: Session, user_id: str, interval: Interval) -> List[BudgetProgress]:
    """Fetch overlapping budgets and in-range expenses, then compute progress."""
    budgets = get_budgets_overlapping(db, user_id, interval)
    if not budgets:
        return []

    expenses = get_expenses_in_range(db, user_id, interval)
    category_names = get_category_names(
        db, user_id, (b.category_id for b in budgets)
    )
    return compute_budget_progress(
        budgets, partition_expenses(expenses), category_names, interval
    )

"""Shared test fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import datetime, timezone
from decimal import Decimal
import uuid

from app.database import Base, get_db as database_get_db
from app.dependencies import get_db as dependencies_get_db
from app.main import app
from app.models.user import User
from app.models.category import Category
from app.models.expense import Expense
from app.models.budget import Budget, BudgetPeriod

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override, acting as USER_ID."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[database_get_db] = override_get_db
    app.dependency_overrides[dependencies_get_db] = override_get_db
    with TestClient(app) as test_client:
        test_client.headers.update({"X-User-Id": USER_ID})
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_user(db_session):
    user = User(id=USER_ID, email="user1@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session):
    user = User(id=OTHER_USER_ID, email="user2@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def sample_category(db_session, sample_user):
    """A category owned by the sample user."""
    category = Category(
        id=str(uuid.uuid4()),
        user_id=sample_user.id,
        name="Groceries",
        color="#22c55e",
        icon="shopping-cart"
    )
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def global_category(db_session):
    """A category shared by all users."""
    category = Category(id=str(uuid.uuid4()), user_id=None, name="Rent", color="#3b82f6")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def other_user_category(db_session, other_user):
    category = Category(id=str(uuid.uuid4()), user_id=other_user.id, name="Private")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def sample_expense(db_session, sample_user, sample_category):
    expense = Expense(
        id=str(uuid.uuid4()),
        user_id=sample_user.id,
        category_id=sample_category.id,
        amount=Decimal("40.00"),
        note="Weekly shop",
        date=utc(2024, 1, 10, 12, 0)
    )
    db_session.add(expense)
    db_session.commit()
    db_session.refresh(expense)
    return expense


@pytest.fixture
def january_expenses(db_session, sample_user, sample_category, global_category):
    """Expenses across January 2024 plus one in February."""
    rows = [
        (sample_category.id, "40.00", utc(2024, 1, 10, 9, 30)),
        (None, "70.00", utc(2024, 1, 20, 18, 0)),
        (global_category.id, "12.50", utc(2024, 1, 20, 8, 0)),
        (sample_category.id, "0.10", utc(2024, 1, 31, 23, 59, 59)),
        (sample_category.id, "99.99", utc(2024, 2, 1, 0, 0)),
    ]
    expenses = []
    for category_id, amount, when in rows:
        expense = Expense(
            id=str(uuid.uuid4()),
            user_id=sample_user.id,
            category_id=category_id,
            amount=Decimal(amount),
            date=when
        )
        db_session.add(expense)
        expenses.append(expense)
    db_session.commit()
    return expenses


@pytest.fixture
def sample_budget(db_session, sample_user):
    """Open-ended monthly budget across all categories."""
    budget = Budget(
        id=str(uuid.uuid4()),
        user_id=sample_user.id,
        category_id=None,
        amount=Decimal("100.00"),
        period=BudgetPeriod.monthly,
        start_date=utc(2024, 1, 1),
        end_date=None
    )
    db_session.add(budget)
    db_session.commit()
    db_session.refresh(budget)
    return budget

"""Shared test fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import date
from decimal import Decimal
import uuid

from budgetly.database import Base
from budgetly.dependencies import get_db
from budgetly.main import app
from budgetly.models.budget import Budget, BudgetPeriod
from budgetly.models.category import Category, TransactionType
from budgetly.models.transaction import Transaction


USER_ID = "user-1"
OTHER_USER_ID = "user-2"


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
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
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user_id():
    return USER_ID


@pytest.fixture
def auth_headers():
    """Headers the identity provider would forward for USER_ID."""
    return {"X-User-Id": USER_ID}


def add_category(db_session, name, type=TransactionType.expense, user_id=USER_ID, color="#ef4444"):
    category = Category(
        id=str(uuid.uuid4()),
        user_id=user_id,
        name=name,
        icon="circle",
        color=color,
        type=type
    )
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


def add_transaction(
    db_session,
    amount,
    type=TransactionType.expense,
    category=None,
    on=date(2024, 1, 15),
    user_id=USER_ID,
    description="Test"
):
    txn = Transaction(
        id=str(uuid.uuid4()),
        user_id=user_id,
        category_id=category.id if category is not None else None,
        amount=Decimal(str(amount)),
        type=type,
        description=description,
        date=on
    )
    db_session.add(txn)
    db_session.commit()
    db_session.refresh(txn)
    return txn


def add_budget(db_session, category, amount, period=BudgetPeriod.monthly, is_active=True, user_id=USER_ID):
    budget = Budget(
        id=str(uuid.uuid4()),
        user_id=user_id,
        category_id=category.id,
        amount=Decimal(str(amount)),
        period=period,
        is_active=is_active
    )
    db_session.add(budget)
    db_session.commit()
    db_session.refresh(budget)
    return budget


@pytest.fixture
def sample_category(db_session):
    """Create a sample expense category."""
    return add_category(db_session, "Groceries", color="#22c55e")


@pytest.fixture
def income_category(db_session):
    return add_category(db_session, "Salary", type=TransactionType.income, color="#10b981")


@pytest.fixture
def sample_transaction(db_session, sample_category):
    """Create a sample expense transaction."""
    return add_transaction(db_session, "50.00", category=sample_category, description="Whole Foods")


@pytest.fixture
def sample_budget(db_session, sample_category):
    """Create a monthly budget on the sample category."""
    return add_budget(db_session, sample_category, "100.00")

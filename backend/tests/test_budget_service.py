"""Tests for the budget registry rules."""

from decimal import Decimal
from sqlalchemy.exc import SQLAlchemyError

from budgetly.models.budget import Budget, BudgetPeriod
from budgetly.models.category import TransactionType
from budgetly.schemas.budget import BudgetCreate, BudgetUpdate
from budgetly.services import budget_service
from budgetly.services.results import ErrorKind
from conftest import OTHER_USER_ID, add_budget, add_category, add_transaction


def budget_input(category, amount="100.00", period=BudgetPeriod.monthly, is_active=True):
    return BudgetCreate(category_id=category.id, amount=Decimal(amount), period=period, is_active=is_active)


class TestCreateBudget:
    """Test budget creation and the one-per-category rule."""

    def test_creates_as_supplied(self, db_session, user_id, sample_category):
        result = budget_service.create_budget(
            db_session, user_id, budget_input(sample_category, "250.00", BudgetPeriod.weekly, False)
        )
        assert result.ok
        budget = result.data
        assert budget.amount == Decimal("250.00")
        assert budget.period == BudgetPeriod.weekly
        assert budget.is_active is False
        assert budget.user_id == user_id

    def test_duplicate_is_conflict(self, db_session, user_id, sample_budget, sample_category):
        result = budget_service.create_budget(db_session, user_id, budget_input(sample_category))
        assert not result.ok
        assert result.error.kind == ErrorKind.conflict
        assert result.error.detail == "A budget already exists for this category"

    def test_inactive_budget_still_blocks(self, db_session, user_id, sample_category):
        add_budget(db_session, sample_category, 10, is_active=False)
        result = budget_service.create_budget(db_session, user_id, budget_input(sample_category))
        assert result.error.kind == ErrorKind.conflict

    def test_race_past_precheck_is_conflict(self, db_session, user_id, sample_budget, sample_category, monkeypatch):
        """Two creates that both miss the lookup are stopped by the unique constraint."""
        monkeypatch.setattr(budget_service, "find_budget_for_category", lambda *args: None)

        result = budget_service.create_budget(db_session, user_id, budget_input(sample_category))
        assert result.error.kind == ErrorKind.conflict
        assert db_session.query(Budget).count() == 1

    def test_unknown_category(self, db_session, user_id, sample_category):
        foreign = add_category(db_session, "Theirs", user_id=OTHER_USER_ID)
        result = budget_service.create_budget(db_session, user_id, budget_input(foreign))
        assert result.error.kind == ErrorKind.not_found

    def test_income_category_rejected(self, db_session, user_id, income_category):
        result = budget_service.create_budget(db_session, user_id, budget_input(income_category))
        assert result.error.kind == ErrorKind.validation_failed

    def test_unauthenticated(self, db_session, sample_category):
        result = budget_service.create_budget(db_session, None, budget_input(sample_category))
        assert result.error.kind == ErrorKind.unauthenticated
        assert result.error.detail == "Not authenticated"

    def test_store_failure_is_returned(self, db_session, user_id, sample_category, monkeypatch):
        """Writes report store errors instead of raising."""
        def broken_commit():
            raise SQLAlchemyError("disk full")

        monkeypatch.setattr(db_session, "commit", broken_commit)
        result = budget_service.create_budget(db_session, user_id, budget_input(sample_category))
        assert result.error.kind == ErrorKind.store_failure
        assert "disk full" in result.error.detail


class TestUpdateAndDeleteBudget:
    """Test ownership-scoped mutation."""

    def test_partial_update(self, db_session, user_id, sample_budget):
        result = budget_service.update_budget(
            db_session, user_id, sample_budget.id, BudgetUpdate(amount=Decimal("75.00"))
        )
        assert result.ok
        assert result.data.amount == Decimal("75.00")
        assert result.data.period == BudgetPeriod.monthly
        assert result.data.is_active is True

    def test_update_period_and_flag(self, db_session, user_id, sample_budget):
        result = budget_service.update_budget(
            db_session, user_id, sample_budget.id,
            BudgetUpdate(period=BudgetPeriod.yearly, is_active=False)
        )
        assert result.data.period == BudgetPeriod.yearly
        assert result.data.is_active is False

    def test_other_user_cannot_update(self, db_session, sample_budget):
        result = budget_service.update_budget(
            db_session, OTHER_USER_ID, sample_budget.id, BudgetUpdate(amount=Decimal("1"))
        )
        assert result.error.kind == ErrorKind.not_found

    def test_delete_keeps_transactions_and_category(self, db_session, user_id, sample_budget, sample_transaction, sample_category):
        result = budget_service.delete_budget(db_session, user_id, sample_budget.id)
        assert result.ok
        assert budget_service.get_budget(db_session, user_id, sample_budget.id) is None
        db_session.refresh(sample_transaction)
        assert sample_transaction.category_id == sample_category.id

    def test_other_user_cannot_delete(self, db_session, sample_budget):
        result = budget_service.delete_budget(db_session, OTHER_USER_ID, sample_budget.id)
        assert result.error.kind == ErrorKind.not_found
        assert db_session.query(Budget).count() == 1

    def test_unauthenticated_writes(self, db_session, sample_budget):
        assert budget_service.update_budget(db_session, None, sample_budget.id, BudgetUpdate()).error.kind == ErrorKind.unauthenticated
        assert budget_service.delete_budget(db_session, None, sample_budget.id).error.kind == ErrorKind.unauthenticated


class TestBudgetQueries:
    """Test budget listing and unbudgeted categories."""

    def test_active_only(self, db_session, user_id, sample_category):
        other = add_category(db_session, "Fuel")
        add_budget(db_session, sample_category, 100)
        add_budget(db_session, other, 100, is_active=False)

        assert len(budget_service.list_budgets(db_session, user_id)) == 2
        active = budget_service.list_budgets(db_session, user_id, active_only=True)
        assert [b.category.name for b in active] == ["Groceries"]

    def test_unbudgeted_categories(self, db_session, user_id, income_category):
        food = add_category(db_session, "Food")
        fuel = add_category(db_session, "Fuel")
        rent = add_category(db_session, "Rent")
        add_budget(db_session, food, 100)
        add_budget(db_session, fuel, 100, is_active=False)

        unbudgeted = budget_service.get_unbudgeted_categories(db_session, user_id)
        assert [c.id for c in unbudgeted] == [rent.id]

    def test_unbudgeted_ignores_other_users(self, db_session, user_id, sample_category):
        add_budget(db_session, add_category(db_session, "Theirs", user_id=OTHER_USER_ID), 5, user_id=OTHER_USER_ID)
        assert [c.id for c in budget_service.get_unbudgeted_categories(db_session, user_id)] == [sample_category.id]

    def test_no_user(self, db_session, sample_budget):
        assert budget_service.list_budgets(db_session, None) == []
        assert budget_service.get_unbudgeted_categories(db_session, None) == []

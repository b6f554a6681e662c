"""Tests for pfm.store.budgets BudgetManager."""

from decimal import Decimal

import pytest

from pfm.domain.errors import InvalidArgumentError
from pfm.domain.models import Money
from pfm.store.budgets import BudgetManager


def money(value: str) -> Money:
    return Money(Decimal(value))


class TestCreateBudget:
    """Tests for BudgetManager.create_budget."""

    def test_create(self) -> None:
        """Should register a fresh budget."""
        manager = BudgetManager()

        budget = manager.create_budget("Food", money("100"))

        assert manager.get_budget("Food") is budget
        assert budget.spent == 0

    @pytest.mark.parametrize("limit", ["0", "-50"])
    def test_rejects_non_positive_limit(self, limit: str) -> None:
        """Should raise and register nothing."""
        manager = BudgetManager()

        with pytest.raises(InvalidArgumentError):
            manager.create_budget("Food", money(limit))
        assert manager.get_all_budgets() == {}

    def test_recreate_resets_spend(self) -> None:
        """Should replace the existing budget with a zero-spent one."""
        manager = BudgetManager()
        manager.create_budget("Food", money("100"))
        manager.add_expense_to_budget("Food", money("60"))

        manager.create_budget("Food", money("200"))

        budget = manager.get_budget("Food")
        assert budget is not None
        assert budget.limit == Decimal("200")
        assert budget.spent == 0

    def test_invalid_recreate_keeps_existing(self) -> None:
        """Should not drop the old budget when the new limit is invalid."""
        manager = BudgetManager()
        original = manager.create_budget("Food", money("100"))

        with pytest.raises(InvalidArgumentError):
            manager.create_budget("Food", money("0"))
        assert manager.get_budget("Food") is original


class TestAddExpenseToBudget:
    """Tests for BudgetManager.add_expense_to_budget."""

    def test_food_scenario(self) -> None:
        """Should accept 60 then refuse 50 against a limit of 100."""
        manager = BudgetManager()
        manager.create_budget("Food", money("100"))

        assert manager.add_expense_to_budget("Food", money("60")) is True
        assert manager.add_expense_to_budget("Food", money("50")) is False
        assert manager.get_budget("Food").spent == Decimal("60")  # type: ignore[union-attr]

    def test_unknown_category(self) -> None:
        """Should return False when the category has no budget."""
        assert BudgetManager().add_expense_to_budget("Travel", money("10")) is False


class TestBudgetStatus:
    """Tests for BudgetManager.budget_status and get_all_budgets."""

    def test_status_text(self) -> None:
        """Should render the budget's status block."""
        manager = BudgetManager()
        manager.create_budget("Food", money("100"))
        manager.add_expense_to_budget("Food", money("25"))

        status = manager.budget_status("Food")

        assert status is not None
        assert "Spent: $25.00" in status
        assert "Utilization: 25.0000%" in status

    def test_unknown_category(self) -> None:
        """Should return None for a category without a budget."""
        assert BudgetManager().budget_status("Food") is None

    def test_get_all_budgets_is_a_copy(self) -> None:
        """Should not expose the internal registry."""
        manager = BudgetManager()
        manager.create_budget("Food", money("100"))

        budgets = manager.get_all_budgets()
        budgets.clear()

        assert manager.get_budget("Food") is not None

"""In-memory budget registry keyed by category."""

import logging

from pfm.domain.budget import Budget
from pfm.domain.models import CategoryName, Money
from pfm.domain.report import format_budget_status

logger = logging.getLogger(__name__)


class BudgetManager:
    """Registry of budgets for one session."""

    def __init__(self) -> None:
        self._budgets: dict[CategoryName, Budget] = {}

    def create_budget(self, category: str, limit: Money) -> Budget:
        """Create a budget, replacing any existing one for the category.

        Replacing resets the accumulated spend to zero.

        Args:
            category: Category name.
            limit: Spending cap, must be positive.

        Returns:
            The new budget.

        Raises:
            InvalidArgumentError: If limit is zero or negative.
        """
        key = CategoryName(category)
        budget = Budget(key, limit)
        if key in self._budgets:
            logger.info("Replacing budget for %s (spent %s discarded)", category, self._budgets[key].spent)
        self._budgets[key] = budget
        return budget

    def add_expense_to_budget(self, category: str, amount: Money) -> bool:
        """Record an expense against a category's budget.

        Returns:
            False if the category has no budget or the expense would exceed it.
        """
        budget = self._budgets.get(CategoryName(category))
        if budget is None:
            return False
        return budget.add_expense(amount)

    def get_budget(self, category: str) -> Budget | None:
        return self._budgets.get(CategoryName(category))

    def get_all_budgets(self) -> dict[CategoryName, Budget]:
        return dict(self._budgets)

    def budget_status(self, category: str, symbol: str = "$") -> str | None:
        """Formatted status for a category, or None if it has no budget."""
        budget = self._budgets.get(CategoryName(category))
        if budget is None:
            return None
        return format_budget_status(budget, symbol)

"""Budget entity for a single spending category.

A budget only tracks spend against a cap. It never touches an account
ledger. `spent` is changed in exactly one place, add_expense(), which refuses
any expense that would take spend above the limit.
"""

from decimal import Decimal

from pfm.domain.errors import InvalidAmountError, InvalidArgumentError
from pfm.domain.models import CategoryName, Money
from pfm.domain.money import PERCENT_SCALE, ZERO, divide, exact_context


class Budget:
    """Spending cap and cumulative spend for a category."""

    def __init__(self, category: CategoryName, limit: Money) -> None:
        if not Decimal(limit).is_finite() or not limit > 0:
            raise InvalidArgumentError("Budget limit must be positive")
        self.category = category
        self.limit = limit
        self._spent = ZERO

    def __repr__(self) -> str:
        return f"Budget({self.category!r}, limit={self.limit}, spent={self._spent})"

    @property
    def spent(self) -> Money:
        return self._spent

    def add_expense(self, amount: Money) -> bool:
        """Record an expense if it fits within the limit.

        Args:
            amount: Expense amount, must be positive.

        Returns:
            True if accepted, False if it would exceed the limit (nothing changes).

        Raises:
            InvalidAmountError: If amount is zero or negative.
        """
        if not Decimal(amount).is_finite() or not amount > 0:
            raise InvalidAmountError("Amount must be positive")

        with exact_context():
            new_spent = Money(self._spent + amount)
        if new_spent > self.limit:
            return False

        self._spent = new_spent
        return True

    @property
    def remaining(self) -> Money:
        with exact_context():
            return Money(self.limit - self._spent)

    @property
    def utilization(self) -> Decimal:
        """Percentage of the limit spent; spent / limit at 4 places, times 100."""
        with exact_context():
            return divide(self._spent, self.limit, PERCENT_SCALE) * 100

    @property
    def is_over_budget(self) -> bool:
        # Unreachable through add_expense, kept for report compatibility
        return self._spent > self.limit

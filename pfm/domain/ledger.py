"""Account ledger: balance plus append-only transaction history.

The balance is a cached value that always equals the net of the account's
transactions. It is only changed inside deposit() and withdraw(), together
with the history append.
"""

import itertools
import logging
from collections.abc import Iterable
from decimal import Decimal

from pfm.domain.errors import InvalidAmountError
from pfm.domain.models import (
    AccountNumber,
    AccountType,
    Description,
    Money,
    Transaction,
    TransactionType,
    interest_rate,
)
from pfm.domain.money import ZERO, exact_context

logger = logging.getLogger(__name__)

DEPOSIT_CATEGORY = "Deposit"
WITHDRAWAL_CATEGORY = "Withdrawal"

_transaction_ids = itertools.count(1)


def next_transaction_id() -> str:
    """Generate a transaction id, unique for the life of the process."""
    return f"TXN{next(_transaction_ids):08d}"


def _require_positive(amount: Money) -> None:
    if not Decimal(amount).is_finite() or not amount > 0:
        raise InvalidAmountError("Amount must be positive")


class Account:
    """A single account and its ledger."""

    def __init__(self, account_number: AccountNumber, account_type: AccountType) -> None:
        self.account_number = account_number
        self.account_type = account_type
        self._balance = ZERO
        self._history: list[Transaction] = []

    def __repr__(self) -> str:
        return f"Account({self.account_number!r}, {self.account_type!r}, balance={self._balance})"

    @property
    def balance(self) -> Money:
        return self._balance

    def deposit(self, amount: Money, description: Description) -> bool:
        """Add money to the account.

        Args:
            amount: Amount to deposit, must be positive.
            description: Free-text description for the history.

        Returns:
            Always True.

        Raises:
            InvalidAmountError: If amount is zero or negative.
        """
        _require_positive(amount)

        with exact_context():
            new_balance = Money(self._balance + amount)
        self._record(TransactionType.INCOME, amount, DEPOSIT_CATEGORY, description)
        self._balance = new_balance

        logger.debug("Deposited %s into %s", amount, self.account_number)
        return True

    def withdraw(self, amount: Money, description: Description) -> bool:
        """Take money out of the account if funds allow.

        Args:
            amount: Amount to withdraw, must be positive.
            description: Free-text description for the history.

        Returns:
            True if withdrawn, False on insufficient funds (nothing changes).

        Raises:
            InvalidAmountError: If amount is zero or negative.
        """
        _require_positive(amount)

        if self._balance < amount:
            logger.debug("Insufficient funds in %s for %s", self.account_number, amount)
            return False

        with exact_context():
            new_balance = Money(self._balance - amount)
        self._record(TransactionType.EXPENSE, amount, WITHDRAWAL_CATEGORY, description)
        self._balance = new_balance

        logger.debug("Withdrew %s from %s", amount, self.account_number)
        return True

    def calculate_interest(self) -> Money:
        """Projected annual interest on the current balance (never posted)."""
        with exact_context():
            return Money(self._balance * interest_rate(self.account_type))

    def transaction_history(self) -> tuple[Transaction, ...]:
        """Snapshot of the history, oldest first."""
        return tuple(self._history)

    def _record(self, kind: TransactionType, amount: Money, category: str, description: Description) -> None:
        self._history.append(
            Transaction(
                id=next_transaction_id(),
                type=kind,
                amount=amount,
                category=category,
                description=description,
            )
        )


def total_income(transactions: Iterable[Transaction]) -> Money:
    """Sum of all INCOME amounts."""
    with exact_context():
        return Money(sum((t.amount for t in transactions if t.type is TransactionType.INCOME), ZERO))


def total_expenses(transactions: Iterable[Transaction]) -> Money:
    """Sum of all EXPENSE amounts."""
    with exact_context():
        return Money(sum((t.amount for t in transactions if t.type is TransactionType.EXPENSE), ZERO))


def net_cash_flow(transactions: Iterable[Transaction]) -> Money:
    """Income minus expenses."""
    transactions = list(transactions)
    with exact_context():
        return Money(total_income(transactions) - total_expenses(transactions))

"""Domain type definitions for pfm.

These types provide semantic clarity and help with type checking:
- Money: Exact decimal amount (never a float)
- CategoryName: Name of a budget category
- AccountNumber: Registry key of an account, e.g. "ACC1000"
- Description: Free-text transaction description
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import ClassVar, NewType

from pfm.domain.errors import InvalidArgumentError

# Money amounts are Decimals so repeated compounding never drifts by a cent
Money = NewType("Money", Decimal)

CategoryName = NewType("CategoryName", str)

AccountNumber = NewType("AccountNumber", str)

Description = NewType("Description", str)


class TransactionType(Enum):
    """Kind of ledger entry."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    TRANSFER = "TRANSFER"


@dataclass(frozen=True)
class Transaction:
    """Immutable ledger entry."""

    id: str
    type: TransactionType
    amount: Money
    category: str
    description: Description
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class Savings:
    """Savings account, fixed 3% annual rate."""

    label: ClassVar[str] = "Savings"


@dataclass(frozen=True)
class Checking:
    """Checking account, fixed 1% annual rate."""

    label: ClassVar[str] = "Checking"


@dataclass(frozen=True)
class Investment:
    """Investment account with a user-supplied annual rate."""

    rate: Money
    label: ClassVar[str] = "Investment"

    def __post_init__(self) -> None:
        if self.rate < 0:
            raise InvalidArgumentError("Interest rate cannot be negative")


AccountType = Savings | Checking | Investment

SAVINGS_RATE = Money(Decimal("0.03"))
CHECKING_RATE = Money(Decimal("0.01"))


def interest_rate(account_type: AccountType) -> Money:
    """Get the annual interest rate for an account type.

    Args:
        account_type: Savings, Checking or Investment variant.

    Returns:
        Annual rate as a fraction (0.03 means 3%).
    """
    if isinstance(account_type, Investment):
        return account_type.rate
    if isinstance(account_type, Savings):
        return SAVINGS_RATE
    return CHECKING_RATE


def describe_account_type(account_type: AccountType) -> str:
    """Human-readable account type, e.g. "Investment (5.00%)"."""
    if isinstance(account_type, Investment):
        percent = account_type.rate * 100
        return f"{account_type.label} ({percent.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)}%)"
    return account_type.label

"""In-memory account registry.

FinanceManager owns every Account for the session, hands out account
numbers, tracks the current selection and composes transfers out of two
ledger operations. Nothing is persisted.
"""

import logging

from pfm.domain.ledger import Account, net_cash_flow, total_expenses, total_income
from pfm.domain.models import AccountNumber, AccountType, Description, Money, Transaction
from pfm.domain.money import ZERO, exact_context

logger = logging.getLogger(__name__)

FIRST_ACCOUNT_NUMBER = 1000


class FinanceManager:
    """Registry of accounts for one session."""

    def __init__(self, first_number: int = FIRST_ACCOUNT_NUMBER) -> None:
        self._accounts: dict[AccountNumber, Account] = {}
        self._current: AccountNumber | None = None
        self._next_number = first_number

    def _allocate_number(self) -> AccountNumber:
        number = AccountNumber(f"ACC{self._next_number}")
        self._next_number += 1
        return number

    def create_account(self, account_type: AccountType) -> Account:
        """Open a new account and make it the current selection.

        Args:
            account_type: Savings, Checking or Investment variant.

        Returns:
            The new account.
        """
        account = Account(self._allocate_number(), account_type)
        self._accounts[account.account_number] = account
        self._current = account.account_number
        logger.info("Created %s account %s", account_type.label, account.account_number)
        return account

    def select_account(self, account_number: str) -> bool:
        """Make an existing account current.

        Returns:
            True if found. On False the previous selection is kept.
        """
        if account_number not in self._accounts:
            return False
        self._current = AccountNumber(account_number)
        return True

    @property
    def current_account(self) -> Account | None:
        if self._current is None:
            return None
        return self._accounts.get(self._current)

    def get_account(self, account_number: str) -> Account | None:
        return self._accounts.get(AccountNumber(account_number))

    def get_all_accounts(self) -> list[Account]:
        return list(self._accounts.values())

    def delete_account(self, account_number: str) -> bool:
        """Remove an account whose balance is exactly zero.

        Returns:
            True if deleted, False if unknown or the balance is not zero.
        """
        account = self._accounts.get(AccountNumber(account_number))
        if account is None:
            return False
        if account.balance != 0:
            logger.info("Refusing to delete %s with balance %s", account_number, account.balance)
            return False

        del self._accounts[account.account_number]
        if self._current == account.account_number:
            self._current = None
        logger.info("Deleted account %s", account_number)
        return True

    def transfer(self, from_account: str, to_account: str, amount: Money) -> bool:
        """Move money between two accounts.

        The withdrawal leg runs first; the deposit only happens if it succeeds,
        so either both balances change or neither does.

        Args:
            from_account: Source account number.
            to_account: Destination account number.
            amount: Amount to move, must be positive.

        Returns:
            True if transferred, False if an account is unknown or funds are short.

        Raises:
            InvalidAmountError: If amount is zero or negative.
        """
        source = self._accounts.get(AccountNumber(from_account))
        target = self._accounts.get(AccountNumber(to_account))
        if source is None or target is None:
            return False

        if not source.withdraw(amount, Description(f"Transfer to {to_account}")):
            return False
        target.deposit(amount, Description(f"Transfer from {from_account}"))

        logger.info("Transferred %s from %s to %s", amount, from_account, to_account)
        return True

    def all_transactions(self) -> list[Transaction]:
        return [t for account in self._accounts.values() for t in account.transaction_history()]

    def total_balance(self) -> Money:
        with exact_context():
            return Money(sum((account.balance for account in self._accounts.values()), ZERO))

    def total_income(self) -> Money:
        return total_income(self.all_transactions())

    def total_expenses(self) -> Money:
        return total_expenses(self.all_transactions())

    def net_cash_flow(self) -> Money:
        return net_cash_flow(self.all_transactions())

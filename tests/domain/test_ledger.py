"""Tests for pfm.domain.ledger accounts and aggregations."""

import random
from decimal import Decimal

import pytest

from pfm.domain.errors import InvalidAmountError
from pfm.domain.ledger import Account, net_cash_flow, total_expenses, total_income
from pfm.domain.models import (
    AccountNumber,
    Checking,
    Description,
    Investment,
    Money,
    Savings,
    TransactionType,
)


def make_account(account_type=None) -> Account:
    return Account(AccountNumber("ACC1000"), account_type or Checking())


def ledger_net(account: Account) -> Decimal:
    history = account.transaction_history()
    income = sum((t.amount for t in history if t.type is TransactionType.INCOME), Decimal(0))
    expense = sum((t.amount for t in history if t.type is TransactionType.EXPENSE), Decimal(0))
    return income - expense


class TestDeposit:
    """Tests for Account.deposit."""

    def test_deposit_increases_balance(self) -> None:
        """Should add the amount and record an income transaction."""
        account = make_account()

        assert account.deposit(Money(Decimal("1000.00")), Description("Salary")) is True

        assert account.balance == Decimal("1000.00")
        (txn,) = account.transaction_history()
        assert txn.type is TransactionType.INCOME
        assert txn.amount == Decimal("1000.00")
        assert txn.category == "Deposit"
        assert txn.description == "Salary"

    @pytest.mark.parametrize("amount", ["0", "-5.00"])
    def test_rejects_non_positive_amount(self, amount: str) -> None:
        """Should raise and leave the ledger untouched."""
        account = make_account()

        with pytest.raises(InvalidAmountError, match="Amount must be positive"):
            account.deposit(Money(Decimal(amount)), Description("Bad"))

        assert account.balance == 0
        assert account.transaction_history() == ()

    def test_rejects_infinity(self) -> None:
        """Should refuse non-finite amounts."""
        account = make_account()

        with pytest.raises(InvalidAmountError):
            account.deposit(Money(Decimal("Infinity")), Description("Bad"))


class TestWithdraw:
    """Tests for Account.withdraw."""

    def test_withdraw_with_sufficient_funds(self) -> None:
        """Should subtract the amount and record an expense transaction."""
        account = make_account()
        account.deposit(Money(Decimal("300")), Description("Opening"))

        assert account.withdraw(Money(Decimal("120.50")), Description("Rent")) is True

        assert account.balance == Decimal("179.50")
        txn = account.transaction_history()[-1]
        assert txn.type is TransactionType.EXPENSE
        assert txn.category == "Withdrawal"

    def test_insufficient_funds(self) -> None:
        """Should return False with no mutation when the balance is too low."""
        account = make_account()
        account.deposit(Money(Decimal("300")), Description("Opening"))

        assert account.withdraw(Money(Decimal("500")), Description("Car")) is False

        assert account.balance == Decimal("300")
        assert len(account.transaction_history()) == 1

    def test_withdraw_entire_balance(self) -> None:
        """Should allow taking the balance down to exactly zero."""
        account = make_account()
        account.deposit(Money(Decimal("5.00")), Description("Opening"))

        assert account.withdraw(Money(Decimal("5.00")), Description("All")) is True
        assert account.balance == 0

    def test_rejects_non_positive_amount(self) -> None:
        """Should raise for zero before checking funds."""
        account = make_account()

        with pytest.raises(InvalidAmountError):
            account.withdraw(Money(Decimal("0")), Description("Bad"))


class TestCalculateInterest:
    """Tests for Account.calculate_interest."""

    def test_checking_interest(self) -> None:
        """Should project 1% of the balance for checking accounts."""
        account = make_account(Checking())
        account.deposit(Money(Decimal("1000.00")), Description("Salary"))

        assert account.calculate_interest() == Decimal("10.00")

    def test_savings_interest(self) -> None:
        """Should project 3% of the balance for savings accounts."""
        account = make_account(Savings())
        account.deposit(Money(Decimal("250")), Description("Gift"))

        assert account.calculate_interest() == Decimal("7.50")

    def test_investment_interest(self) -> None:
        """Should use the user-supplied rate for investment accounts."""
        account = make_account(Investment(Money(Decimal("0.075"))))
        account.deposit(Money(Decimal("2000")), Description("Seed"))

        assert account.calculate_interest() == Decimal("150")

    def test_interest_is_not_posted(self) -> None:
        """Should not change the balance or the history."""
        account = make_account(Savings())
        account.deposit(Money(Decimal("100")), Description("Gift"))

        account.calculate_interest()

        assert account.balance == Decimal("100")
        assert len(account.transaction_history()) == 1


class TestTransactionHistory:
    """Tests for Account.transaction_history."""

    def test_returns_chronological_snapshot(self) -> None:
        """Should list transactions oldest first."""
        account = make_account()
        account.deposit(Money(Decimal("10")), Description("first"))
        account.deposit(Money(Decimal("20")), Description("second"))

        history = account.transaction_history()

        assert [t.description for t in history] == ["first", "second"]

    def test_snapshot_is_detached(self) -> None:
        """Should not reflect later mutations or allow changes to the ledger."""
        account = make_account()
        account.deposit(Money(Decimal("10")), Description("first"))

        snapshot = account.transaction_history()
        account.deposit(Money(Decimal("20")), Description("second"))

        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)

    def test_repeated_reads_are_equal(self) -> None:
        """Should return equal sequences when nothing changed."""
        account = make_account()
        account.deposit(Money(Decimal("10")), Description("first"))

        assert account.transaction_history() == account.transaction_history()

    def test_transaction_ids_are_unique(self) -> None:
        """Should give every transaction its own id."""
        first = make_account()
        second = Account(AccountNumber("ACC1001"), Savings())
        for _ in range(50):
            first.deposit(Money(Decimal("1")), Description("tick"))
            second.deposit(Money(Decimal("1")), Description("tock"))

        ids = [t.id for t in first.transaction_history() + second.transaction_history()]

        assert len(set(ids)) == 100
        assert all(i.startswith("TXN") for i in ids)


class TestBalanceInvariant:
    """Balance always equals income minus expenses."""

    def test_random_operation_sequence(self) -> None:
        """Should hold after every accepted or refused operation."""
        rng = random.Random(1234)
        account = make_account()

        for _ in range(500):
            amount = Money(Decimal(rng.randint(1, 50000)) / 100)
            if rng.random() < 0.5:
                account.deposit(amount, Description("in"))
            else:
                account.withdraw(amount, Description("out"))

            assert account.balance >= 0
            assert account.balance == ledger_net(account)


class TestAggregations:
    """Tests for total_income, total_expenses and net_cash_flow."""

    def test_totals(self) -> None:
        """Should split income and expenses and net them."""
        account = make_account()
        account.deposit(Money(Decimal("100.10")), Description("a"))
        account.deposit(Money(Decimal("50.20")), Description("b"))
        account.withdraw(Money(Decimal("30.05")), Description("c"))
        history = account.transaction_history()

        assert total_income(history) == Decimal("150.30")
        assert total_expenses(history) == Decimal("30.05")
        assert net_cash_flow(history) == Decimal("120.25")

    def test_empty_history(self) -> None:
        """Should return zero for no transactions."""
        assert total_income([]) == 0
        assert total_expenses([]) == 0
        assert net_cash_flow([]) == 0

    def test_net_cash_flow_accepts_generator(self) -> None:
        """Should not exhaust a one-shot iterable before netting."""
        account = make_account()
        account.deposit(Money(Decimal("40")), Description("a"))
        account.withdraw(Money(Decimal("15")), Description("b"))

        assert net_cash_flow(t for t in account.transaction_history()) == Decimal("25")

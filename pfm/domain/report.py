"""Pure functions for report calculations and formatting.

This module contains the functional core for reporting operations:
- No I/O operations (no console, no files)
- No side effects
- Pure data transformations
- Easy to test

Figures are kept exact; rounding to 2 places happens in format_currency.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal

from pfm.domain.budget import Budget
from pfm.domain.ledger import Account, net_cash_flow, total_expenses, total_income
from pfm.domain.models import AccountNumber, Money, Transaction, describe_account_type
from pfm.domain.money import ZERO, exact_context, format_currency

RULE = "=" * 38
SEPARATOR = "-" * 35


@dataclass(frozen=True)
class FinancialSummary:
    """Immutable totals across every account."""

    total_balance: Money
    total_income: Money
    total_expenses: Money
    net_cash_flow: Money
    account_count: int
    transaction_count: int


@dataclass(frozen=True)
class AccountPerformance:
    """Immutable per-account figures."""

    account_number: AccountNumber
    account_type: str
    balance: Money
    transaction_count: int
    total_income: Money
    total_expenses: Money
    net_cash_flow: Money
    projected_interest: Money


@dataclass(frozen=True)
class BudgetLine:
    """Immutable snapshot of one budget."""

    category: str
    limit: Money
    spent: Money
    remaining: Money
    utilization: Decimal
    over_budget: bool


@dataclass(frozen=True)
class BudgetAnalysis:
    """Immutable budget analysis with overall totals."""

    budgets: list[BudgetLine]
    total_limit: Money
    total_spent: Money
    total_remaining: Money


def create_financial_summary(accounts: Sequence[Account]) -> FinancialSummary:
    """Aggregate balances and cash flow over all accounts.

    Args:
        accounts: Accounts to include.

    Returns:
        FinancialSummary over the union of all account histories.
    """
    transactions = [t for account in accounts for t in account.transaction_history()]
    with exact_context():
        total_balance = Money(sum((account.balance for account in accounts), ZERO))

    return FinancialSummary(
        total_balance=total_balance,
        total_income=total_income(transactions),
        total_expenses=total_expenses(transactions),
        net_cash_flow=net_cash_flow(transactions),
        account_count=len(accounts),
        transaction_count=len(transactions),
    )


def create_account_performance(account: Account) -> AccountPerformance:
    """Compute performance figures for a single account."""
    history = account.transaction_history()
    return AccountPerformance(
        account_number=account.account_number,
        account_type=describe_account_type(account.account_type),
        balance=account.balance,
        transaction_count=len(history),
        total_income=total_income(history),
        total_expenses=total_expenses(history),
        net_cash_flow=net_cash_flow(history),
        projected_interest=account.calculate_interest(),
    )


def create_budget_line(budget: Budget) -> BudgetLine:
    return BudgetLine(
        category=budget.category,
        limit=budget.limit,
        spent=budget.spent,
        remaining=budget.remaining,
        utilization=budget.utilization,
        over_budget=budget.is_over_budget,
    )


def create_budget_analysis(budgets: Iterable[Budget]) -> BudgetAnalysis:
    """Snapshot every budget and total the limits and spend.

    Args:
        budgets: Budgets to include, in display order.

    Returns:
        BudgetAnalysis with one line per budget and overall totals.
    """
    lines = [create_budget_line(budget) for budget in budgets]
    with exact_context():
        total_limit = Money(sum((line.limit for line in lines), ZERO))
        total_spent = Money(sum((line.spent for line in lines), ZERO))
        total_remaining = Money(total_limit - total_spent)

    return BudgetAnalysis(
        budgets=lines,
        total_limit=total_limit,
        total_spent=total_spent,
        total_remaining=total_remaining,
    )


def recent_transactions(history: Sequence[Transaction], limit: int) -> list[Transaction]:
    """Newest transactions first, at most `limit` of them."""
    if limit <= 0:
        return []
    return list(reversed(history))[:limit]


def format_financial_report(summary: FinancialSummary, symbol: str = "$") -> str:
    """Render the financial summary report."""
    return "\n".join(
        [
            "========== FINANCIAL REPORT ==========",
            f"Total Balance: {format_currency(summary.total_balance, symbol)}",
            f"Total Income: {format_currency(summary.total_income, symbol)}",
            f"Total Expenses: {format_currency(summary.total_expenses, symbol)}",
            f"Net Cash Flow: {format_currency(summary.net_cash_flow, symbol)}",
            f"Number of Accounts: {summary.account_count}",
            f"Number of Transactions: {summary.transaction_count}",
            RULE,
        ]
    )


def format_account_performance(performance: AccountPerformance, symbol: str = "$") -> str:
    """Render one account's block of the performance report."""
    return "\n".join(
        [
            f"Account: {performance.account_number} ({performance.account_type})",
            f"Current Balance: {format_currency(performance.balance, symbol)}",
            f"Total Transactions: {performance.transaction_count}",
            f"Total Income: {format_currency(performance.total_income, symbol)}",
            f"Total Expenses: {format_currency(performance.total_expenses, symbol)}",
            f"Net Cash Flow: {format_currency(performance.net_cash_flow, symbol)}",
            f"Projected Annual Interest: {format_currency(performance.projected_interest, symbol)}",
            SEPARATOR,
        ]
    )


def format_budget_status(budget: Budget, symbol: str = "$") -> str:
    """Render the status block for one budget."""
    line = create_budget_line(budget)
    status = "OVER BUDGET!" if line.over_budget else "Within Budget"
    return "\n".join(
        [
            f"Category: {line.category}",
            f"Limit: {format_currency(line.limit, symbol)}",
            f"Spent: {format_currency(line.spent, symbol)}",
            f"Remaining: {format_currency(line.remaining, symbol)}",
            f"Utilization: {line.utilization}%",
            f"Status: {status}",
        ]
    )


def format_budget_analysis(analysis: BudgetAnalysis, symbol: str = "$") -> str:
    """Render every budget followed by the overall summary."""
    lines: list[str] = []
    for line in analysis.budgets:
        status = "⚠ OVER BUDGET" if line.over_budget else "✓ On Track"
        lines.extend(
            [
                f"{line.category}: {status}",
                f"  Limit: {format_currency(line.limit, symbol)}",
                f"  Spent: {format_currency(line.spent, symbol)}",
                f"  Remaining: {format_currency(line.remaining, symbol)}",
                f"  Utilization: {line.utilization}%",
            ]
        )

    lines.extend(
        [
            SEPARATOR,
            "OVERALL BUDGET SUMMARY:",
            f"Total Budget Limit: {format_currency(analysis.total_limit, symbol)}",
            f"Total Spent: {format_currency(analysis.total_spent, symbol)}",
            f"Total Remaining: {format_currency(analysis.total_remaining, symbol)}",
        ]
    )
    return "\n".join(lines)


def format_transaction(transaction: Transaction, symbol: str = "$") -> str:
    """Render a transaction detail block."""
    return "\n".join(
        [
            f"Transaction #{transaction.id}",
            f"Type: {transaction.type.value}",
            f"Amount: {format_currency(transaction.amount, symbol)}",
            f"Category: {transaction.category}",
            f"Description: {transaction.description}",
            f"Date: {transaction.timestamp.strftime('%Y-%m-%d %H:%M')}",
        ]
    )

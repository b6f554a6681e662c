"""Transactions menu for the current account: deposit, withdraw, transfer, history."""

from rich.markup import escape
from rich.table import Table

from pfm.commands.common import (
    Session,
    console,
    dispatch,
    print_success,
    prompt_positive_money,
    prompt_text,
    show_menu,
)
from pfm.domain.ledger import Account
from pfm.domain.models import Description, Money, TransactionType
from pfm.domain.report import recent_transactions

TRANSACTION_MENU = [
    "Deposit",
    "Withdraw",
    "Transfer",
    "View Transaction History",
    "Back to Main Menu",
]


def deposit(session: Session, account: Account) -> None:
    amount = prompt_positive_money("Enter amount to deposit")
    if amount is None:
        return
    description = prompt_text("Enter description", default="Deposit")

    account.deposit(Money(amount), Description(description))
    print_success(f"Deposited {session.money(amount)} successfully!")
    console.print(f"New balance: {session.money(account.balance)}")


def withdraw(session: Session, account: Account) -> None:
    amount = prompt_positive_money("Enter amount to withdraw")
    if amount is None:
        return
    description = prompt_text("Enter description", default="Withdrawal")

    if account.withdraw(Money(amount), Description(description)):
        print_success(f"Withdrew {session.money(amount)} successfully!")
        console.print(f"New balance: {session.money(account.balance)}")
    else:
        console.print("[red]Insufficient funds![/red]")


def transfer(session: Session) -> None:
    from_account = prompt_text("Enter source account number")
    to_account = prompt_text("Enter destination account number")
    amount = prompt_positive_money("Enter amount to transfer")
    if amount is None:
        return

    if session.finance.transfer(from_account, to_account, Money(amount)):
        print_success("Transfer completed successfully!")
    else:
        console.print("[red]Transfer failed. Check account numbers and balance.[/red]")


def view_transaction_history(session: Session, account: Account) -> None:
    history = account.transaction_history()
    if not history:
        console.print("[yellow]No transactions found.[/yellow]")
        return

    recent = recent_transactions(history, session.settings.history_limit)
    table = Table(title=f"Transaction History ({len(recent)} of {len(history)}, newest first)")
    table.add_column("ID", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Type")
    table.add_column("Category", style="magenta")
    table.add_column("Description", style="white")
    table.add_column("Amount", justify="right")

    for txn in recent:
        if txn.type is TransactionType.EXPENSE:
            amount_display = f"[red]-{session.money(txn.amount)}[/red]"
        else:
            amount_display = f"[green]+{session.money(txn.amount)}[/green]"
        table.add_row(
            txn.id,
            txn.timestamp.strftime("%Y-%m-%d %H:%M"),
            txn.type.value,
            txn.category,
            escape(txn.description),
            amount_display,
        )

    console.print(table)


def transaction_menu(session: Session) -> None:
    """Show the transactions menu for the current account once."""
    account = session.finance.current_account
    if account is None:
        console.print("[yellow]Please select an account first![/yellow]")
        return

    console.print(f"\nCurrent Account: [bold]{account.account_number}[/bold]")
    console.print(f"Balance: {session.money(account.balance)}")
    choice = show_menu("TRANSACTIONS", TRANSACTION_MENU)
    dispatch(
        session,
        choice,
        {
            "1": lambda s: deposit(s, account),
            "2": lambda s: withdraw(s, account),
            "3": transfer,
            "4": lambda s: view_transaction_history(s, account),
        },
        back="5",
    )

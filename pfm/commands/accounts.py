"""Account management menu: create, list, select, delete, inspect."""

from rich.markup import escape
from rich.table import Table

from pfm.commands.common import (
    Session,
    console,
    dispatch,
    print_success,
    prompt_money,
    prompt_text,
    show_menu,
)
from pfm.domain.models import AccountType, Checking, Investment, Money, Savings, describe_account_type

ACCOUNT_MENU = [
    "Create New Account",
    "View All Accounts",
    "Select Account",
    "Delete Account",
    "View Current Account Details",
    "Back to Main Menu",
]


def choose_account_type() -> AccountType | None:
    """Ask which kind of account to open.

    Returns:
        The chosen type, Checking for an unknown choice, or None if the
        investment rate could not be parsed.
    """
    console.print("Select Account Type:")
    console.print("1. Savings (3% interest)")
    console.print("2. Checking (1% interest)")
    console.print("3. Investment (Custom interest)")
    choice = prompt_text("Account type", default="")

    if choice == "1":
        return Savings()
    if choice == "2":
        return Checking()
    if choice == "3":
        rate = prompt_money("Enter annual interest rate (e.g., 0.05 for 5%)")
        if rate is None:
            return None
        return Investment(Money(rate))

    console.print("[yellow]Invalid type. Creating Checking account by default.[/yellow]")
    return Checking()


def create_account(session: Session) -> None:
    account_type = choose_account_type()
    if account_type is None:
        return

    account = session.finance.create_account(account_type)
    print_success("Account created successfully!")
    console.print(f"Account Number: [bold]{account.account_number}[/bold]")
    console.print(f"Type: {describe_account_type(account.account_type)}")


def view_all_accounts(session: Session) -> None:
    accounts = session.finance.get_all_accounts()
    if not accounts:
        console.print("[yellow]No accounts found. Create one first![/yellow]")
        return

    current = session.finance.current_account
    table = Table(title="All Accounts")
    table.add_column("Account", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Balance", justify="right")
    table.add_column("Current", justify="center")

    for account in accounts:
        marker = "●" if account is current else ""
        table.add_row(
            account.account_number,
            describe_account_type(account.account_type),
            session.money(account.balance),
            marker,
        )

    console.print(table)


def select_account(session: Session) -> None:
    account_number = prompt_text("Enter account number")
    if session.finance.select_account(account_number):
        print_success(f"Account {account_number} selected.")
    else:
        console.print("[red]Account not found.[/red]")


def delete_account(session: Session) -> None:
    account_number = prompt_text("Enter account number to delete")
    if session.finance.delete_account(account_number):
        print_success("Account deleted successfully.")
    else:
        console.print("[red]Cannot delete account. Either it doesn't exist or has non-zero balance.[/red]")


def view_current_account(session: Session) -> None:
    account = session.finance.current_account
    if account is None:
        console.print("[yellow]No account selected. Please select an account first.[/yellow]")
        return

    console.print("[bold]========== ACCOUNT DETAILS ==========[/bold]")
    console.print(f"Account Number: {escape(account.account_number)}")
    console.print(f"Type: {describe_account_type(account.account_type)}")
    console.print(f"Balance: {session.money(account.balance)}")
    console.print(f"Estimated Annual Interest: {session.money(account.calculate_interest())}")


def account_menu(session: Session) -> None:
    """Show the account management menu once and run the chosen action."""
    choice = show_menu("ACCOUNT MANAGEMENT", ACCOUNT_MENU)
    dispatch(
        session,
        choice,
        {
            "1": create_account,
            "2": view_all_accounts,
            "3": select_account,
            "4": delete_account,
            "5": view_current_account,
        },
        back="6",
    )

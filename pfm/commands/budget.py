"""Budget management menu for category spending caps."""

from rich.markup import escape

from pfm.commands.common import (
    Session,
    console,
    dispatch,
    print_block,
    print_success,
    prompt_positive_money,
    prompt_text,
    show_menu,
)
from pfm.domain.models import Money

BUDGET_MENU = [
    "Create Budget",
    "Add Expense to Budget",
    "View Budget Status",
    "View All Budgets",
    "Back to Main Menu",
]


def create_budget(session: Session) -> None:
    category = prompt_text("Enter budget category (e.g., Food, Transport)")
    limit = prompt_positive_money("Enter budget limit")
    if limit is None:
        return

    replacing = session.budgets.get_budget(category) is not None
    session.budgets.create_budget(category, Money(limit))
    print_success(f"Budget for '{category}' created with limit {session.money(limit)}")
    if replacing:
        console.print("[dim]Previous budget for this category was replaced[/dim]")


def add_expense_to_budget(session: Session) -> None:
    category = prompt_text("Enter budget category")
    amount = prompt_positive_money("Enter expense amount")
    if amount is None:
        return

    if session.budgets.add_expense_to_budget(category, Money(amount)):
        print_success("Expense added to budget.")
    else:
        console.print("[red]Budget not found or expense exceeds limit![/red]")


def view_budget_status(session: Session) -> None:
    category = prompt_text("Enter budget category")
    status = session.budgets.budget_status(category, session.settings.currency_symbol)
    if status is None:
        console.print(f"[yellow]Budget not found for '{escape(category)}'.[/yellow]")
        return

    console.print()
    print_block(status)


def view_all_budgets(session: Session) -> None:
    budgets = session.budgets.get_all_budgets()
    if not budgets:
        console.print("[yellow]No budgets found.[/yellow]")
        return

    console.print("\n[bold]========== ALL BUDGETS ==========[/bold]")
    for category in budgets:
        status = session.budgets.budget_status(category, session.settings.currency_symbol)
        if status is not None:
            print_block(status)
        console.print("-" * 35, style="dim")


def budget_menu(session: Session) -> None:
    """Show the budget management menu once and run the chosen action."""
    choice = show_menu("BUDGET MANAGEMENT", BUDGET_MENU)
    dispatch(
        session,
        choice,
        {
            "1": create_budget,
            "2": add_expense_to_budget,
            "3": view_budget_status,
            "4": view_all_budgets,
        },
        back="5",
    )

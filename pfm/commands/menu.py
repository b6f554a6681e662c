"""Interactive main menu loop."""

import logging

from pfm.commands.accounts import account_menu
from pfm.commands.budget import budget_menu
from pfm.commands.calculators import calculator_menu
from pfm.commands.common import MenuHandler, Session, console, print_error, show_menu
from pfm.commands.report import report_menu
from pfm.commands.transactions import transaction_menu
from pfm.config import Settings
from pfm.domain.errors import PfmError

logger = logging.getLogger(__name__)

MAIN_MENU = [
    "Account Management",
    "Transactions",
    "Budget Management",
    "Financial Calculators",
    "Reports & Analytics",
    "Exit",
]

EXIT_CHOICE = "6"

HANDLERS: dict[str, MenuHandler] = {
    "1": account_menu,
    "2": transaction_menu,
    "3": budget_menu,
    "4": calculator_menu,
    "5": report_menu,
}


def run_menu(session: Session) -> None:
    """Loop over the main menu until the user exits.

    Validation errors from the core are reported and the loop carries on;
    the failed action has no partial effect.
    """
    console.print("[bold cyan]===================================[/bold cyan]")
    console.print("[bold cyan]   PERSONAL FINANCE MANAGER CLI[/bold cyan]")
    console.print("[bold cyan]===================================[/bold cyan]")
    console.print("[dim]Session data is kept in memory and lost on exit[/dim]")

    while True:
        choice = show_menu("MAIN MENU", MAIN_MENU)
        if choice == EXIT_CHOICE:
            console.print("[green]Thank you for using Personal Finance Manager![/green]")
            return

        handler = HANDLERS.get(choice)
        if handler is None:
            console.print("[red]Invalid option. Please try again.[/red]")
            continue

        try:
            handler(session)
        except PfmError as e:
            logger.debug("Menu action failed: %s", e)
            print_error(str(e))


def menu_command(settings: Settings) -> None:
    """Start an interactive session."""
    run_menu(Session(settings=settings))

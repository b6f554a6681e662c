"""Shared helpers for the interactive commands: session state, prompts, output."""

from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

import typer
from rich.console import Console
from rich.markup import escape

from pfm.config import Settings
from pfm.domain.money import format_currency
from pfm.store import BudgetManager, FinanceManager

console = Console()

MenuHandler = Callable[["Session"], None]


@dataclass
class Session:
    """Everything one interactive run works against. Lost on exit."""

    settings: Settings = field(default_factory=Settings)
    finance: FinanceManager = field(default_factory=FinanceManager)
    budgets: BudgetManager = field(default_factory=BudgetManager)

    def money(self, amount: Decimal) -> str:
        """Format an amount with the configured currency symbol."""
        return format_currency(amount, self.settings.currency_symbol)


def parse_money(amount_str: str) -> Decimal | None:
    """Parse a user-entered number into an exact Decimal.

    Args:
        amount_str: Text such as "1200.50".

    Returns:
        Decimal value, or None if the text is not a finite number.
    """
    try:
        value = Decimal(amount_str.strip().replace(",", ""))
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def parse_int(value_str: str) -> int | None:
    """Parse a user-entered whole number, or None if invalid."""
    try:
        return int(value_str.strip())
    except ValueError:
        return None


def prompt_text(prompt: str, default: str | None = None) -> str:
    """Prompt for free text, stripped of surrounding whitespace."""
    result: str = typer.prompt(prompt, type=str, default=default, show_default=False)
    return result.strip()


def prompt_money(prompt: str) -> Decimal | None:
    """Prompt for a number.

    Returns:
        Parsed Decimal, or None (after printing a message) if invalid.
    """
    result = parse_money(prompt_text(prompt))
    if result is None:
        console.print("[red]Invalid amount.[/red]")
    return result


def prompt_positive_money(prompt: str) -> Decimal | None:
    """Prompt for an amount that must be greater than zero."""
    result = prompt_money(prompt)
    if result is not None and result <= 0:
        console.print("[red]Invalid amount.[/red]")
        return None
    return result


def prompt_int(prompt: str, default: int | None = None) -> int | None:
    """Prompt for a whole number.

    Returns:
        Parsed int, the default on empty input, or None if invalid.
    """
    text = prompt_text(prompt, default="" if default is not None else None)
    if not text and default is not None:
        return default
    result = parse_int(text)
    if result is None:
        console.print("[red]Invalid number.[/red]")
    return result


def show_menu(title: str, options: list[str]) -> str:
    """Print a numbered menu and read the user's choice."""
    console.print()
    console.print(f"[bold]========== {title} ==========[/bold]")
    for idx, option in enumerate(options, 1):
        console.print(f"{idx}. {option}")
    return prompt_text("Select an option", default="")


def dispatch(session: Session, choice: str, handlers: dict[str, MenuHandler], back: str) -> None:
    """Run the handler for a submenu choice, or complain about it."""
    if choice == back:
        return
    handler = handlers.get(choice)
    if handler is None:
        console.print("[red]Invalid option.[/red]")
        return
    handler(session)


def print_success(message: str) -> None:
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    console.print(f"[red]Error: {escape(message)}[/red]")


def print_block(text: str) -> None:
    """Print a pre-formatted report block without markup processing."""
    console.print(text, markup=False, highlight=False)

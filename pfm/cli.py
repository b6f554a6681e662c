"""CLI entry point for pfm."""

import sys
import tomllib

import typer
from rich.console import Console

from pfm.commands.admin import init_command
from pfm.commands.calculators import compound_command, invest_command, loan_command
from pfm.commands.menu import menu_command
from pfm.config import Settings, configure_logging, load_settings
from pfm.domain.errors import ConfigError

console = Console()

app = typer.Typer(
    name="pfm",
    help="Personal Finance Manager - accounts, budgets and money calculators",
    add_completion=False,
)


def _settings(ctx: typer.Context) -> Settings:
    settings: Settings = ctx.obj
    return settings


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Personal Finance Manager - accounts, budgets and money calculators."""
    # init must work even when the existing config is broken
    if ctx.invoked_subcommand == "init":
        configure_logging("DEBUG" if verbose else Settings().log_level)
        return

    try:
        settings = load_settings()
    except (tomllib.TOMLDecodeError, ConfigError) as e:
        console.print(f"[red]Config error: {e}[/red]", style="bold")
        sys.exit(1)

    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the pfm config file."""
    init_command(force)


@app.command()
def menu(ctx: typer.Context) -> None:
    """Start the interactive finance manager (data lasts for the session only)."""
    menu_command(_settings(ctx))


@app.command()
def loan(
    ctx: typer.Context,
    principal: str = typer.Argument(..., help="Loan amount"),
    rate: str = typer.Argument(..., help="Annual interest rate, e.g. 0.05 for 5%"),
    years: int = typer.Argument(..., help="Loan term in years"),
) -> None:
    """Calculate the monthly payment and total interest for a loan."""
    loan_command(principal, rate, years, _settings(ctx))


@app.command()
def invest(
    ctx: typer.Context,
    principal: str = typer.Argument(..., help="Initial investment"),
    rate: str = typer.Argument(..., help="Expected annual return, e.g. 0.07 for 7%"),
    years: int = typer.Argument(..., help="Investment period in years"),
    monthly: str = typer.Option("0", "--monthly", "-m", help="Monthly contribution"),
) -> None:
    """Project the future value of an investment."""
    invest_command(principal, rate, years, monthly, _settings(ctx))


@app.command()
def compound(
    ctx: typer.Context,
    principal: str = typer.Argument(..., help="Principal amount"),
    rate: str = typer.Argument(..., help="Annual interest rate, e.g. 0.05 for 5%"),
    years: int = typer.Argument(..., help="Time period in years"),
    frequency: int = typer.Option(12, "--frequency", "-n", help="Compounding periods per year"),
) -> None:
    """Calculate compound interest on a principal."""
    compound_command(principal, rate, years, frequency, _settings(ctx))


if __name__ == "__main__":
    app()

"""Financial calculators: interactive prompts and one-shot commands."""

import sys
from decimal import Decimal

from pfm.commands.common import (
    Session,
    console,
    dispatch,
    parse_money,
    prompt_int,
    prompt_money,
    show_menu,
)
from pfm.config import Settings
from pfm.domain.calculators import (
    CompoundInterestResult,
    InvestmentProjection,
    LoanSummary,
    project_investment,
    summarize_compound_interest,
    summarize_loan,
)
from pfm.domain.errors import PfmError
from pfm.domain.models import Money
from pfm.domain.money import ZERO, format_currency

CALCULATOR_MENU = [
    "Loan Payment Calculator",
    "Investment Future Value Calculator",
    "Compound Interest Calculator",
    "Back to Main Menu",
]


def format_percent(rate: Decimal) -> str:
    """Render an annual rate fraction as a percentage, e.g. 0.065 -> "6.5%"."""
    percent = (rate * 100).normalize()
    # normalize() turns 100 into 1E+2
    return f"{percent:f}%"


def display_loan_summary(summary: LoanSummary, symbol: str = "$") -> None:
    console.print("\n[bold]========== LOAN CALCULATION RESULTS ==========[/bold]")
    console.print(f"Principal: {format_currency(summary.principal, symbol)}")
    console.print(f"Annual Rate: {format_percent(summary.annual_rate)}")
    console.print(f"Term: {summary.years} years")
    console.print(f"Monthly Payment: [bold green]{format_currency(summary.monthly_payment, symbol)}[/bold green]")
    console.print(f"Total Interest: {format_currency(summary.total_interest, symbol)}")
    console.print(f"Total Payment: {format_currency(summary.total_payment, symbol)}")


def display_investment_projection(projection: InvestmentProjection, symbol: str = "$") -> None:
    console.print("\n[bold]========== INVESTMENT PROJECTION ==========[/bold]")
    console.print(f"Initial Investment: {format_currency(projection.principal, symbol)}")
    console.print(f"Monthly Contribution: {format_currency(projection.monthly_contribution, symbol)}")
    console.print(f"Annual Return: {format_percent(projection.annual_rate)}")
    console.print(f"Time Period: {projection.years} years")
    console.print()
    console.print(f"Total Contributions: {format_currency(projection.total_contributions, symbol)}")
    console.print(f"Total Earnings: {format_currency(projection.total_earnings, symbol)}")
    console.print(f"Future Value: [bold green]{format_currency(projection.future_value, symbol)}[/bold green]")


def display_compound_result(result: CompoundInterestResult, symbol: str = "$") -> None:
    console.print("\n[bold]========== COMPOUND INTEREST RESULTS ==========[/bold]")
    console.print(f"Principal: {format_currency(result.principal, symbol)}")
    console.print(f"Rate: {format_percent(result.annual_rate)} per year")
    console.print(f"Time: {result.years} years")
    console.print(f"Compounding: {result.compound_frequency} times per year")
    console.print()
    console.print(f"Interest Earned: {format_currency(result.interest_earned, symbol)}")
    console.print(f"Final Amount: [bold green]{format_currency(result.final_amount, symbol)}[/bold green]")


def loan_calculator(session: Session) -> None:
    principal = prompt_money("Enter loan principal")
    if principal is None:
        return
    rate = prompt_money("Enter annual interest rate (e.g., 0.05 for 5%)")
    if rate is None:
        return
    years = prompt_int("Enter loan term in years")
    if years is None:
        return

    summary = summarize_loan(Money(principal), rate, years)
    display_loan_summary(summary, session.settings.currency_symbol)


def investment_calculator(session: Session) -> None:
    principal = prompt_money("Enter initial investment")
    if principal is None:
        return
    rate = prompt_money("Enter expected annual return rate (e.g., 0.07 for 7%)")
    if rate is None:
        return
    years = prompt_int("Enter investment period in years")
    if years is None:
        return
    monthly = prompt_money("Enter monthly contribution (0 for none)")
    if monthly is None:
        return

    projection = project_investment(Money(principal), rate, years, Money(monthly))
    display_investment_projection(projection, session.settings.currency_symbol)


def compound_interest_calculator(session: Session) -> None:
    principal = prompt_money("Enter principal amount")
    if principal is None:
        return
    rate = prompt_money("Enter annual interest rate (e.g., 0.05 for 5%)")
    if rate is None:
        return
    years = prompt_int("Enter time period in years")
    if years is None:
        return
    frequency = prompt_int("Enter compound frequency per year (12 for monthly)", default=12)
    if frequency is None:
        return

    result = summarize_compound_interest(Money(principal), rate, years, frequency)
    display_compound_result(result, session.settings.currency_symbol)


def calculator_menu(session: Session) -> None:
    """Show the calculators menu once and run the chosen calculator."""
    choice = show_menu("FINANCIAL CALCULATORS", CALCULATOR_MENU)
    dispatch(
        session,
        choice,
        {
            "1": loan_calculator,
            "2": investment_calculator,
            "3": compound_interest_calculator,
        },
        back="4",
    )


def _parse_or_exit(value: str, name: str) -> Decimal:
    parsed = parse_money(value)
    if parsed is None:
        console.print(f"[red]Invalid {name}: {value}[/red]", style="bold")
        sys.exit(1)
    return parsed


def loan_command(principal: str, rate: str, years: int, settings: Settings) -> None:
    """Print monthly payment and totals for a loan."""
    try:
        summary = summarize_loan(Money(_parse_or_exit(principal, "principal")), _parse_or_exit(rate, "rate"), years)
    except PfmError as e:
        console.print(f"[red]Error: {e}[/red]", style="bold")
        sys.exit(1)
    display_loan_summary(summary, settings.currency_symbol)


def invest_command(principal: str, rate: str, years: int, monthly: str, settings: Settings) -> None:
    """Print the future value of an investment with monthly contributions."""
    contribution = _parse_or_exit(monthly, "monthly contribution") if monthly else ZERO
    try:
        projection = project_investment(
            Money(_parse_or_exit(principal, "principal")),
            _parse_or_exit(rate, "rate"),
            years,
            Money(contribution),
        )
    except PfmError as e:
        console.print(f"[red]Error: {e}[/red]", style="bold")
        sys.exit(1)
    display_investment_projection(projection, settings.currency_symbol)


def compound_command(principal: str, rate: str, years: int, frequency: int, settings: Settings) -> None:
    """Print the result of compounding a principal."""
    try:
        result = summarize_compound_interest(
            Money(_parse_or_exit(principal, "principal")),
            _parse_or_exit(rate, "rate"),
            years,
            frequency,
        )
    except PfmError as e:
        console.print(f"[red]Error: {e}[/red]", style="bold")
        sys.exit(1)
    display_compound_result(result, settings.currency_symbol)

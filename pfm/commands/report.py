"""Reports menu: financial summary, account performance, budget analysis."""

from pfm.commands.common import Session, console, dispatch, print_block, show_menu
from pfm.domain.report import (
    create_account_performance,
    create_budget_analysis,
    create_financial_summary,
    format_account_performance,
    format_budget_analysis,
    format_financial_report,
)

REPORT_MENU = [
    "Financial Summary Report",
    "Account Performance",
    "Budget Analysis",
    "Back to Main Menu",
]


def financial_summary_report(session: Session) -> None:
    summary = create_financial_summary(session.finance.get_all_accounts())
    console.print()
    print_block(format_financial_report(summary, session.settings.currency_symbol))


def account_performance_report(session: Session) -> None:
    accounts = session.finance.get_all_accounts()
    if not accounts:
        console.print("[yellow]No accounts found.[/yellow]")
        return

    console.print("\n[bold]========== ACCOUNT PERFORMANCE ==========[/bold]")
    for account in accounts:
        performance = create_account_performance(account)
        print_block(format_account_performance(performance, session.settings.currency_symbol))


def budget_analysis_report(session: Session) -> None:
    budgets = session.budgets.get_all_budgets()
    if not budgets:
        console.print("[yellow]No budgets found.[/yellow]")
        return

    console.print("\n[bold]========== BUDGET ANALYSIS ==========[/bold]")
    analysis = create_budget_analysis(budgets.values())
    print_block(format_budget_analysis(analysis, session.settings.currency_symbol))


def report_menu(session: Session) -> None:
    """Show the reports menu once and print the chosen report."""
    choice = show_menu("REPORTS & ANALYTICS", REPORT_MENU)
    dispatch(
        session,
        choice,
        {
            "1": financial_summary_report,
            "2": account_performance_report,
            "3": budget_analysis_report,
        },
        back="4",
    )

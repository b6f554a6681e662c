"""Pure functions for time-value-of-money calculations.

This module contains the functional core for the calculators:
- No I/O operations (no console, no files)
- No side effects
- Pure data transformations
- Easy to test

Rates are annual fractions (0.05 means 5%). Per-period rates are rounded to
6 places before use. Compounding is done by repeated exact multiplication and
the result is rounded to 2 places only at the very end.
"""

from dataclasses import dataclass
from decimal import Decimal

from pfm.domain.errors import InvalidArgumentError
from pfm.domain.models import Money
from pfm.domain.money import MONEY_SCALE, ZERO, divide, exact_context, round_money, round_rate

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class LoanSummary:
    """Immutable loan calculation result."""

    principal: Money
    annual_rate: Decimal
    years: int
    monthly_payment: Money
    total_interest: Money
    total_payment: Money


@dataclass(frozen=True)
class InvestmentProjection:
    """Immutable investment projection."""

    principal: Money
    annual_rate: Decimal
    years: int
    monthly_contribution: Money
    total_contributions: Money
    total_earnings: Money
    future_value: Money


@dataclass(frozen=True)
class CompoundInterestResult:
    """Immutable compound interest result."""

    principal: Money
    annual_rate: Decimal
    years: int
    compound_frequency: int
    interest_earned: Money
    final_amount: Money


def _check_years(years: int, allow_zero: bool = True) -> None:
    if years < 0 or (years == 0 and not allow_zero):
        raise InvalidArgumentError("Number of years must be positive")


def calculate_monthly_payment(principal: Money, annual_rate: Decimal, years: int) -> Money:
    """Calculate the fixed monthly payment that retires a loan.

    Standard amortization: P * r * (1+r)^n / ((1+r)^n - 1), with a plain
    P / n split when the monthly rate rounds to zero.

    Args:
        principal: Loan amount.
        annual_rate: Annual interest rate as a fraction.
        years: Loan term in years.

    Returns:
        Monthly payment rounded to 2 places.

    Raises:
        InvalidArgumentError: If years is not positive.
    """
    _check_years(years, allow_zero=False)
    monthly_rate = round_rate(annual_rate, MONTHS_PER_YEAR)
    payments = years * MONTHS_PER_YEAR

    if monthly_rate == 0:
        return Money(divide(principal, payments, MONEY_SCALE))

    with exact_context():
        growth = 1 + monthly_rate
        factor = Decimal(1)
        for _ in range(payments):
            factor *= growth
        numerator = principal * monthly_rate * factor
        denominator = factor - 1

    return Money(divide(numerator, denominator, MONEY_SCALE))


def calculate_total_interest(principal: Money, monthly_payment: Money, years: int) -> Money:
    """Interest paid over the life of the loan.

    Args:
        principal: Loan amount.
        monthly_payment: Payment from calculate_monthly_payment.
        years: Loan term in years.

    Returns:
        Total of all payments minus the principal (not rounded).
    """
    with exact_context():
        return Money(monthly_payment * (years * MONTHS_PER_YEAR) - principal)


def calculate_future_value(
    principal: Money,
    annual_rate: Decimal,
    years: int,
    monthly_contribution: Money = ZERO,
) -> Money:
    """Simulate monthly growth with a contribution added before each month's growth.

    Args:
        principal: Starting balance.
        annual_rate: Expected annual return as a fraction.
        years: Investment period in years.
        monthly_contribution: Amount added at the start of every month.

    Returns:
        Final value rounded to 2 places.

    Raises:
        InvalidArgumentError: If years is negative.
    """
    _check_years(years)
    monthly_rate = round_rate(annual_rate, MONTHS_PER_YEAR)

    with exact_context():
        growth = 1 + monthly_rate
        value = Decimal(principal)
        for _ in range(years * MONTHS_PER_YEAR):
            value = (value + monthly_contribution) * growth

    return round_money(value)


def calculate_compound_interest(
    principal: Money,
    annual_rate: Decimal,
    years: int,
    compound_frequency: int = MONTHS_PER_YEAR,
) -> Money:
    """Grow a principal with periodic compounding.

    Args:
        principal: Starting amount.
        annual_rate: Annual interest rate as a fraction.
        years: Time period in years.
        compound_frequency: Compounding periods per year.

    Returns:
        Final amount rounded to 2 places.

    Raises:
        InvalidArgumentError: If frequency is not positive or years is negative.
    """
    if compound_frequency <= 0:
        raise InvalidArgumentError("Compound frequency must be positive")
    _check_years(years)
    rate = round_rate(annual_rate, compound_frequency)

    with exact_context():
        growth = 1 + rate
        result = Decimal(principal)
        for _ in range(compound_frequency * years):
            result *= growth

    return round_money(result)


def summarize_loan(principal: Money, annual_rate: Decimal, years: int) -> LoanSummary:
    """Compute monthly payment, total interest and total paid for a loan."""
    monthly_payment = calculate_monthly_payment(principal, annual_rate, years)
    total_interest = calculate_total_interest(principal, monthly_payment, years)
    with exact_context():
        total_payment = Money(monthly_payment * (years * MONTHS_PER_YEAR))

    return LoanSummary(
        principal=principal,
        annual_rate=annual_rate,
        years=years,
        monthly_payment=monthly_payment,
        total_interest=total_interest,
        total_payment=total_payment,
    )


def project_investment(
    principal: Money,
    annual_rate: Decimal,
    years: int,
    monthly_contribution: Money = ZERO,
) -> InvestmentProjection:
    """Compute future value plus how much of it is contributions vs earnings."""
    future_value = calculate_future_value(principal, annual_rate, years, monthly_contribution)
    with exact_context():
        total_contributions = Money(principal + monthly_contribution * (years * MONTHS_PER_YEAR))
        total_earnings = Money(future_value - total_contributions)

    return InvestmentProjection(
        principal=principal,
        annual_rate=annual_rate,
        years=years,
        monthly_contribution=monthly_contribution,
        total_contributions=total_contributions,
        total_earnings=total_earnings,
        future_value=future_value,
    )


def summarize_compound_interest(
    principal: Money,
    annual_rate: Decimal,
    years: int,
    compound_frequency: int = MONTHS_PER_YEAR,
) -> CompoundInterestResult:
    """Compute the final amount and the interest earned."""
    final_amount = calculate_compound_interest(principal, annual_rate, years, compound_frequency)
    with exact_context():
        interest_earned = Money(final_amount - principal)

    return CompoundInterestResult(
        principal=principal,
        annual_rate=annual_rate,
        years=years,
        compound_frequency=compound_frequency,
        interest_earned=interest_earned,
        final_amount=final_amount,
    )

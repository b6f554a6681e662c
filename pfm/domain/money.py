"""Decimal rounding and scale discipline shared by the whole core.

Rules:
- Externally visible amounts are rounded to 2 places, half-up.
- Rates (annual / 12, annual / frequency) are rounded to 6 places, half-up,
  before any further use.
- Everything else (sums, products, differences) is exact. Arithmetic runs in
  an unbounded-precision context so nothing is rounded along the way.
"""

from contextlib import AbstractContextManager
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_UP, Context, Decimal, localcontext

from pfm.domain.errors import InvalidArgumentError
from pfm.domain.models import Money

MONEY_SCALE = 2
RATE_SCALE = 6
PERCENT_SCALE = 4

CENTS = Decimal("0.01")
ZERO = Money(Decimal("0"))

# Only +, - and * are evaluated under this context; division goes through divide()
EXACT = Context(prec=MAX_PREC, rounding=ROUND_HALF_UP, Emax=MAX_EMAX, Emin=MIN_EMIN)


def exact_context() -> AbstractContextManager[Context]:
    """Context manager switching decimal arithmetic to exact mode."""
    return localcontext(EXACT)


def _scaled_int(value: Decimal) -> tuple[int, int]:
    """Split a finite Decimal into (coefficient, exponent)."""
    if not value.is_finite():
        raise InvalidArgumentError(f"Not a finite number: {value}")
    sign, digits, exponent = value.as_tuple()
    coefficient = int("".join(str(d) for d in digits) or "0")
    return (-coefficient if sign else coefficient), int(exponent)


def divide(dividend: Decimal | int, divisor: Decimal | int, scale: int) -> Decimal:
    """Divide and round half-up to a fixed number of places.

    The quotient is rounded once, from the exact value, using integer
    arithmetic. The result always carries exactly `scale` fractional digits.

    Args:
        dividend: Number to divide.
        divisor: Number to divide by.
        scale: Fractional digits in the result.

    Returns:
        Rounded quotient.

    Raises:
        InvalidArgumentError: If divisor is zero or an operand is not finite.
    """
    num, num_exp = _scaled_int(Decimal(dividend))
    den, den_exp = _scaled_int(Decimal(divisor))
    if den == 0:
        raise InvalidArgumentError("Division by zero")

    shift = num_exp - den_exp + scale
    if shift >= 0:
        num *= 10**shift
    else:
        den *= 10**-shift

    negative = (num < 0) != (den < 0)
    quotient, remainder = divmod(abs(num), abs(den))
    if 2 * remainder >= abs(den):
        quotient += 1

    return Decimal(-quotient if negative else quotient).scaleb(-scale, context=EXACT)


def round_money(value: Decimal) -> Money:
    """Round to 2 decimal places, half-up."""
    return Money(value.quantize(CENTS, rounding=ROUND_HALF_UP, context=EXACT))


def round_rate(annual_rate: Decimal, periods: int) -> Decimal:
    """Per-period rate at 6 decimal places, half-up.

    Args:
        annual_rate: Annual rate as a fraction (0.06 means 6%).
        periods: Periods per year.

    Returns:
        annual_rate / periods rounded to 6 places.
    """
    return divide(annual_rate, periods, RATE_SCALE)


def format_currency(value: Decimal, symbol: str = "$") -> str:
    """Format an amount for display, e.g. "$1,234.50" or "-$5.00"."""
    rounded = round_money(value)
    if rounded == 0:
        rounded = Money(rounded.copy_abs())
    if rounded < 0:
        return f"-{symbol}{abs(rounded):,.2f}"
    return f"{symbol}{rounded:,.2f}"

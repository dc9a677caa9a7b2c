"""Compound-interest primitives shared by every calculation mode."""

from __future__ import annotations

import math

MONTHS_PER_YEAR = 12


def _grow(base: float, periods: float) -> float:
    """base ** periods, saturating at infinity instead of raising OverflowError."""
    try:
        return base ** periods
    except OverflowError:
        return math.inf


def future_value(principal: float, annual_rate: float, years: float) -> float:
    """FV = PV * (1 + r)^n, annual compounding."""
    if principal == 0:
        return 0.0
    return principal * _grow(1 + annual_rate, years)


def inflation_adjust(amount: float, rate: float, years: float) -> float:
    """Grow a target (not an asset) by ``rate`` per year for ``years``."""
    if amount == 0:
        return 0.0
    return amount * _grow(1 + rate, years)


# Two inflation conventions live side by side on purpose:
#   inflate_annually  - whole display years, annual rate to the year's power
#   inflate_monthly   - month probing, monthly-equivalent rate to the month's power
# They differ numerically for fractional years; keep them separate.


def inflate_annually(amount: float, annual_rate: float, years: int) -> float:
    return inflation_adjust(amount, annual_rate, years)


def inflate_monthly(amount: float, annual_rate: float, months: int) -> float:
    if amount == 0:
        return 0.0
    return amount * _grow(1 + monthly_equivalent_rate(annual_rate), months)


def monthly_rate(annual_rate: float) -> float:
    """Simple monthly rate, r / 12 (not the geometric equivalent)."""
    return annual_rate / MONTHS_PER_YEAR


def monthly_equivalent_rate(annual_rate: float) -> float:
    """Monthly rate whose twelfth power equals 1 + annual_rate."""
    return (1 + annual_rate) ** (1 / MONTHS_PER_YEAR) - 1


def annuity_factor(rate: float, months: int) -> float:
    """
    Future value of 1 deposited at the end of each month for ``months`` months.

    ((1 + r)^n - 1) / r is singular at r == 0, where the factor is simply n.
    """
    if rate == 0:
        return float(months)
    return (_grow(1 + rate, months) - 1) / rate


def annuity_future_value(monthly_contribution: float, rate: float, months: int) -> float:
    # 0 * inf would be nan
    if monthly_contribution == 0:
        return 0.0
    return monthly_contribution * annuity_factor(rate, months)


def pool_future_value(
    principal: float,
    monthly_contribution: float,
    rate: float,
    months: int,
) -> float:
    """Value of one asset pool after ``months``: grown principal plus contributions."""
    grown = principal * _grow(1 + rate, months) if principal != 0 else 0.0
    return grown + annuity_future_value(monthly_contribution, rate, months)


__all__ = [
    "MONTHS_PER_YEAR",
    "future_value",
    "inflation_adjust",
    "inflate_annually",
    "inflate_monthly",
    "monthly_rate",
    "monthly_equivalent_rate",
    "annuity_factor",
    "annuity_future_value",
    "pool_future_value",
]

"""Time-to-target search over whole months."""

from __future__ import annotations

import math
from typing import Any, Callable, NamedTuple, Optional

from fi_calculator.core.compounding import MONTHS_PER_YEAR, monthly_rate, pool_future_value

MAX_MONTHS = 1200  # 100 years


class TimeToTarget(NamedTuple):
    years: float
    months: float
    total_months: float

    @property
    def reached(self) -> bool:
        return math.isfinite(self.total_months)


UNREACHED = TimeToTarget(years=math.inf, months=math.inf, total_months=math.inf)


def target_met(total: float, target: float) -> bool:
    """Single success test used by both the month-0 check and the search."""
    return total >= target


def split_months(total_months: int) -> TimeToTarget:
    years, months = divmod(total_months, MONTHS_PER_YEAR)
    return TimeToTarget(years=years, months=months, total_months=total_months)


def find_first_month(
    probe: Callable[[int], Any],
    upper: int = MAX_MONTHS,
) -> Optional[int]:
    """
    Smallest month in [0, upper] whose probe meets its target, or None.

    ``probe(month)`` must return an object exposing ``total`` and ``target``,
    and ``total - target`` must be non-decreasing in ``month``. Each iteration
    evaluates the probe once, so 1200 months take at most 11 evaluations.
    """
    low, high = 0, upper
    found: Optional[int] = None

    while low <= high:
        mid = (low + high) // 2
        point = probe(mid)
        if target_met(point.total, point.target):
            found = mid
            high = mid - 1
        else:
            low = mid + 1

    return found


class _Point(NamedTuple):
    total: float
    target: float


def months_to_target(
    principal: float,
    monthly_contribution: float,
    target: float,
    annual_rate: float,
) -> TimeToTarget:
    """
    Months for a single pool to grow from ``principal`` to a fixed ``target``.

    Without a contribution, PV * (1 + r)^n = target is inverted with a
    logarithm and rounded up to the next whole month.
    """
    if target_met(principal, target):
        return split_months(0)

    rate = monthly_rate(annual_rate)

    if monthly_contribution == 0:
        if rate <= 0 or principal <= 0:
            return UNREACHED
        months = math.ceil(math.log(target / principal) / math.log(1 + rate))
        if months > MAX_MONTHS:
            return UNREACHED
        return split_months(months)

    found = find_first_month(
        lambda month: _Point(
            total=pool_future_value(principal, monthly_contribution, rate, month),
            target=target,
        )
    )
    if found is None:
        return UNREACHED
    return split_months(found)


__all__ = [
    "MAX_MONTHS",
    "TimeToTarget",
    "UNREACHED",
    "target_met",
    "split_months",
    "find_first_month",
    "months_to_target",
]

from __future__ import annotations

import math
from typing import List, Optional

from fi_calculator.core.compounding import MONTHS_PER_YEAR, inflate_annually, monthly_rate
from fi_calculator.core.strategies import baseline_target
from fi_calculator.models import CalculationMode, CalculationResults, FinancialInputs, TimelinePoint


def round_half_up(value: float) -> float:
    # round() is banker's rounding; chart totals round .5 upward
    if not math.isfinite(value):
        return value
    return float(math.floor(value + 0.5))


def _projection_years(
    inputs: FinancialInputs,
    mode: CalculationMode,
    results: Optional[CalculationResults],
) -> int:
    if mode is not CalculationMode.CONTRIBUTION_BASED or results is None:
        return inputs.time_horizon
    if not results.target_reached:
        return inputs.time_horizon
    # always show at least the requested window
    reached_year = math.ceil(results.total_months_to_target / MONTHS_PER_YEAR)
    return max(reached_year, inputs.time_horizon)


def _baseline(
    inputs: FinancialInputs,
    mode: CalculationMode,
    results: Optional[CalculationResults],
) -> float:
    if mode is CalculationMode.GOAL_BASED:
        return inputs.target_fi_number
    if results is not None and results.base_target:
        return results.base_target
    if mode is CalculationMode.CONTRIBUTION_BASED and inputs.target_fi_number:
        return inputs.target_fi_number
    return baseline_target(inputs.monthly_expenses)


def generate_timeline(
    inputs: FinancialInputs,
    mode: CalculationMode = CalculationMode.GOAL_BASED,
    results: Optional[CalculationResults] = None,
) -> List[TimelinePoint]:
    """
    Build one chart point per whole year, 0..horizon inclusive.

    Per year:
      1) Record rounded savings + investments and the target re-inflated with
         the annual rate to this year (target is left unrounded).
      2) Step both pools 12 months: value * (1 + r / 12) + contribution.

    Contributions come from ``results`` (the suggested split) when given;
    contribution-based mode always uses the fixed input contributions.
    """
    mode = CalculationMode(mode)

    savings_rate = monthly_rate(inputs.savings_interest_rate)
    investment_rate = monthly_rate(inputs.annual_return)

    if mode is CalculationMode.CONTRIBUTION_BASED:
        savings_contrib = inputs.monthly_savings
        investment_contrib = inputs.monthly_investment
    elif results is not None:
        savings_contrib = results.suggested_monthly_savings
        investment_contrib = results.suggested_monthly_investment
    else:
        savings_contrib = investment_contrib = 0.0

    baseline = _baseline(inputs, mode, results)
    years = _projection_years(inputs, mode, results)

    saved = float(inputs.current_savings)
    invested = float(inputs.current_investments)

    points: List[TimelinePoint] = []
    for year in range(years + 1):
        points.append(
            TimelinePoint(
                year=year,
                total_assets=round_half_up(saved + invested),
                target=inflate_annually(baseline, inputs.inflation_rate, year),
            )
        )

        for _ in range(MONTHS_PER_YEAR):
            saved = saved * (1 + savings_rate) + savings_contrib
            invested = invested * (1 + investment_rate) + investment_contrib

    return points


__all__ = ["round_half_up", "generate_timeline"]

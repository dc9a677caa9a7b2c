"""
Calculation modes.

Each strategy is a pure function of FinancialInputs returning a fresh
CalculationResults:

  goal-based          target given, horizon given  -> monthly contribution
  time-based          25x expenses target, horizon -> monthly contribution
  contribution-based  contributions given          -> months to target
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, NamedTuple

from fi_calculator.core.compounding import (
    MONTHS_PER_YEAR,
    annuity_factor,
    future_value,
    inflate_annually,
    inflate_monthly,
    monthly_rate,
    pool_future_value,
)
from fi_calculator.core.search import MAX_MONTHS, find_first_month, split_months, target_met
from fi_calculator.models import CalculationMode, CalculationResults, FinancialInputs

logger = logging.getLogger(__name__)

# Fixed split of any required monthly contribution between the two pools.
SAVINGS_SHARE = 0.3
INVESTMENT_SHARE = 0.7

# 25x annual expenses supports a 4% yearly withdrawal indefinitely.
EXPENSE_MULTIPLE = 25


def baseline_target(monthly_expenses: float) -> float:
    return monthly_expenses * MONTHS_PER_YEAR * EXPENSE_MULTIPLE


class _Contribution(NamedTuple):
    total: float
    savings: float
    investment: float
    future_savings: float
    future_investment: float


def split_contribution(total: float) -> tuple[float, float]:
    """Return (savings, investment) parts that sum back to ``total`` exactly."""
    if not math.isfinite(total):
        return total * SAVINGS_SHARE, total * INVESTMENT_SHARE
    investment = total * INVESTMENT_SHARE
    return total - investment, investment


def _annuity_total(contribution: float, factor: float) -> float:
    # an overflowed factor with no contribution adds nothing, not nan
    if contribution == 0:
        return 0.0
    return contribution * factor


def _solve_contribution(
    amount_needed: float,
    savings_future: float,
    investment_future: float,
    inputs: FinancialInputs,
) -> _Contribution:
    """
    Solve 0.3X * F_s + 0.7X * F_i = amount_needed for X over the full horizon.

    ``savings_future`` / ``investment_future`` are the grown current pools;
    the returned totals add each pool's share of the annuity on top.
    """
    if amount_needed <= 0:
        return _Contribution(0.0, 0.0, 0.0, savings_future, investment_future)

    months = inputs.time_horizon * MONTHS_PER_YEAR
    savings_factor = annuity_factor(monthly_rate(inputs.savings_interest_rate), months)
    investment_factor = annuity_factor(monthly_rate(inputs.annual_return), months)

    # equal factors (e.g. both rates zero) give back F exactly
    if savings_factor == investment_factor:
        combined_factor = investment_factor
    else:
        combined_factor = SAVINGS_SHARE * savings_factor + INVESTMENT_SHARE * investment_factor

    required = amount_needed / combined_factor
    savings_part, investment_part = split_contribution(required)

    return _Contribution(
        total=required,
        savings=savings_part,
        investment=investment_part,
        future_savings=savings_future + _annuity_total(savings_part, savings_factor),
        future_investment=investment_future + _annuity_total(investment_part, investment_factor),
    )


def _grow_current_pools(inputs: FinancialInputs) -> tuple[float, float]:
    savings = future_value(inputs.current_savings, inputs.savings_interest_rate, inputs.time_horizon)
    investments = future_value(inputs.current_investments, inputs.annual_return, inputs.time_horizon)
    return savings, investments


def goal_based(inputs: FinancialInputs) -> CalculationResults:
    """Monthly contribution needed to reach ``target_fi_number`` by the horizon.

    The target is taken as already inflated; no further adjustment is applied.
    """
    savings_future, investment_future = _grow_current_pools(inputs)
    current_future = savings_future + investment_future

    target = inputs.target_fi_number
    amount_needed = target - current_future
    contribution = _solve_contribution(amount_needed, savings_future, investment_future, inputs)

    years = 0 if amount_needed <= 0 else inputs.time_horizon
    logger.debug(
        "goal-based: target=%s current_fv=%s required=%s",
        target,
        current_future,
        contribution.total,
    )

    return CalculationResults(
        required_monthly_contribution=contribution.total,
        future_value_of_current_assets=current_future,
        inflation_adjusted_target=target,
        years_to_target=years,
        months_to_target=0,
        total_months_to_target=years * MONTHS_PER_YEAR,
        suggested_monthly_savings=contribution.savings,
        suggested_monthly_investment=contribution.investment,
        total_future_savings=contribution.future_savings,
        total_future_investment=contribution.future_investment,
    )


def time_based(inputs: FinancialInputs) -> CalculationResults:
    """Contribution needed to reach the inflated 25x-expenses target by the horizon."""
    base = baseline_target(inputs.monthly_expenses)
    future_target = inflate_annually(base, inputs.inflation_rate, inputs.time_horizon)

    savings_future, investment_future = _grow_current_pools(inputs)
    current_future = savings_future + investment_future

    gap = future_target - current_future
    contribution = _solve_contribution(gap, savings_future, investment_future, inputs)

    logger.debug(
        "time-based: base=%s future_target=%s gap=%s required=%s",
        base,
        future_target,
        gap,
        contribution.total,
    )

    return CalculationResults(
        required_monthly_contribution=contribution.total,
        future_value_of_current_assets=current_future,
        inflation_adjusted_target=future_target,
        years_to_target=inputs.time_horizon,
        months_to_target=0,
        total_months_to_target=inputs.time_horizon * MONTHS_PER_YEAR,
        suggested_monthly_savings=contribution.savings,
        suggested_monthly_investment=contribution.investment,
        total_future_savings=contribution.future_savings,
        total_future_investment=contribution.future_investment,
        calculated_target=future_target,
        base_target=base,
    )


class MonthProjection(NamedTuple):
    total: float
    target: float
    savings: float
    investments: float


def contribution_projector(inputs: FinancialInputs) -> Callable[[int], MonthProjection]:
    """
    Build the month probe used by contribution-based mode.

    Assets compound at r / 12 per pool; the target inflates at the
    monthly-equivalent rate, so month 12k lands on year k's inflated target.
    """
    savings_rate = monthly_rate(inputs.savings_interest_rate)
    investment_rate = monthly_rate(inputs.annual_return)
    base = inputs.target_fi_number or baseline_target(inputs.monthly_expenses)

    def project(months: int) -> MonthProjection:
        savings = pool_future_value(inputs.current_savings, inputs.monthly_savings, savings_rate, months)
        investments = pool_future_value(
            inputs.current_investments, inputs.monthly_investment, investment_rate, months
        )
        return MonthProjection(
            total=savings + investments,
            target=inflate_monthly(base, inputs.inflation_rate, months),
            savings=savings,
            investments=investments,
        )

    return project


def contribution_based(inputs: FinancialInputs) -> CalculationResults:
    """Months until fixed monthly contributions reach the (inflating) target."""
    base = inputs.target_fi_number or baseline_target(inputs.monthly_expenses)
    project = contribution_projector(inputs)

    start = project(0)
    if target_met(start.total, start.target):
        found = 0
        completion = start
    else:
        found = find_first_month(project)
        completion = project(found if found is not None else MAX_MONTHS)

    if found is None:
        years, months, total_months = math.inf, 0, math.inf
    else:
        years, months, total_months = split_months(found)

    logger.debug("contribution-based: base=%s months=%s", base, total_months)

    return CalculationResults(
        required_monthly_contribution=inputs.monthly_savings + inputs.monthly_investment,
        future_value_of_current_assets=completion.total,
        inflation_adjusted_target=completion.target,
        years_to_target=years,
        months_to_target=months,
        total_months_to_target=total_months,
        suggested_monthly_savings=inputs.monthly_savings,
        suggested_monthly_investment=inputs.monthly_investment,
        total_future_savings=completion.savings,
        total_future_investment=completion.investments,
        target_at_completion=completion.target,
        base_target=base,
    )


STRATEGIES: Dict[CalculationMode, Callable[[FinancialInputs], CalculationResults]] = {
    CalculationMode.GOAL_BASED: goal_based,
    CalculationMode.TIME_BASED: time_based,
    CalculationMode.CONTRIBUTION_BASED: contribution_based,
}


def calculate(
    inputs: FinancialInputs,
    mode: CalculationMode = CalculationMode.GOAL_BASED,
) -> CalculationResults:
    return STRATEGIES[CalculationMode(mode)](inputs)


__all__ = [
    "SAVINGS_SHARE",
    "INVESTMENT_SHARE",
    "EXPENSE_MULTIPLE",
    "baseline_target",
    "split_contribution",
    "goal_based",
    "time_based",
    "MonthProjection",
    "contribution_projector",
    "contribution_based",
    "STRATEGIES",
    "calculate",
]

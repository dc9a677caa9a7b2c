from __future__ import annotations

import math
from math import isclose

import pytest

from fi_calculator.core.strategies import baseline_target, calculate, time_based
from fi_calculator.models import CalculationMode, FinancialInputs


def make_inputs(**overrides) -> FinancialInputs:
    values = {
        "current_income": 300_000_000,
        "monthly_expenses": 10_000_000,
        "current_savings": 200_000_000,
        "current_investments": 300_000_000,
        "time_horizon": 10,
        "annual_return": 0.07,
        "inflation_rate": 0.03,
        "savings_interest_rate": 0.04,
    }
    values.update(overrides)
    return FinancialInputs(**values)


def test_baseline_is_twenty_five_years_of_expenses():
    assert baseline_target(10_000_000) == 3_000_000_000


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"inflation_rate": 0.0},
        {"annual_return": 0.12, "time_horizon": 30},
        {"current_savings": 0, "current_investments": 0},
        {"target_fi_number": 1},
    ],
)
def test_base_target_ignores_other_inputs(overrides):
    assert time_based(make_inputs(**overrides)).base_target == 3_000_000_000


def test_target_is_inflated_to_horizon():
    result = time_based(make_inputs())

    expected = 3_000_000_000 * 1.03**10
    assert isclose(result.calculated_target, expected, rel_tol=1e-12)
    assert result.inflation_adjusted_target == result.calculated_target


def test_contribution_fills_inflated_gap():
    inputs = make_inputs()
    result = time_based(inputs)

    assert result.required_monthly_contribution > 0
    assert (
        result.suggested_monthly_savings + result.suggested_monthly_investment
        == result.required_monthly_contribution
    )
    assert isclose(
        result.total_future_savings + result.total_future_investment,
        result.calculated_target,
        rel_tol=1e-9,
    )


def test_no_gap_needs_no_contribution():
    result = time_based(make_inputs(current_investments=50_000_000_000))

    assert result.required_monthly_contribution == 0
    assert result.suggested_monthly_savings == 0
    assert result.suggested_monthly_investment == 0
    assert result.years_to_target == 10
    assert result.total_months_to_target == 120


def test_zero_rates_divide_baseline_evenly():
    inputs = make_inputs(
        monthly_expenses=1_000,
        current_savings=0,
        current_investments=0,
        annual_return=0,
        inflation_rate=0,
        savings_interest_rate=0,
        time_horizon=25,
    )
    result = time_based(inputs)

    assert result.base_target == 300_000
    assert result.required_monthly_contribution == 1_000


def test_dispatch_reaches_time_based():
    inputs = make_inputs()
    assert calculate(inputs, CalculationMode.TIME_BASED) == time_based(inputs)


def test_overflowing_inflation_gives_infinite_contribution():
    result = time_based(make_inputs(inflation_rate=1e6, time_horizon=100))

    assert result.calculated_target == math.inf
    assert result.required_monthly_contribution == math.inf
    assert result.suggested_monthly_savings == math.inf
    assert result.suggested_monthly_investment == math.inf
    assert not math.isnan(result.total_future_savings)

from __future__ import annotations

import math
from typing import List, NamedTuple

import pytest

from fi_calculator.core.compounding import monthly_rate, pool_future_value
from fi_calculator.core.search import (
    MAX_MONTHS,
    find_first_month,
    months_to_target,
    split_months,
    target_met,
)


class Point(NamedTuple):
    total: float
    target: float


def counting_probe(per_month: float, target: float, calls: List[int]):
    def probe(month: int) -> Point:
        calls.append(month)
        return Point(total=per_month * month, target=target)

    return probe


def test_target_met_is_non_strict():
    assert target_met(100.0, 100.0)
    assert target_met(100.01, 100.0)
    assert not target_met(99.99, 100.0)


def test_search_finds_first_month_meeting_target():
    calls: List[int] = []
    assert find_first_month(counting_probe(10.0, 55.0, calls)) == 6
    assert len(calls) <= 11


def test_search_accepts_exact_equality():
    calls: List[int] = []
    assert find_first_month(counting_probe(1.0, 600.0, calls)) == 600


def test_search_returns_zero_when_met_immediately():
    calls: List[int] = []
    assert find_first_month(counting_probe(0.0, 0.0, calls)) == 0


def test_search_unreached_at_ceiling_is_none():
    calls: List[int] = []
    assert find_first_month(counting_probe(1.0, MAX_MONTHS + 1, calls)) is None
    assert max(calls) == MAX_MONTHS
    assert len(calls) <= 11


def test_search_hits_the_ceiling_exactly():
    calls: List[int] = []
    assert find_first_month(counting_probe(1.0, float(MAX_MONTHS), calls)) == MAX_MONTHS


def test_split_months():
    assert split_months(0) == (0, 0, 0)
    assert split_months(125) == (10, 5, 125)
    assert split_months(24) == (2, 0, 24)


@pytest.mark.parametrize(
    "principal,contribution,target,annual_rate",
    [
        (1_000.0, 100.0, 5_000.0, 0.06),
        (0.0, 2_500.0, 1_000_000.0, 0.07),
        (50_000.0, 10.0, 60_000.0, 0.0),
        (10_000.0, 300.0, 250_000.0, 0.12),
    ],
)
def test_result_is_minimal_month(principal, contribution, target, annual_rate):
    result = months_to_target(principal, contribution, target, annual_rate)
    assert result.reached

    rate = monthly_rate(annual_rate)
    months = int(result.total_months)
    assert pool_future_value(principal, contribution, rate, months) >= target
    assert months == 0 or pool_future_value(principal, contribution, rate, months - 1) < target
    assert result.years * 12 + result.months == result.total_months


def test_more_contribution_never_takes_longer():
    previous = math.inf
    for contribution in (100.0, 200.0, 400.0, 800.0):
        result = months_to_target(1_000.0, contribution, 100_000.0, 0.05)
        assert result.total_months <= previous
        previous = result.total_months


def test_zero_rate_contribution_uses_guarded_annuity():
    result = months_to_target(0.0, 100.0, 1_000.0, 0.0)
    assert result == (0, 10, 10)


def test_already_at_target_takes_no_time():
    assert months_to_target(5_000.0, 0.0, 5_000.0, 0.0) == (0, 0, 0)


def test_zero_contribution_uses_logarithm():
    # 1000 doubles at 1%/month after log(2) / log(1.01) ~ 69.66 -> 70 months
    result = months_to_target(1_000.0, 0.0, 2_000.0, 0.12)
    assert result == (5, 10, 70)


def test_zero_contribution_and_zero_rate_is_unreached():
    result = months_to_target(1_000.0, 0.0, 2_000.0, 0.0)
    assert not result.reached
    assert result.total_months == math.inf


def test_zero_contribution_from_nothing_is_unreached():
    assert not months_to_target(0.0, 0.0, 2_000.0, 0.08).reached


def test_closed_form_beyond_ceiling_is_unreached():
    assert not months_to_target(1.0, 0.0, 1e9, 0.012).reached

from __future__ import annotations

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CalculationMode(str, Enum):
    GOAL_BASED = "goal-based"
    TIME_BASED = "time-based"
    CONTRIBUTION_BASED = "contribution-based"


class FinancialInputs(BaseModel):
    """
    One household snapshot, owned by the caller and never mutated.

    Rates are decimal fractions (0.07 for 7%). Optional amounts default to 0
    so strategies never have to check for missing values.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    current_income: float = 0.0
    monthly_expenses: float = 0.0

    # two pools: cash-like (savings_interest_rate) and market-like (annual_return)
    current_savings: float = 0.0
    current_investments: float = 0.0

    target_fi_number: float = 0.0
    time_horizon: int

    annual_return: float
    inflation_rate: float
    savings_interest_rate: float = 0.0

    # only read by contribution-based mode
    monthly_savings: float = 0.0
    monthly_investment: float = 0.0


class CalculationResults(BaseModel):
    """
    Output of a single strategy run.

    An unreached target is reported as ``math.inf`` in ``years_to_target`` and
    ``total_months_to_target``; use ``target_reached`` rather than comparing
    against a large number.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    required_monthly_contribution: float
    future_value_of_current_assets: float
    inflation_adjusted_target: float

    years_to_target: float
    months_to_target: float
    total_months_to_target: float

    suggested_monthly_savings: float = 0.0
    suggested_monthly_investment: float = 0.0
    total_future_savings: float = 0.0
    total_future_investment: float = 0.0

    calculated_target: Optional[float] = None
    base_target: Optional[float] = None
    target_at_completion: Optional[float] = None

    @property
    def target_reached(self) -> bool:
        return math.isfinite(self.total_months_to_target)


class TimelinePoint(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    total_assets: float
    target: float

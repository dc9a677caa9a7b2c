"""Data contracts for calculator and timeline requests."""

from __future__ import annotations

import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fi_calculator.models import (
    CalculationMode,
    CalculationResults,
    FinancialInputs,
    TimelinePoint,
)


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


def _money(description: str, default=0.0):
    return Field(default, ge=0, allow_inf_nan=False, description=description)


def _rate(description: str, default=0.0):
    return Field(default, gt=-1, le=1, allow_inf_nan=False, description=description)


class FinancialInputsRequest(CamelModel):
    """Validated household inputs; the engine itself does not re-check them."""

    current_income: float = _money("Annual income (informational).")
    monthly_expenses: float = _money("Monthly expenses; 25x annual expenses is the baseline target.")
    current_savings: float = _money("Cash balance growing at savingsInterestRate.")
    current_investments: float = _money("Invested balance growing at annualReturn.")
    target_fi_number: float = Field(
        0.0,
        ge=0,
        allow_inf_nan=False,
        alias="targetFINumber",
        description="Target amount, already in future-value terms for goal-based mode.",
    )
    time_horizon: int = Field(..., ge=1, le=100, description="Horizon in whole years.")
    annual_return: float = _rate("Annual investment return as a decimal (0.07 for 7%).", ...)
    inflation_rate: float = _rate("Annual inflation as a decimal.", ...)
    savings_interest_rate: float = _rate("Annual interest on the savings pool.")
    monthly_savings: float = _money("Fixed monthly deposit into savings (contribution-based mode).")
    monthly_investment: float = _money("Fixed monthly deposit into investments (contribution-based mode).")

    def to_inputs(self) -> FinancialInputs:
        return FinancialInputs(**self.model_dump())


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def _none_to_inf(value: Optional[float]) -> float:
    return math.inf if value is None else value


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_duration(years: float, months: float) -> str:
    """Human-readable time to target, e.g. "10 years and 5 months"."""
    if not (math.isfinite(years) and math.isfinite(months)):
        return "Not reached within 100 years"

    parts = []
    if years > 0:
        parts.append(_plural(int(years), "year"))
    if months > 0:
        parts.append(_plural(int(months), "month"))

    if not parts:
        return "Already reached"
    return " and ".join(parts)


class CalculationResultsPayload(CamelModel):
    """
    Wire form of CalculationResults.

    JSON has no infinity, so an unreached target travels as null durations
    with targetReached = false.
    """

    required_monthly_contribution: float
    future_value_of_current_assets: float
    inflation_adjusted_target: float

    years_to_target: Optional[float] = None
    months_to_target: Optional[float] = None
    total_months_to_target: Optional[float] = None
    target_reached: bool = True
    duration_label: str = ""

    suggested_monthly_savings: float = 0.0
    suggested_monthly_investment: float = 0.0
    total_future_savings: float = 0.0
    total_future_investment: float = 0.0

    calculated_target: Optional[float] = None
    base_target: Optional[float] = None
    target_at_completion: Optional[float] = None

    @classmethod
    def from_results(cls, results: CalculationResults) -> "CalculationResultsPayload":
        data = results.model_dump()
        data["years_to_target"] = _finite_or_none(results.years_to_target)
        data["months_to_target"] = _finite_or_none(results.months_to_target)
        data["total_months_to_target"] = _finite_or_none(results.total_months_to_target)
        data["target_reached"] = results.target_reached
        data["duration_label"] = format_duration(results.years_to_target, results.months_to_target)
        return cls(**data)

    def to_results(self) -> CalculationResults:
        data = self.model_dump(exclude={"target_reached", "duration_label"})
        data["years_to_target"] = _none_to_inf(self.years_to_target)
        data["months_to_target"] = self.months_to_target or 0.0
        data["total_months_to_target"] = _none_to_inf(self.total_months_to_target)
        return CalculationResults(**data)


class TimelineRequest(CamelModel):
    inputs: FinancialInputsRequest
    mode: CalculationMode = CalculationMode.GOAL_BASED
    results: Optional[CalculationResultsPayload] = None


class TimelinePointPayload(CamelModel):
    year: int
    total_assets: float
    target: float

    @classmethod
    def from_point(cls, point: TimelinePoint) -> "TimelinePointPayload":
        return cls(**point.model_dump())


class TimelineResponse(CamelModel):
    mode: CalculationMode
    points: List[TimelinePointPayload]


__all__ = [
    "CamelModel",
    "FinancialInputsRequest",
    "CalculationResultsPayload",
    "format_duration",
    "TimelineRequest",
    "TimelinePointPayload",
    "TimelineResponse",
]

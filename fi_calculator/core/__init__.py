"""Pure calculation engine: compounding, time-to-target search, modes, timeline."""

from fi_calculator.core.strategies import calculate, contribution_based, goal_based, time_based
from fi_calculator.core.timeline import generate_timeline

__all__ = [
    "calculate",
    "goal_based",
    "time_based",
    "contribution_based",
    "generate_timeline",
]

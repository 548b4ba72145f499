"""Quota-based selection and alternative lookup."""

from recommendation_engine.selection.alternatives import find_alternative
from recommendation_engine.selection.selector import QuotaSelector
from recommendation_engine.selection.strategies import (
    FatLossQuotas,
    MuscleGainQuotas,
    QuotaRule,
    QuotaStrategy,
    strategy_for_goal,
)

__all__ = [
    "FatLossQuotas",
    "MuscleGainQuotas",
    "QuotaRule",
    "QuotaSelector",
    "QuotaStrategy",
    "find_alternative",
    "strategy_for_goal",
]

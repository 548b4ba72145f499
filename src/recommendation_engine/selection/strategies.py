"""Quota strategies: goal-specific slot rules for building a balanced session."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

from recommendation_engine.math.muscles import (
    exercise_muscles,
    has_tag,
    is_cardio_like,
    is_compound_heavy,
    is_hiit,
    trains_core,
)
from recommendation_engine.models.enums import MOBILITY_TAG, Goal
from recommendation_engine.models.exercise import Exercise


@dataclass(frozen=True)
class QuotaRule:
    """Fill up to ``slots`` picks with exercises matching ``predicate``.

    Attributes:
        label: Name recorded in the decision trace for picks made by this rule.
        predicate: Membership test for the bucket.
        slots: Maximum number of picks this rule may contribute.
    """

    label: str
    predicate: Callable[[Exercise], bool]
    slots: int


class QuotaStrategy(ABC):
    """Base class for per-goal quota strategies."""

    @abstractmethod
    def rules(self) -> tuple[QuotaRule, ...]:
        """Ordered quota rules; earlier rules claim exercises first."""
        ...


class FatLossQuotas(QuotaStrategy):
    """FAT_LOSS session shape.

    1 HIIT cardio, 1 steady cardio, 2 multi-muscle gym moves,
    1 core exercise, 1 mobility exercise.
    """

    def rules(self) -> tuple[QuotaRule, ...]:
        return (
            QuotaRule(
                "hiit_cardio",
                lambda e: is_cardio_like(e) and is_hiit(e),
                1,
            ),
            QuotaRule(
                "steady_cardio",
                lambda e: is_cardio_like(e) and not is_hiit(e),
                1,
            ),
            QuotaRule(
                "multi_muscle_gym",
                lambda e: e.is_gym and len(exercise_muscles(e)) >= 2,
                2,
            ),
            QuotaRule("core", trains_core, 1),
            QuotaRule("mobility", lambda e: has_tag(e, MOBILITY_TAG), 1),
        )


class MuscleGainQuotas(QuotaStrategy):
    """MUSCLE_GAIN session shape, also used for every non-FAT_LOSS goal.

    2 compound gym lifts, 2 isolation gym moves, 1 core exercise,
    1 cardio or mobility finisher.
    """

    def rules(self) -> tuple[QuotaRule, ...]:
        return (
            QuotaRule(
                "compound_gym",
                lambda e: e.is_gym and is_compound_heavy(e),
                2,
            ),
            QuotaRule(
                "isolation_gym",
                lambda e: e.is_gym and not is_compound_heavy(e),
                2,
            ),
            QuotaRule("core", trains_core, 1),
            QuotaRule(
                "cardio_or_mobility",
                lambda e: is_cardio_like(e) or has_tag(e, MOBILITY_TAG),
                1,
            ),
        )


def strategy_for_goal(goal: Goal) -> QuotaStrategy:
    """Only FAT_LOSS has its own quotas; other goals share MUSCLE_GAIN's."""
    if goal == Goal.FAT_LOSS:
        return FatLossQuotas()
    return MuscleGainQuotas()

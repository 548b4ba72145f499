"""Engine outputs: scored candidates and the final daily recommendations."""

from __future__ import annotations

from dataclasses import dataclass, field

from recommendation_engine.models.exercise import Exercise


@dataclass(frozen=True)
class ScoredCandidate:
    """An exercise that survived the hard filters, with its total score.

    ``reasons`` lists the non-neutral score terms in fixed order:
    goal, recovery, variety.
    """

    exercise: Exercise
    score: float
    reasons: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TodayRecommendation:
    """One recommended exercise for today.

    Score and reasons are advisory; display code must not rely on their
    exact values staying stable between engine versions.
    """

    exercise: Exercise
    score: float
    reasons: tuple[str, ...] = field(default_factory=tuple)
    alternative: Exercise | None = None

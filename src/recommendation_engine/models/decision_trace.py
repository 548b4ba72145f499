"""Decision trace: audit trail of how the engine built today's list."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from recommendation_engine.models.enums import Goal
from recommendation_engine.models.recommendation import ScoredCandidate
from recommendation_engine.models.summary import RollingSummary


@dataclass(frozen=True)
class FilterResult:
    """Record of a hard filter removing an exercise from the candidate pool."""

    exercise_id: int
    filter_id: str
    explanation: str = ""


@dataclass(frozen=True)
class RecommendationTrace:
    """Complete audit trail for a single engine.recommend() call.

    Records why each exercise was excluded, how every candidate scored and
    which quota pass picked each recommendation, so rankings stay
    explainable.
    """

    today: date | None = None
    goal: Goal | None = None
    summary: RollingSummary = field(default_factory=RollingSummary)
    filter_results: tuple[FilterResult, ...] = field(default_factory=tuple)
    scored: tuple[ScoredCandidate, ...] = field(default_factory=tuple)
    selection_notes: tuple[tuple[int, str], ...] = field(default_factory=tuple)

    @property
    def excluded_ids(self) -> frozenset[int]:
        return frozenset(r.exercise_id for r in self.filter_results)

    def score_of(self, exercise_id: int) -> float | None:
        """Raw pre-selection score of a candidate, or None if it was filtered out."""
        for candidate in self.scored:
            if candidate.exercise.id == exercise_id:
                return candidate.score
        return None

"""RecommendationEngine: the main orchestrator that picks today's exercises."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Sequence

from recommendation_engine.filters.base import FilterContext
from recommendation_engine.math.rolling_load import build_summary, to_calendar_date
from recommendation_engine.math.scoring import rank_candidates
from recommendation_engine.models.decision_trace import FilterResult, RecommendationTrace
from recommendation_engine.models.enums import (
    DEFAULT_RECOMMENDATION_COUNT,
    FitnessLevel,
    Goal,
)
from recommendation_engine.models.exercise import Exercise
from recommendation_engine.models.recommendation import TodayRecommendation
from recommendation_engine.models.workout_log import WorkoutLog
from recommendation_engine.registry import FilterRegistry
from recommendation_engine.selection.alternatives import find_alternative
from recommendation_engine.selection.selector import QuotaSelector

logger = logging.getLogger(__name__)


def _coerce_goal(goal: Goal | str) -> Goal:
    """Map a goal value onto the enum; unknown values run the MUSCLE_GAIN branch."""
    try:
        return Goal(goal)
    except ValueError:
        logger.warning("Unknown goal %r; using %s", goal, Goal.MUSCLE_GAIN.value)
        return Goal.MUSCLE_GAIN


def _coerce_level(level: FitnessLevel | str) -> FitnessLevel:
    """Map a level value onto the enum; unknown values are treated as intermediate."""
    try:
        return FitnessLevel(level)
    except ValueError:
        logger.warning(
            "Unknown fitness level %r; using %s",
            level,
            FitnessLevel.INTERMEDIATE.value,
        )
        return FitnessLevel.INTERMEDIATE


class RecommendationEngine:
    """Runs the recommendation pipeline: summary, filters, scoring, quotas.

    The engine keeps no per-call state, so one instance can serve any
    number of calls, including concurrent calls on disjoint inputs.

    Usage:
        engine = RecommendationEngine()
        recommendations, trace = engine.recommend(
            goal, fitness_level, logs, exercises, today
        )
    """

    def __init__(
        self,
        registry: FilterRegistry | None = None,
        selector: QuotaSelector | None = None,
    ) -> None:
        self.registry = registry or FilterRegistry()
        self.selector = selector or QuotaSelector()

        # Auto-discover filters if using default registry
        if registry is None:
            self.registry.discover_filters()

    def recommend(
        self,
        goal: Goal | str,
        fitness_level: FitnessLevel | str,
        logs_last_7d: Sequence[WorkoutLog],
        exercises: Sequence[Exercise],
        today: date | datetime,
        count: int = DEFAULT_RECOMMENDATION_COUNT,
    ) -> tuple[list[TodayRecommendation], RecommendationTrace]:
        """Pick up to *count* exercises for today.

        Args:
            goal: User goal. Only FAT_LOSS differs from the default branch.
            fitness_level: User level; beginners skip compound lifts.
            logs_last_7d: Recent workout logs, any order.
            exercises: Full catalog, any order; order decides alternatives.
            today: Reference instant, truncated to its (UTC) date.
            count: Maximum number of recommendations.

        Returns:
            A tuple of (recommendations, RecommendationTrace).
        """
        goal = _coerce_goal(goal)
        fitness_level = _coerce_level(fitness_level)
        today_date = to_calendar_date(today)

        exercises_by_id = {ex.id: ex for ex in exercises}
        summary = build_summary(logs_last_7d, exercises_by_id, today_date)
        logger.debug(
            "Summary for %s: %d muscles worked yesterday, %d loaded in 48h",
            today_date.isoformat(),
            len(summary.muscles_worked_yesterday),
            len(summary.muscle_load_last_48h),
        )

        # Hard filters
        context = FilterContext(goal=goal, fitness_level=fitness_level, summary=summary)
        filters = self.registry.get_all_filters()
        pool: list[Exercise] = []
        filter_results: list[FilterResult] = []

        for exercise in exercises:
            blocker = next((f for f in filters if f.excludes(exercise, context)), None)
            if blocker is None:
                pool.append(exercise)
                continue
            filter_results.append(
                FilterResult(
                    exercise_id=exercise.id,
                    filter_id=blocker.filter_id,
                    explanation=blocker.explain(exercise, context),
                )
            )

        logger.debug(
            "%d of %d exercises survived hard filters", len(pool), len(exercises)
        )

        ranked = rank_candidates(pool, goal, summary)
        picks, notes = self.selector.select(ranked, goal, count)

        recommendations = [
            TodayRecommendation(
                exercise=pick.exercise,
                score=pick.score,
                reasons=pick.reasons,
                alternative=find_alternative(pick.exercise, pool, summary),
            )
            for pick in picks
        ]

        trace = RecommendationTrace(
            today=today_date,
            goal=goal,
            summary=summary,
            filter_results=tuple(filter_results),
            scored=tuple(ranked),
            selection_notes=tuple(notes),
        )
        return recommendations, trace


_default_engine: RecommendationEngine | None = None


def recommend_today(
    goal: Goal | str,
    fitness_level: FitnessLevel | str,
    logs_last_7d: Sequence[WorkoutLog],
    exercises: Sequence[Exercise],
    today: date | datetime,
    count: int = DEFAULT_RECOMMENDATION_COUNT,
) -> list[TodayRecommendation]:
    """Return today's recommendations without the decision trace.

    Shares one lazily built engine, so filter discovery runs once per process.
    """
    global _default_engine
    if _default_engine is None:
        _default_engine = RecommendationEngine()
    recommendations, _ = _default_engine.recommend(
        goal, fitness_level, logs_last_7d, exercises, today, count
    )
    return recommendations

"""RECOVERY filter: no resistance work on a muscle trained yesterday."""

from __future__ import annotations

from recommendation_engine.filters.base import FilterContext, HardFilter
from recommendation_engine.math.muscles import exercise_muscles, overlaps
from recommendation_engine.models.exercise import Exercise


class ConsecutiveDayResistanceFilter(HardFilter):
    """Excludes gym exercises whose muscles overlap yesterday's."""

    filter_id = "consecutive_day_resistance"
    version = "1.0.0"
    order = 10

    def excludes(self, exercise: Exercise, context: FilterContext) -> bool:
        if not exercise.is_gym:
            return False
        return overlaps(
            exercise_muscles(exercise), context.summary.muscles_worked_yesterday
        )

    def explain(self, exercise: Exercise, context: FilterContext) -> str:
        worked = context.summary.muscles_worked_yesterday
        shared = sorted(m for m in exercise_muscles(exercise) if m in worked)
        return (
            f"{exercise.name} trains {', '.join(shared)}, "
            f"already worked yesterday."
        )

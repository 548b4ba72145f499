"""RECOVERY filter: no back-to-back HIIT on the same muscles when cutting.

Applies only to the FAT_LOSS goal. Steady (non-HIIT) cardio that overlaps
yesterday's muscles stays allowed.
"""

from __future__ import annotations

from recommendation_engine.filters.base import FilterContext, HardFilter
from recommendation_engine.math.muscles import (
    exercise_muscles,
    is_cardio_like,
    is_hiit,
    overlaps,
)
from recommendation_engine.models.enums import Goal
from recommendation_engine.models.exercise import Exercise


class BackToBackHIITFilter(HardFilter):
    """Excludes HIIT cardio that would hit yesterday's muscles again."""

    filter_id = "back_to_back_hiit"
    version = "1.0.0"
    order = 20

    def excludes(self, exercise: Exercise, context: FilterContext) -> bool:
        if context.goal != Goal.FAT_LOSS:
            return False
        if not (is_cardio_like(exercise) and is_hiit(exercise)):
            return False
        return overlaps(
            exercise_muscles(exercise), context.summary.muscles_worked_yesterday
        )

    def explain(self, exercise: Exercise, context: FilterContext) -> str:
        return f"{exercise.name} is HIIT on muscles worked yesterday."

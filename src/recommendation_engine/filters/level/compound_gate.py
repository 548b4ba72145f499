"""LEVEL filter: keep beginners away from heavy compound lifts.

Uses the name-substring compound heuristic (deadlift, squat, bench, row,
pull-up, overhead press). Intermediate and advanced users are never
affected.
"""

from __future__ import annotations

from recommendation_engine.filters.base import FilterContext, HardFilter
from recommendation_engine.math.muscles import is_compound_heavy
from recommendation_engine.models.enums import FitnessLevel
from recommendation_engine.models.exercise import Exercise


class BeginnerCompoundGate(HardFilter):
    """Blocks compound-heavy exercises for beginners."""

    filter_id = "beginner_compound_gate"
    version = "1.0.0"
    order = 0

    def excludes(self, exercise: Exercise, context: FilterContext) -> bool:
        if context.fitness_level != FitnessLevel.BEGINNER:
            return False
        return is_compound_heavy(exercise)

    def explain(self, exercise: Exercise, context: FilterContext) -> str:
        return f"{exercise.name} is a compound-heavy lift; blocked for beginners."

"""Abstract base class for all hard filters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from recommendation_engine.models.enums import FitnessLevel, Goal
from recommendation_engine.models.exercise import Exercise
from recommendation_engine.models.summary import RollingSummary


@dataclass(frozen=True)
class FilterContext:
    """Per-call inputs every filter may consult."""

    goal: Goal
    fitness_level: FitnessLevel
    summary: RollingSummary


class HardFilter(ABC):
    """Base class for candidate-pool exclusion rules.

    An exercise is dropped when ANY registered filter excludes it. Filters
    are discovered automatically by the FilterRegistry and evaluated in
    ascending ``order``; the order only affects which filter the decision
    trace credits, never whether an exercise is excluded.

    Subclasses must define:
        filter_id: unique identifier (e.g. "consecutive_day_resistance")
        version: semantic version string
        order: evaluation position (lower first)
        excludes(): the filter's decision logic
    """

    filter_id: str
    version: str
    order: int

    @abstractmethod
    def excludes(self, exercise: Exercise, context: FilterContext) -> bool:
        """Return True if the exercise must not be recommended today."""
        ...

    def explain(self, exercise: Exercise, context: FilterContext) -> str:
        """Human-readable reason recorded in the decision trace."""
        return f"{exercise.name} excluded by {self.filter_id}."

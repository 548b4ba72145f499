"""Tests for BeginnerCompoundGate: LEVEL tier compound blocking."""

from __future__ import annotations

from recommendation_engine.filters.base import FilterContext
from recommendation_engine.filters.level.compound_gate import BeginnerCompoundGate
from recommendation_engine.models.enums import Category, FitnessLevel, Goal
from recommendation_engine.models.exercise import Exercise
from recommendation_engine.models.summary import RollingSummary


def _context(level: FitnessLevel, goal: Goal = Goal.MUSCLE_GAIN) -> FilterContext:
    return FilterContext(goal=goal, fitness_level=level, summary=RollingSummary())


class TestBeginnerCompoundGate:
    def setup_method(self) -> None:
        self.gate = BeginnerCompoundGate()
        self.deadlift = Exercise(
            id=4, name="Barbell Deadlift", category=Category.GYM, tags=("back", "legs")
        )
        self.leg_press = Exercise(
            id=8, name="Leg Press", category=Category.GYM, tags=("legs",)
        )

    def test_blocks_compound_for_beginner(self) -> None:
        assert self.gate.excludes(self.deadlift, _context(FitnessLevel.BEGINNER))

    def test_allows_isolation_for_beginner(self) -> None:
        assert not self.gate.excludes(self.leg_press, _context(FitnessLevel.BEGINNER))

    def test_ignores_other_levels(self) -> None:
        for level in (FitnessLevel.INTERMEDIATE, FitnessLevel.ADVANCED):
            assert not self.gate.excludes(self.deadlift, _context(level))

    def test_independent_of_goal(self) -> None:
        for goal in Goal:
            assert self.gate.excludes(self.deadlift, _context(FitnessLevel.BEGINNER, goal))

    def test_blocks_cardio_with_compound_name(self) -> None:
        rower = Exercise(
            id=22, name="Rowing Machine", category=Category.CARDIO, tags=("endurance",)
        )
        assert self.gate.excludes(rower, _context(FitnessLevel.BEGINNER))

    def test_explanation_names_exercise(self) -> None:
        text = self.gate.explain(self.deadlift, _context(FitnessLevel.BEGINNER))
        assert "Barbell Deadlift" in text
        assert "beginners" in text

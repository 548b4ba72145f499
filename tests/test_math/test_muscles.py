"""Tests for tag heuristics: muscles, cardio-likeness, compound detection."""

from __future__ import annotations

from recommendation_engine.math.muscles import (
    exercise_muscles,
    has_tag,
    is_cardio_like,
    is_compound_heavy,
    is_hiit,
    normalize_tag,
    overlap_count,
    trains_core,
)
from recommendation_engine.models.enums import Category
from recommendation_engine.models.exercise import Exercise


def _ex(
    name: str = "Test",
    category: Category = Category.GYM,
    tags: tuple[str, ...] = (),
) -> Exercise:
    return Exercise(id=1, name=name, category=category, tags=tags)


class TestNormalizeTag:
    def test_trims_and_lowercases(self) -> None:
        assert normalize_tag("  Full Body ") == "full body"

    def test_has_tag_ignores_case(self) -> None:
        assert has_tag(_ex(tags=("HIIT",)), "hiit")


class TestExerciseMuscles:
    def test_keeps_only_known_muscles(self) -> None:
        ex = _ex(tags=("endurance", "legs", "coordination"))
        assert exercise_muscles(ex) == ["legs"]

    def test_arms_expands_to_biceps_and_triceps(self) -> None:
        assert exercise_muscles(_ex(tags=("arms",))) == ["biceps", "triceps"]

    def test_expansion_does_not_duplicate(self) -> None:
        ex = _ex(tags=("arms", "biceps", "Triceps"))
        assert exercise_muscles(ex) == ["biceps", "triceps"]

    def test_full_body_is_a_muscle_tag(self) -> None:
        assert exercise_muscles(_ex(tags=("Full Body", "endurance"))) == ["full body"]

    def test_mixed_case_and_whitespace(self) -> None:
        assert exercise_muscles(_ex(tags=(" Chest", "CORE "))) == ["chest", "core"]

    def test_no_tags(self) -> None:
        assert exercise_muscles(_ex()) == []

    def test_trains_core(self) -> None:
        assert trains_core(_ex(tags=("core", "HIIT")))
        assert not trains_core(_ex(tags=("legs",)))


class TestCardioLike:
    def test_cardio_category(self) -> None:
        assert is_cardio_like(_ex(category=Category.CARDIO, tags=("coordination",)))

    def test_gym_tagged_endurance(self) -> None:
        assert is_cardio_like(_ex(category=Category.GYM, tags=("Endurance",)))

    def test_gym_tagged_hiit(self) -> None:
        ex = _ex(category=Category.GYM, tags=("HIIT",))
        assert is_cardio_like(ex)
        assert is_hiit(ex)

    def test_plain_gym_is_not_cardio(self) -> None:
        assert not is_cardio_like(_ex(tags=("chest",)))


class TestCompoundHeavy:
    def test_keywords_match_case_insensitively(self) -> None:
        for name in (
            "Barbell Deadlift",
            "Back SQUAT",
            "Bench Press",
            "Barbell Row",
            "Pull-Ups",
            "Overhead Press",
        ):
            assert is_compound_heavy(_ex(name=name)), name

    def test_substring_heuristic_catches_rowing_machine(self) -> None:
        # "row" is a plain substring match, so the rower counts as compound
        assert is_compound_heavy(_ex(name="Rowing Machine"))

    def test_isolation_moves_are_not_compound(self) -> None:
        for name in ("Leg Press", "Lateral Raises", "Incline Dumbbell Press", "Plank"):
            assert not is_compound_heavy(_ex(name=name)), name

    def test_pull_up_requires_hyphen(self) -> None:
        assert not is_compound_heavy(_ex(name="Pullups"))


class TestOverlapCount:
    def test_counts_shared_entries(self) -> None:
        assert overlap_count(["chest", "triceps"], ["triceps", "biceps"]) == 1

    def test_empty(self) -> None:
        assert overlap_count([], ["chest"]) == 0

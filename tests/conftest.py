"""Shared test fixtures: catalogs, reference dates, workout log factories."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable

import pytest

from recommendation_engine.catalog import DEFAULT_EXERCISES
from recommendation_engine.models.enums import Category, IntensityLevel
from recommendation_engine.models.exercise import Exercise
from recommendation_engine.models.workout_log import WorkoutLog

TODAY = date(2026, 3, 10)  # a Tuesday


def make_exercise(
    id: int,
    name: str = "",
    category: Category | str = Category.GYM,
    tags: tuple[str, ...] = (),
) -> Exercise:
    return Exercise(
        id=id,
        name=name or f"Exercise {id}",
        category=category,
        tags=tags,
        sets="3 sets of 10 reps",
        steps=("Do the thing.",),
    )


def make_log(
    exercise_id: int,
    days_ago: int,
    sets: int | None = 3,
    intensity: IntensityLevel | str | None = IntensityLevel.MODERATE,
    today: date = TODAY,
) -> WorkoutLog:
    return WorkoutLog(
        exercise_id=exercise_id,
        performed_at=today - timedelta(days=days_ago),
        sets=sets,
        reps=10,
        intensity=intensity,
        id=f"log-{exercise_id}-{days_ago}",
        user_id="user-1",
    )


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def catalog() -> list[Exercise]:
    """The built-in 22-exercise catalog."""
    return list(DEFAULT_EXERCISES)


@pytest.fixture
def exercise_factory() -> Callable[..., Exercise]:
    """Factory fixture for minimal Exercise instances.

    Usage:
        ex = exercise_factory(1, "Squat", "gym", ("legs",))
    """
    return make_exercise


@pytest.fixture
def log_factory() -> Callable[..., WorkoutLog]:
    """Factory fixture for WorkoutLog instances relative to TODAY.

    Usage:
        log = log_factory(exercise_id=1, days_ago=1, sets=4, intensity="high")
    """
    return make_log


@pytest.fixture
def bench_yesterday_logs() -> list[WorkoutLog]:
    """Heavy bench session yesterday: chest and triceps are off limits today."""
    return [make_log(1, days_ago=1, sets=4, intensity=IntensityLevel.HIGH)]


@pytest.fixture
def mixed_week_logs() -> list[WorkoutLog]:
    """A realistic week: legs 2 days ago, back 4 days ago, a run yesterday."""
    return [
        make_log(7, days_ago=2, sets=4, intensity=IntensityLevel.HIGH),
        make_log(8, days_ago=2, sets=3, intensity=IntensityLevel.MODERATE),
        make_log(5, days_ago=4, sets=3, intensity=IntensityLevel.MODERATE),
        make_log(6, days_ago=4, sets=4, intensity=None),
        make_log(17, days_ago=1, sets=None, intensity=IntensityLevel.LOW),
        make_log(15, days_ago=6, sets=3, intensity=IntensityLevel.LOW),
    ]

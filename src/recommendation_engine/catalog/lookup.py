"""Catalog and log-window helpers used by the engine's callers.

Lookups default to the built-in catalog but accept any exercise sequence,
so callers holding a synced catalog use the same helpers.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Sequence

from recommendation_engine.catalog.default_exercises import DEFAULT_EXERCISES
from recommendation_engine.math.rolling_load import to_calendar_date
from recommendation_engine.models.enums import Category
from recommendation_engine.models.exercise import Exercise
from recommendation_engine.models.workout_log import WorkoutLog

LOG_WINDOW_DAYS = 7


def get_exercise_by_id(
    exercise_id: int, exercises: Sequence[Exercise] = DEFAULT_EXERCISES
) -> Exercise | None:
    return next((ex for ex in exercises if ex.id == exercise_id), None)


def get_exercises_by_ids(
    ids: Iterable[int], exercises: Sequence[Exercise] = DEFAULT_EXERCISES
) -> list[Exercise]:
    """Resolve ids in the given order, silently dropping unknown ones."""
    by_id = {ex.id: ex for ex in exercises}
    return [by_id[i] for i in ids if i in by_id]


def get_exercises_by_category(
    category: Category | str, exercises: Sequence[Exercise] = DEFAULT_EXERCISES
) -> list[Exercise]:
    wanted = Category(category)
    return [ex for ex in exercises if ex.category == wanted]


def get_exercises_by_tag(
    tag: str, exercises: Sequence[Exercise] = DEFAULT_EXERCISES
) -> list[Exercise]:
    """Exact (case-sensitive) tag match, as the catalog screen filters."""
    return [ex for ex in exercises if tag in ex.tags]


def get_unique_tags(
    category: Category | str | None = None,
    exercises: Sequence[Exercise] = DEFAULT_EXERCISES,
) -> list[str]:
    """Sorted set of raw tags, optionally limited to one category."""
    pool = get_exercises_by_category(category, exercises) if category else exercises
    return sorted({tag for ex in pool for tag in ex.tags})


def logs_in_window(
    logs: Iterable[WorkoutLog],
    today: date | datetime,
    days: int = LOG_WINDOW_DAYS,
) -> list[WorkoutLog]:
    """Keep logs dated within the *days*-day window ending today (inclusive).

    A 7-day window on 2026-03-10 keeps 2026-03-04 through 2026-03-10.
    Input order is preserved.
    """
    end = to_calendar_date(today)
    start = end - timedelta(days=days - 1)
    return [log for log in logs if start <= to_calendar_date(log.performed_at) <= end]

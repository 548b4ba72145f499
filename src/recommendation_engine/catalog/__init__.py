"""Exercise catalog: built-in master list and lookup helpers."""

from recommendation_engine.catalog.default_exercises import DEFAULT_EXERCISES
from recommendation_engine.catalog.lookup import (
    get_exercise_by_id,
    get_exercises_by_category,
    get_exercises_by_ids,
    get_exercises_by_tag,
    get_unique_tags,
    logs_in_window,
)

__all__ = [
    "DEFAULT_EXERCISES",
    "get_exercise_by_id",
    "get_exercises_by_category",
    "get_exercises_by_ids",
    "get_exercises_by_tag",
    "get_unique_tags",
    "logs_in_window",
]

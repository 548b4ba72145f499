"""Serialization module: parse catalog/log payloads, export recommendations."""

from recommendation_engine.serialization.json_codec import (
    exercise_from_dict,
    exercise_to_dict,
    load_catalog,
    load_logs,
    recommendation_to_dict,
    to_json_string,
    workout_log_from_dict,
)

__all__ = [
    "exercise_from_dict",
    "exercise_to_dict",
    "load_catalog",
    "load_logs",
    "recommendation_to_dict",
    "to_json_string",
    "workout_log_from_dict",
]

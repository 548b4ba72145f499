"""Exception hierarchy for data entering the engine from files or APIs.

The engine itself never raises; these are raised only while parsing
catalog and log payloads at the serialization boundary.
"""

from __future__ import annotations


class RecommendationEngineError(Exception):
    """Base exception for all recommendation_engine errors."""


class CatalogFormatError(RecommendationEngineError):
    """An exercise catalog payload is malformed."""

    def __init__(self, message: str, exercise_id: object | None = None) -> None:
        super().__init__(message)
        self.exercise_id = exercise_id


class LogFormatError(RecommendationEngineError):
    """A workout log payload is malformed."""

    def __init__(self, message: str, log_id: object | None = None) -> None:
        super().__init__(message)
        self.log_id = log_id

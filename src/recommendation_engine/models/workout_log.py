"""Workout log: one completed session of one exercise on one date."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from recommendation_engine.models.enums import IntensityLevel


@dataclass(frozen=True)
class WorkoutLog:
    """Immutable record written by the logging collaborator.

    Several logs may share the same date and exercise; the engine does not
    deduplicate them.
    """

    exercise_id: int
    performed_at: date  # calendar date, no time component
    sets: int | None = None
    reps: int | None = None
    intensity: IntensityLevel | None = None
    id: str = ""
    user_id: str = ""
    created_at: str = ""

    def __post_init__(self) -> None:
        if self.intensity is not None:
            object.__setattr__(self, "intensity", IntensityLevel(self.intensity))

"""Rolling summary: recent-training digest built fresh for every engine call."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from recommendation_engine.models.enums import NEVER_SEEN_DAYS_AGO


@dataclass(frozen=True)
class RollingSummary:
    """Per-call digest of the log history relative to "today".

    Attributes:
        muscles_worked_yesterday: Muscles hit by any log dated exactly one
            day before today.
        muscle_load_last_48h: Intensity-weighted load per muscle from logs
            dated 0-2 days ago.
        exercise_last_seen_days_ago: Minimum days-ago per exercise id.
            Future-dated logs may leave a negative value here.
    """

    muscles_worked_yesterday: frozenset[str] = frozenset()
    muscle_load_last_48h: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType({})
    )
    exercise_last_seen_days_ago: Mapping[int, int] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def last_seen(self, exercise_id: int) -> int:
        """Days since the exercise was last logged, or 999 if never."""
        return self.exercise_last_seen_days_ago.get(exercise_id, NEVER_SEEN_DAYS_AGO)

    def load_for(self, muscle: str) -> float:
        return self.muscle_load_last_48h.get(muscle, 0.0)

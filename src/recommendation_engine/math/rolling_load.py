"""Date normalisation and the rolling summary of recent training.

The summary is the only view of history the filters and scorers get:
which muscles were worked yesterday, how much weighted load each muscle
carried over the last 48 hours, and how long ago each exercise was done.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from types import MappingProxyType
from typing import Iterable, Mapping

from recommendation_engine.math.muscles import exercise_muscles
from recommendation_engine.models.enums import (
    CARDIO_BASE_LOAD,
    DEFAULT_INTENSITY_WEIGHT,
    INTENSITY_WEIGHTS,
    RECENT_LOAD_WINDOW_DAYS,
    IntensityLevel,
)
from recommendation_engine.models.exercise import Exercise
from recommendation_engine.models.summary import RollingSummary
from recommendation_engine.models.workout_log import WorkoutLog

logger = logging.getLogger(__name__)


def to_calendar_date(value: date | datetime) -> date:
    """Truncate an instant to its calendar date.

    Timezone-aware datetimes are converted to UTC first, matching how the
    app stamps ``performed_at`` (UTC date of the log). Naive datetimes are
    taken to be UTC already and truncated as-is; callers holding local
    wall-clock time must attach their tzinfo.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def days_between(later: date, earlier: date) -> int:
    """Whole days from *earlier* to *later*; negative if *earlier* is in the future."""
    return round((later - earlier).days)


def intensity_weight(intensity: IntensityLevel | None) -> float:
    """Load multiplier for a log's intensity. Unset counts as low."""
    if intensity is None:
        return DEFAULT_INTENSITY_WEIGHT
    return INTENSITY_WEIGHTS.get(IntensityLevel(intensity), DEFAULT_INTENSITY_WEIGHT)


def log_load(log: WorkoutLog, exercise: Exercise) -> float:
    """Weighted load of one log.

    Gym logs count their sets (0 when unrecorded); cardio logs count as one
    unit whatever their sets/reps fields say.
    """
    if exercise.is_gym:
        base = float(log.sets or 0)
    else:
        base = CARDIO_BASE_LOAD
    return base * intensity_weight(log.intensity)


def build_summary(
    logs: Iterable[WorkoutLog],
    exercises_by_id: Mapping[int, Exercise],
    today: date,
) -> RollingSummary:
    """Build the rolling summary in a single pass over the logs.

    Args:
        logs: Workout logs in any order.
        exercises_by_id: Catalog index; logs for unknown ids are skipped.
        today: Reference calendar date.

    Returns:
        A fresh RollingSummary. Nothing is cached between calls.
    """
    worked_yesterday: set[str] = set()
    load: dict[str, float] = {}
    last_seen: dict[int, int] = {}
    skipped = 0

    for log in logs:
        exercise = exercises_by_id.get(log.exercise_id)
        if exercise is None:
            skipped += 1
            continue

        days_ago = days_between(today, to_calendar_date(log.performed_at))

        previous = last_seen.get(exercise.id)
        if previous is None or days_ago < previous:
            last_seen[exercise.id] = days_ago

        muscles = exercise_muscles(exercise)

        if days_ago == 1:
            worked_yesterday.update(muscles)

        if 0 <= days_ago <= RECENT_LOAD_WINDOW_DAYS:
            weighted = log_load(log, exercise)
            for muscle in muscles:
                load[muscle] = load.get(muscle, 0.0) + weighted

    if skipped:
        logger.debug("Skipped %d logs referencing unknown exercises", skipped)

    return RollingSummary(
        muscles_worked_yesterday=frozenset(worked_yesterday),
        muscle_load_last_48h=MappingProxyType(load),
        exercise_last_seen_days_ago=MappingProxyType(last_seen),
    )

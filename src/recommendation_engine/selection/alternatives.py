"""Alternative lookup: a swap-in option for each recommended exercise."""

from __future__ import annotations

from typing import Sequence

from recommendation_engine.math.muscles import exercise_muscles, overlap_count
from recommendation_engine.models.enums import (
    ALTERNATIVE_MIN_DAYS_SINCE_SEEN,
    ALTERNATIVE_MIN_SHARED_MUSCLES,
)
from recommendation_engine.models.exercise import Exercise
from recommendation_engine.models.summary import RollingSummary


def find_alternative(
    primary: Exercise,
    pool: Sequence[Exercise],
    summary: RollingSummary,
) -> Exercise | None:
    """Return the first pool exercise that can stand in for *primary*.

    A match shares at least min(2, len(primary muscles)) muscles with the
    primary and was last logged more than 3 days ago (or never). The pool
    is scanned in catalog order and the first match wins; there is no
    ranking among matches.

    Args:
        primary: The recommended exercise.
        pool: Post-filter candidate pool in catalog order.
        summary: Rolling summary for last-seen lookups.

    Returns:
        The first matching exercise, or None.
    """
    primary_muscles = exercise_muscles(primary)
    required = min(ALTERNATIVE_MIN_SHARED_MUSCLES, len(primary_muscles))

    for candidate in pool:
        if candidate.id == primary.id:
            continue
        if overlap_count(exercise_muscles(candidate), primary_muscles) < required:
            continue
        if summary.last_seen(candidate.id) <= ALTERNATIVE_MIN_DAYS_SINCE_SEEN:
            continue
        return candidate
    return None

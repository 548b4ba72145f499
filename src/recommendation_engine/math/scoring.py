"""Candidate scoring: goal alignment, recovery penalty and novelty.

total = goal_score + recovery_score + novelty_score

Each term is independent. A reason tag is attached only when a term is
non-neutral, in the fixed order goal, recovery, variety.
"""

from __future__ import annotations

from typing import Iterable

from recommendation_engine.math.muscles import (
    exercise_muscles,
    has_tag,
    is_cardio_like,
    is_compound_heavy,
    is_hiit,
)
from recommendation_engine.models.enums import (
    FAT_LOSS_CARDIO_BONUS,
    FAT_LOSS_FULL_BODY_BONUS,
    FAT_LOSS_HIIT_BONUS,
    FAT_LOSS_MULTI_MUSCLE_GYM_BONUS,
    FAT_LOSS_MULTI_MUSCLE_THRESHOLD,
    FULL_BODY_TAG,
    MUSCLE_GAIN_CARDIO_PENALTY,
    MUSCLE_GAIN_COMPOUND_BONUS,
    MUSCLE_GAIN_GYM_BONUS,
    NOVELTY_BANDS,
    NOVELTY_FALLBACK_SCORE,
    REASON_GOAL_ALIGNED,
    REASON_RECOVERY_AWARE,
    REASON_VARIETY,
    RECOVERY_LOAD_PENALTY_PER_UNIT,
    Goal,
)
from recommendation_engine.models.exercise import Exercise
from recommendation_engine.models.recommendation import ScoredCandidate
from recommendation_engine.models.summary import RollingSummary


def goal_score(exercise: Exercise, goal: Goal) -> float:
    """Reward exercises matching the goal's emphasis.

    FAT_LOSS favours cardio, HIIT and big multi-muscle work. Every other
    goal is scored as MUSCLE_GAIN: gym work and compounds up, cardio down.
    """
    score = 0.0
    if goal == Goal.FAT_LOSS:
        if is_cardio_like(exercise):
            score += FAT_LOSS_CARDIO_BONUS
        if is_hiit(exercise):
            score += FAT_LOSS_HIIT_BONUS
        if (
            exercise.is_gym
            and len(exercise_muscles(exercise)) >= FAT_LOSS_MULTI_MUSCLE_THRESHOLD
        ):
            score += FAT_LOSS_MULTI_MUSCLE_GYM_BONUS
        if has_tag(exercise, FULL_BODY_TAG):
            score += FAT_LOSS_FULL_BODY_BONUS
        return score

    if exercise.is_gym:
        score += MUSCLE_GAIN_GYM_BONUS
    if is_compound_heavy(exercise):
        score += MUSCLE_GAIN_COMPOUND_BONUS
    if is_cardio_like(exercise):
        score += MUSCLE_GAIN_CARDIO_PENALTY
    return score


def recovery_score(exercise: Exercise, summary: RollingSummary) -> float:
    """Penalty proportional to the 48h load on the exercise's muscles.

    Returns:
        Zero or a negative number; heavier recent load gives a lower score.
    """
    penalty = 0.0
    for muscle in exercise_muscles(exercise):
        penalty += summary.load_for(muscle) * RECOVERY_LOAD_PENALTY_PER_UNIT
    return -penalty


def novelty_score(exercise: Exercise, summary: RollingSummary) -> float:
    """Favour exercises not done recently; never-logged ones score highest."""
    days_ago = summary.last_seen(exercise.id)
    for max_days, score in NOVELTY_BANDS:
        if days_ago <= max_days:
            return float(score)
    return float(NOVELTY_FALLBACK_SCORE)


def score_exercise(
    exercise: Exercise, goal: Goal, summary: RollingSummary
) -> ScoredCandidate:
    """Sum the three terms and collect reason tags."""
    reasons: list[str] = []

    goal_term = goal_score(exercise, goal)
    if goal_term > 0:
        reasons.append(REASON_GOAL_ALIGNED)

    recovery_term = recovery_score(exercise, summary)
    if recovery_term < 0:
        reasons.append(REASON_RECOVERY_AWARE)

    novelty_term = novelty_score(exercise, summary)
    if novelty_term > 0:
        reasons.append(REASON_VARIETY)

    return ScoredCandidate(
        exercise=exercise,
        score=goal_term + recovery_term + novelty_term,
        reasons=tuple(reasons),
    )


def rank_candidates(
    pool: Iterable[Exercise], goal: Goal, summary: RollingSummary
) -> list[ScoredCandidate]:
    """Score every candidate and sort by score, highest first.

    ``sorted`` is stable, so equal scores keep catalog order.
    """
    scored = [score_exercise(ex, goal, summary) for ex in pool]
    return sorted(scored, key=lambda c: c.score, reverse=True)

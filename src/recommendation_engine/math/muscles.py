"""Tag heuristics: muscle extraction, cardio-likeness, compound detection.

All classification here is plain substring / set matching on the catalog's
free-form tags and names. It is intentionally not semantic: "Barbell Row"
and "Rowing Machine" both match the "row" keyword.
"""

from __future__ import annotations

from recommendation_engine.models.enums import (
    COMPOUND_NAME_KEYWORDS,
    CORE_MUSCLE,
    ENDURANCE_TAG,
    HIIT_TAG,
    KNOWN_MUSCLE_TAGS,
    MUSCLE_TAG_EXPANSIONS,
    Category,
)
from recommendation_engine.models.exercise import Exercise


def normalize_tag(tag: str) -> str:
    """Trim and lower-case a tag. e.g. ' HIIT ' -> 'hiit'."""
    return tag.strip().lower()


def normalized_tags(exercise: Exercise) -> list[str]:
    return [normalize_tag(t) for t in exercise.tags]


def has_tag(exercise: Exercise, tag: str) -> bool:
    """Check for a normalized tag, case- and whitespace-insensitively."""
    return normalize_tag(tag) in normalized_tags(exercise)


def exercise_muscles(exercise: Exercise) -> list[str]:
    """Return the recognised muscles an exercise trains.

    Unknown tags are dropped and synthetic tags are expanded
    ("arms" -> biceps, triceps). Order of first appearance is kept and
    duplicates are removed, so ['arms', 'biceps'] gives ['biceps', 'triceps'].

    Args:
        exercise: Catalog entry to inspect.

    Returns:
        List of distinct muscle names.
    """
    muscles: list[str] = []
    for tag in normalized_tags(exercise):
        if tag not in KNOWN_MUSCLE_TAGS:
            continue
        for muscle in MUSCLE_TAG_EXPANSIONS.get(tag, (tag,)):
            if muscle not in muscles:
                muscles.append(muscle)
    return muscles


def trains_core(exercise: Exercise) -> bool:
    return CORE_MUSCLE in exercise_muscles(exercise)


def is_hiit(exercise: Exercise) -> bool:
    return has_tag(exercise, HIIT_TAG)


def is_cardio_like(exercise: Exercise) -> bool:
    """Cardio category, or tagged endurance / HIIT regardless of category."""
    tags = normalized_tags(exercise)
    return (
        exercise.category == Category.CARDIO
        or ENDURANCE_TAG in tags
        or HIIT_TAG in tags
    )


def is_compound_heavy(exercise: Exercise) -> bool:
    """Name-based heuristic for multi-joint, high-load lifts."""
    name = exercise.name.lower()
    return any(keyword in name for keyword in COMPOUND_NAME_KEYWORDS)


def overlap_count(a: list[str], b: list[str]) -> int:
    """Count entries of *b* that also appear in *a* (duplicates in *b* count)."""
    seen = set(a)
    return sum(1 for item in b if item in seen)


def overlaps(muscles: list[str], worked: frozenset[str] | set[str]) -> bool:
    return any(m in worked for m in muscles)

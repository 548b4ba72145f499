"""Enumerations and scoring constants for the recommendation engine.

Constant values mirror the heuristics used by the mobile app's daily
recommendation screen; changing them changes rankings for every user.
"""

from enum import Enum


class Goal(str, Enum):
    """Training goal chosen by the user.

    Only FAT_LOSS has its own strategy; every other goal is scored and
    selected with the MUSCLE_GAIN branch.
    """

    MASS_GAIN = "mass_gain"
    FAT_LOSS = "fat_loss"
    MUSCLE_GAIN = "muscle_gain"
    STRENGTH = "strength"
    ENDURANCE = "endurance"
    MOBILITY = "mobility"


class FitnessLevel(str, Enum):
    """Self-reported training experience."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Category(str, Enum):
    """Catalog category of an exercise."""

    CARDIO = "cardio"
    GYM = "gym"


class IntensityLevel(str, Enum):
    """Perceived intensity recorded with a workout log."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


# ---------------------------------------------------------------------------
# Tag vocabulary
# ---------------------------------------------------------------------------

KNOWN_MUSCLE_TAGS = frozenset({
    "chest",
    "back",
    "legs",
    "shoulders",
    "biceps",
    "triceps",
    "core",
    "arms",
    "full body",
})

# Synthetic tags that stand for several muscles
MUSCLE_TAG_EXPANSIONS: dict[str, tuple[str, ...]] = {
    "arms": ("biceps", "triceps"),
}

# Name substrings marking multi-joint, high-load movements
COMPOUND_NAME_KEYWORDS: tuple[str, ...] = (
    "deadlift",
    "squat",
    "bench",
    "row",
    "pull-up",
    "overhead press",
)

ENDURANCE_TAG = "endurance"
HIIT_TAG = "hiit"
FULL_BODY_TAG = "full body"
MOBILITY_TAG = "mobility"
CORE_MUSCLE = "core"

# ---------------------------------------------------------------------------
# Rolling summary
# ---------------------------------------------------------------------------

INTENSITY_WEIGHTS: dict[IntensityLevel, float] = {
    IntensityLevel.HIGH: 2.0,
    IntensityLevel.MODERATE: 1.5,
    IntensityLevel.LOW: 1.0,
}
DEFAULT_INTENSITY_WEIGHT = 1.0
CARDIO_BASE_LOAD = 1.0
RECENT_LOAD_WINDOW_DAYS = 2  # days-ago 0..2 feed the 48h load map
NEVER_SEEN_DAYS_AGO = 999

# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

FAT_LOSS_CARDIO_BONUS = 40
FAT_LOSS_HIIT_BONUS = 10
FAT_LOSS_MULTI_MUSCLE_GYM_BONUS = 12
FAT_LOSS_MULTI_MUSCLE_THRESHOLD = 3
FAT_LOSS_FULL_BODY_BONUS = 8

MUSCLE_GAIN_GYM_BONUS = 40
MUSCLE_GAIN_COMPOUND_BONUS = 10
MUSCLE_GAIN_CARDIO_PENALTY = -10

RECOVERY_LOAD_PENALTY_PER_UNIT = 8

# (max days-ago, score) bands checked in order; anything older gets the fallback
NOVELTY_BANDS: tuple[tuple[int, int], ...] = (
    (1, -30),
    (3, -10),
    (7, 5),
)
NOVELTY_FALLBACK_SCORE = 12

REASON_GOAL_ALIGNED = "Goal-aligned"
REASON_RECOVERY_AWARE = "Recovery-aware"
REASON_VARIETY = "Variety"

# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

DEFAULT_RECOMMENDATION_COUNT = 6
ALTERNATIVE_MIN_SHARED_MUSCLES = 2
ALTERNATIVE_MIN_DAYS_SINCE_SEEN = 3  # alternative must be seen strictly longer ago
BACKFILL_LABEL = "backfill"

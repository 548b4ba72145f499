"""Data models for the recommendation engine."""

from recommendation_engine.models.decision_trace import FilterResult, RecommendationTrace
from recommendation_engine.models.enums import (
    Category,
    FitnessLevel,
    Goal,
    IntensityLevel,
)
from recommendation_engine.models.exercise import Exercise
from recommendation_engine.models.recommendation import ScoredCandidate, TodayRecommendation
from recommendation_engine.models.summary import RollingSummary
from recommendation_engine.models.workout_log import WorkoutLog

__all__ = [
    "Category",
    "Exercise",
    "FilterResult",
    "FitnessLevel",
    "Goal",
    "IntensityLevel",
    "RecommendationTrace",
    "RollingSummary",
    "ScoredCandidate",
    "TodayRecommendation",
    "WorkoutLog",
]

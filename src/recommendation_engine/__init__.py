"""Daily workout recommendation engine."""

from recommendation_engine.engine import RecommendationEngine, recommend_today

__all__ = ["RecommendationEngine", "recommend_today"]

"""Environment-variable-based configuration for the daily scheduler."""

from __future__ import annotations

import os
from pathlib import Path

# Empty means "use the built-in catalog"
CATALOG_PATH: str = os.environ.get("CATALOG_PATH", "")
WORKOUT_LOGS_PATH: Path = Path(os.environ.get("WORKOUT_LOGS_PATH", "data/workout_logs.json"))
RECOMMENDATIONS_OUTPUT: Path = Path(
    os.environ.get("RECOMMENDATIONS_OUTPUT", "data/today.json")
)
USER_GOAL: str = os.environ.get("USER_GOAL", "muscle_gain")
USER_FITNESS_LEVEL: str = os.environ.get("USER_FITNESS_LEVEL", "intermediate")
RECOMMENDATION_COUNT: int = int(os.environ.get("RECOMMENDATION_COUNT", "6"))
DAILY_HOUR: int = int(os.environ.get("SCHEDULER_HOUR", "6"))
DAILY_MINUTE: int = int(os.environ.get("SCHEDULER_MINUTE", "0"))

"""Daily scheduler: writes today's workout recommendations to a JSON file.

Usage:
    python -m scheduler.daily --once      # single run (for cron)
    python -m scheduler.daily --daemon    # APScheduler loop
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from recommendation_engine.catalog import DEFAULT_EXERCISES, logs_in_window
from recommendation_engine.engine import RecommendationEngine
from recommendation_engine.exceptions import RecommendationEngineError
from recommendation_engine.models.exercise import Exercise
from recommendation_engine.models.workout_log import WorkoutLog
from recommendation_engine.serialization import load_catalog, load_logs, to_json_string

from scheduler.config import (
    CATALOG_PATH,
    DAILY_HOUR,
    DAILY_MINUTE,
    RECOMMENDATION_COUNT,
    RECOMMENDATIONS_OUTPUT,
    USER_FITNESS_LEVEL,
    USER_GOAL,
    WORKOUT_LOGS_PATH,
)

logger = logging.getLogger(__name__)


def _load_catalog(catalog_path: str) -> list[Exercise]:
    """Load the configured catalog, or fall back to the built-in one."""
    if not catalog_path:
        return list(DEFAULT_EXERCISES)
    return load_catalog(catalog_path)


def _load_logs(logs_path: Path) -> list[WorkoutLog]:
    """Missing log file means no history yet, not an error."""
    if not logs_path.exists():
        logger.info("No workout log file at %s; assuming no history", logs_path)
        return []
    return load_logs(logs_path)


def daily_job(
    today: date | None = None,
    catalog_path: str = CATALOG_PATH,
    logs_path: Path = WORKOUT_LOGS_PATH,
    output_path: Path = RECOMMENDATIONS_OUTPUT,
    goal: str = USER_GOAL,
    fitness_level: str = USER_FITNESS_LEVEL,
    count: int = RECOMMENDATION_COUNT,
) -> bool:
    """Execute one daily cycle: load data, recommend, write JSON.

    Returns:
        True if recommendations were written, False if the run was skipped.
    """
    today = today or date.today()
    logger.info("Starting daily job for %s", today.isoformat())

    # 1. Load catalog and history
    try:
        exercises = _load_catalog(catalog_path)
        logs = logs_in_window(_load_logs(Path(logs_path)), today)
    except (OSError, RecommendationEngineError) as exc:
        logger.error("Failed to load input data: %s", exc)
        return False
    logger.info("Loaded %d exercises and %d recent logs", len(exercises), len(logs))

    # 2. Recommend
    engine = RecommendationEngine()
    recommendations, trace = engine.recommend(
        goal, fitness_level, logs, exercises, today, count
    )
    logger.info(
        "Recommended %d exercises (%d excluded by hard filters)",
        len(recommendations),
        len(trace.filter_results),
    )

    # 3. Write output
    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(to_json_string(recommendations), encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to write recommendations to %s: %s", output_path, exc)
        return False

    logger.info("Daily job complete; wrote %s", output_path)
    return True


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m scheduler.daily",
        description="Write today's workout recommendations to a JSON file",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--once", action="store_true", help="Run a single cycle and exit")
    mode.add_argument(
        "--daemon",
        action="store_true",
        help=f"Run every day at {DAILY_HOUR:02d}:{DAILY_MINUTE:02d} until interrupted",
    )
    return parser


def _run_daemon() -> None:
    from apscheduler.schedulers.blocking import BlockingScheduler

    scheduler = BlockingScheduler()
    # A run missed by up to an hour fires once when the scheduler catches up
    scheduler.add_job(
        daily_job,
        "cron",
        hour=DAILY_HOUR,
        minute=DAILY_MINUTE,
        id="daily_recommendations",
        coalesce=True,
        misfire_grace_time=3600,
    )
    logger.info(
        "Daily recommendations scheduled at %02d:%02d",
        DAILY_HOUR,
        DAILY_MINUTE,
    )
    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Scheduler stopped")


def main(argv: list[str] | None = None) -> int:
    """Entry point. Returns a process exit code; 1 when a --once run is skipped."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = _build_parser().parse_args(argv)

    if args.once:
        return 0 if daily_job() else 1
    _run_daemon()
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""JSON codec for catalog/log payloads and recommendation output.

Parsing turns the app's JSON rows (the same shape the remote tables
store) into frozen models and raises the boundary exceptions on bad data.
Export produces plain dicts for the display layer. Apart from the two
``load_*`` helpers, all functions are pure.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any, Sequence

from recommendation_engine.exceptions import CatalogFormatError, LogFormatError
from recommendation_engine.models.enums import Category, IntensityLevel
from recommendation_engine.models.exercise import Exercise
from recommendation_engine.models.recommendation import TodayRecommendation
from recommendation_engine.models.workout_log import WorkoutLog

_EXERCISE_REQUIRED = ("id", "name", "category")
_LOG_REQUIRED = ("exercise_id", "performed_at")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def exercise_from_dict(data: dict[str, Any]) -> Exercise:
    """Build an Exercise from a catalog row.

    Raises:
        CatalogFormatError: missing keys, unknown category or non-list tags.
    """
    if not isinstance(data, dict):
        raise CatalogFormatError(f"Exercise entry must be an object, got {type(data).__name__}")

    missing = [key for key in _EXERCISE_REQUIRED if key not in data]
    if missing:
        raise CatalogFormatError(
            f"Exercise entry missing {', '.join(missing)}", exercise_id=data.get("id")
        )

    try:
        category = Category(data["category"])
    except ValueError:
        raise CatalogFormatError(
            f"Unknown category {data['category']!r}", exercise_id=data["id"]
        ) from None

    tags = data.get("tags") or []
    steps = data.get("steps") or []
    if not isinstance(tags, list) or not isinstance(steps, list):
        raise CatalogFormatError("tags and steps must be lists", exercise_id=data["id"])

    try:
        exercise_id = int(data["id"])
    except (TypeError, ValueError):
        raise CatalogFormatError(
            f"Exercise id {data['id']!r} is not an integer", exercise_id=data["id"]
        ) from None

    return Exercise(
        id=exercise_id,
        name=str(data["name"]),
        category=category,
        tags=tuple(str(t) for t in tags),
        sets=str(data.get("sets") or ""),
        steps=tuple(str(s) for s in steps),
        image_url=data.get("image_url"),
    )


def _parse_date(value: Any, log_id: object) -> date:
    if isinstance(value, date):
        return value
    try:
        # Accept full timestamps too; only the YYYY-MM-DD prefix matters
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        raise LogFormatError(f"Invalid performed_at {value!r}", log_id=log_id) from None


def _parse_optional_int(value: Any, field_name: str, log_id: object) -> int | None:
    if value is None:
        return None
    # bool is an int subclass; floats would be truncated silently
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise LogFormatError(f"Invalid {field_name} {value!r}", log_id=log_id)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise LogFormatError(f"Invalid {field_name} {value!r}", log_id=log_id) from None


def workout_log_from_dict(data: dict[str, Any]) -> WorkoutLog:
    """Build a WorkoutLog from a log row.

    Raises:
        LogFormatError: missing keys, bad date, bad numbers or unknown intensity.
    """
    if not isinstance(data, dict):
        raise LogFormatError(f"Log entry must be an object, got {type(data).__name__}")

    log_id = data.get("id")
    missing = [key for key in _LOG_REQUIRED if key not in data]
    if missing:
        raise LogFormatError(f"Log entry missing {', '.join(missing)}", log_id=log_id)

    intensity = data.get("intensity")
    if intensity is not None:
        try:
            intensity = IntensityLevel(intensity)
        except ValueError:
            raise LogFormatError(f"Unknown intensity {intensity!r}", log_id=log_id) from None

    exercise_id = _parse_optional_int(data["exercise_id"], "exercise_id", log_id)
    if exercise_id is None:
        raise LogFormatError("exercise_id must not be null", log_id=log_id)

    return WorkoutLog(
        exercise_id=exercise_id,
        performed_at=_parse_date(data["performed_at"], log_id),
        sets=_parse_optional_int(data.get("sets"), "sets", log_id),
        reps=_parse_optional_int(data.get("reps"), "reps", log_id),
        intensity=intensity,
        id=str(log_id or ""),
        user_id=str(data.get("user_id") or ""),
        created_at=str(data.get("created_at") or ""),
    )


def _load_list(path: Path, error_cls: type[CatalogFormatError] | type[LogFormatError]) -> list:
    with open(path, encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as exc:
            raise error_cls(f"{path}: invalid JSON ({exc.msg})") from exc
        except UnicodeDecodeError as exc:
            raise error_cls(f"{path}: not valid UTF-8") from exc
    if not isinstance(payload, list):
        raise error_cls(f"{path}: expected a JSON list")
    return payload


def load_catalog(path: str | Path) -> list[Exercise]:
    """Read a JSON list of exercises from disk."""
    return [exercise_from_dict(row) for row in _load_list(Path(path), CatalogFormatError)]


def load_logs(path: str | Path) -> list[WorkoutLog]:
    """Read a JSON list of workout logs from disk."""
    return [workout_log_from_dict(row) for row in _load_list(Path(path), LogFormatError)]


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


def exercise_to_dict(exercise: Exercise) -> dict[str, Any]:
    result: dict[str, Any] = {
        "id": exercise.id,
        "name": exercise.name,
        "category": exercise.category.value,
        "tags": list(exercise.tags),
        "sets": exercise.sets,
        "steps": list(exercise.steps),
    }
    if exercise.image_url is not None:
        result["image_url"] = exercise.image_url
    return result


def recommendation_to_dict(rec: TodayRecommendation) -> dict[str, Any]:
    """Convert a TodayRecommendation to a JSON-ready dict.

    ``alternative`` is null when the engine found no stand-in.
    """
    return {
        "exercise": exercise_to_dict(rec.exercise),
        "score": rec.score,
        "reasons": list(rec.reasons),
        "alternative": (
            exercise_to_dict(rec.alternative) if rec.alternative is not None else None
        ),
    }


def to_json_string(
    recommendations: Sequence[TodayRecommendation], indent: int = 2
) -> str:
    """Serialise an ordered recommendation list to a JSON array string."""
    return json.dumps([recommendation_to_dict(r) for r in recommendations], indent=indent)

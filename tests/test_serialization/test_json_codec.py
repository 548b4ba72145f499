"""Tests for the JSON codec: catalog/log parsing, file loading and export."""

from __future__ import annotations

import json
from datetime import date

import pytest

from recommendation_engine.catalog import DEFAULT_EXERCISES
from recommendation_engine.exceptions import (
    CatalogFormatError,
    LogFormatError,
    RecommendationEngineError,
)
from recommendation_engine.models.enums import Category, IntensityLevel
from recommendation_engine.models.exercise import Exercise
from recommendation_engine.models.recommendation import TodayRecommendation
from recommendation_engine.serialization import (
    exercise_from_dict,
    exercise_to_dict,
    load_catalog,
    load_logs,
    recommendation_to_dict,
    to_json_string,
    workout_log_from_dict,
)

SQUAT_ROW = {
    "id": 7,
    "name": "Squats",
    "category": "gym",
    "tags": ["legs", "core"],
    "sets": "4 sets of 8-10 reps",
    "steps": ["Stand with feet shoulder-width apart.", "Stand back up."],
}

LOG_ROW = {
    "id": "a1b2",
    "user_id": "user-1",
    "exercise_id": 7,
    "performed_at": "2026-03-09",
    "sets": 4,
    "reps": 8,
    "intensity": "high",
    "created_at": "2026-03-09T18:22:05Z",
}


class TestExerciseFromDict:
    def test_parses_full_row(self) -> None:
        ex = exercise_from_dict(SQUAT_ROW)
        assert ex.id == 7
        assert ex.category == Category.GYM
        assert ex.tags == ("legs", "core")
        assert ex.steps[0].startswith("Stand")
        assert ex.image_url is None

    def test_optional_fields_default(self) -> None:
        ex = exercise_from_dict({"id": "3", "name": "Plank", "category": "gym"})
        assert ex.id == 3
        assert ex.tags == ()
        assert ex.sets == ""

    def test_missing_required_key(self) -> None:
        with pytest.raises(CatalogFormatError, match="category") as exc_info:
            exercise_from_dict({"id": 4, "name": "Deadlift"})
        assert exc_info.value.exercise_id == 4

    def test_unknown_category(self) -> None:
        with pytest.raises(CatalogFormatError, match="Unknown category"):
            exercise_from_dict({**SQUAT_ROW, "category": "yoga"})

    def test_tags_must_be_list(self) -> None:
        with pytest.raises(CatalogFormatError):
            exercise_from_dict({**SQUAT_ROW, "tags": "legs"})

    def test_non_integer_id(self) -> None:
        with pytest.raises(CatalogFormatError, match="not an integer"):
            exercise_from_dict({**SQUAT_ROW, "id": "seven"})

    def test_non_object_entry(self) -> None:
        with pytest.raises(CatalogFormatError):
            exercise_from_dict(["Squats"])  # type: ignore[arg-type]


class TestWorkoutLogFromDict:
    def test_parses_full_row(self) -> None:
        log = workout_log_from_dict(LOG_ROW)
        assert log.exercise_id == 7
        assert log.performed_at == date(2026, 3, 9)
        assert log.intensity == IntensityLevel.HIGH
        assert log.id == "a1b2"
        assert log.created_at == "2026-03-09T18:22:05Z"

    def test_timestamp_is_truncated_to_date(self) -> None:
        log = workout_log_from_dict({**LOG_ROW, "performed_at": "2026-03-09T23:59:00Z"})
        assert log.performed_at == date(2026, 3, 9)

    def test_optional_fields_may_be_null(self) -> None:
        log = workout_log_from_dict(
            {"exercise_id": 17, "performed_at": "2026-03-09", "sets": None, "intensity": None}
        )
        assert log.sets is None
        assert log.reps is None
        assert log.intensity is None
        assert log.id == ""

    def test_missing_performed_at(self) -> None:
        with pytest.raises(LogFormatError, match="performed_at") as exc_info:
            workout_log_from_dict({"id": "x", "exercise_id": 1})
        assert exc_info.value.log_id == "x"

    def test_bad_date(self) -> None:
        with pytest.raises(LogFormatError, match="performed_at"):
            workout_log_from_dict({**LOG_ROW, "performed_at": "yesterday"})

    def test_unknown_intensity(self) -> None:
        with pytest.raises(LogFormatError, match="intensity"):
            workout_log_from_dict({**LOG_ROW, "intensity": "extreme"})

    def test_bad_sets(self) -> None:
        with pytest.raises(LogFormatError, match="sets"):
            workout_log_from_dict({**LOG_ROW, "sets": "lots"})

    def test_fractional_sets_rejected(self) -> None:
        with pytest.raises(LogFormatError, match="sets"):
            workout_log_from_dict({**LOG_ROW, "sets": 3.7})

    def test_boolean_reps_rejected(self) -> None:
        with pytest.raises(LogFormatError, match="reps"):
            workout_log_from_dict({**LOG_ROW, "reps": True})

    def test_whole_float_sets_accepted(self) -> None:
        assert workout_log_from_dict({**LOG_ROW, "sets": 4.0}).sets == 4

    def test_null_exercise_id(self) -> None:
        with pytest.raises(LogFormatError):
            workout_log_from_dict({**LOG_ROW, "exercise_id": None})

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(RecommendationEngineError):
            workout_log_from_dict("not a row")  # type: ignore[arg-type]


class TestLoaders:
    def test_load_catalog(self, tmp_path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([SQUAT_ROW]), encoding="utf-8")
        catalog = load_catalog(path)
        assert [ex.name for ex in catalog] == ["Squats"]

    def test_load_logs(self, tmp_path) -> None:
        path = tmp_path / "logs.json"
        path.write_text(json.dumps([LOG_ROW, {**LOG_ROW, "id": "c3"}]), encoding="utf-8")
        logs = load_logs(str(path))
        assert [log.id for log in logs] == ["a1b2", "c3"]

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "logs.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(LogFormatError, match="invalid JSON"):
            load_logs(path)

    def test_non_utf8_file(self, tmp_path) -> None:
        path = tmp_path / "catalog.json"
        path.write_bytes(b'[{"id": 1, "name": "Bench \xff"}]')
        with pytest.raises(CatalogFormatError, match="not valid UTF-8"):
            load_catalog(path)

    def test_root_must_be_list(self, tmp_path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"exercises": []}), encoding="utf-8")
        with pytest.raises(CatalogFormatError, match="expected a JSON list"):
            load_catalog(path)

    def test_missing_file_raises_os_error(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "nope.json")


class TestExport:
    def test_exercise_to_dict_parses_back(self) -> None:
        bench = DEFAULT_EXERCISES[0]
        data = exercise_to_dict(bench)
        assert data["category"] == "gym"
        assert "image_url" in data
        assert exercise_from_dict(data) == bench

    def test_image_url_omitted_when_unset(self) -> None:
        data = exercise_to_dict(exercise_from_dict(SQUAT_ROW))
        assert "image_url" not in data

    def test_recommendation_to_dict(self) -> None:
        squat = exercise_from_dict(SQUAT_ROW)
        lunge = Exercise(id=9, name="Lunges", category=Category.GYM, tags=("legs",))
        rec = TodayRecommendation(
            exercise=squat, score=62.0, reasons=("Goal-aligned", "Variety"), alternative=lunge
        )
        data = recommendation_to_dict(rec)
        assert data["score"] == 62.0
        assert data["reasons"] == ["Goal-aligned", "Variety"]
        assert data["alternative"]["id"] == 9

    def test_no_alternative_is_null(self) -> None:
        rec = TodayRecommendation(exercise=exercise_from_dict(SQUAT_ROW), score=1.0)
        assert recommendation_to_dict(rec)["alternative"] is None

    def test_to_json_string_keeps_order(self) -> None:
        recs = [
            TodayRecommendation(exercise=ex, score=float(10 - i))
            for i, ex in enumerate(DEFAULT_EXERCISES[:3])
        ]
        parsed = json.loads(to_json_string(recs))
        assert [item["exercise"]["id"] for item in parsed] == [1, 2, 3]
        assert to_json_string([]) == "[]"

"""Tests for parsing external JSON payloads."""

import json
import logging
import pytest
from datetime import date

from training_load.exceptions import (
    InputParseError,
    InvalidIntensityError,
    ValidationError,
)
from training_load.io import (
    load_json,
    parse_activities,
    parse_check_in,
    parse_fitness_points,
    parse_modification_context,
    parse_training_history,
    parse_workout,
)
from training_load.models import Readiness, WorkoutIntensity


class TestLoadJson:
    """Tests for reading JSON files."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "points.json"
        path.write_text(json.dumps([{"a": 1}]))

        assert load_json(path) == [{"a": 1}]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(InputParseError, match="Invalid JSON"):
            load_json(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputParseError, match="Cannot read"):
            load_json(tmp_path / "missing.json")


class TestParseFitnessPoints:
    """Tests for fitness series parsing."""

    def test_sorted_by_date(self):
        points = parse_fitness_points([
            {"date": "2024-03-05", "ctl": 51, "atl": 50, "tsb": 1},
            {"date": "2024-03-04", "ctl": 50, "atl": 52, "tsb": -2, "rampRate": 4.5},
        ])

        assert [p.date for p in points] == [date(2024, 3, 4), date(2024, 3, 5)]
        assert points[0].ramp_rate == 4.5

    def test_duplicate_date_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            parse_fitness_points([
                {"date": "2024-03-04", "ctl": 50, "atl": 52, "tsb": -2},
                {"date": "2024-03-04", "ctl": 51, "atl": 50, "tsb": 1},
            ])

    def test_schema_errors_collected(self):
        with pytest.raises(InputParseError) as exc_info:
            parse_fitness_points([{"date": "yesterday", "ctl": 50, "atl": 52}])

        locs = {err["loc"] for err in exc_info.value.details["errors"]}
        assert "0.date" in locs
        assert "0.tsb" in locs


class TestParseInputs:
    """Tests for the remaining boundary parsers."""

    def test_activities(self):
        activities = parse_activities([{"date": "2024-03-04", "tss": 65, "duration": 50}])

        assert activities[0].tss == 65
        assert activities[0].duration_minutes == 50

    def test_activities_must_be_list(self):
        with pytest.raises(InputParseError):
            parse_activities({"date": "2024-03-04"})

    def test_workout_unknown_intensity(self):
        with pytest.raises(InvalidIntensityError):
            parse_workout({"sport": "run", "durationMinutes": 30, "intensity": "hard"})

    def test_proposed_workout_unknown_intensity_defaults(self, caplog):
        """AI-proposed workouts fall back to moderate instead of failing."""
        with caplog.at_level(logging.WARNING):
            workout = parse_workout(
                {"sport": "run", "durationMinutes": 30, "intensity": "hard"},
                strict=False,
            )

        assert workout.intensity == WorkoutIntensity.MODERATE
        assert "hard" in caplog.text

    def test_lenient_parse_keeps_known_intensity(self):
        workout = parse_workout(
            {"sport": "run", "durationMinutes": 30, "intensity": "Tempo"}, strict=False
        )
        assert workout.intensity == WorkoutIntensity.TEMPO

    def test_workout_missing_fields(self):
        with pytest.raises(InputParseError) as exc_info:
            parse_workout({"sport": "run", "intensity": "easy"})

        assert exc_info.value.details["errors"][0]["loc"] == "durationMinutes"

    def test_training_history(self):
        history = parse_training_history({
            "activities": [{"date": "2024-03-04", "tss": 80, "intensity": "unknown"}],
            "fitnessMetrics": {"ctl": 60, "atl": 70, "tsb": -10, "rampRate": 5},
        })

        assert history.activities[0].intensity == WorkoutIntensity.MODERATE
        assert history.fitness_metrics.ramp_rate == 5

    def test_modification_context_default(self):
        context = parse_modification_context(None)

        assert context.readiness is None
        assert context.constraints == []

    def test_modification_context(self):
        context = parse_modification_context({
            "readiness": "red",
            "recentActivities": [{"date": "2024-03-04", "tss": 90, "intensity": "threshold"}],
        })

        assert context.readiness == Readiness.RED
        assert context.recent_activities[0].intensity == WorkoutIntensity.THRESHOLD

    def test_check_in_out_of_range(self):
        with pytest.raises(InputParseError):
            parse_check_in({"sleepQuality": 11})

    def test_check_in(self):
        check_in = parse_check_in({"sleepHours": 7.5, "equipmentAccess": ["pool"]})

        assert check_in.sleep_hours == 7.5
        assert check_in.equipment_access == ["pool"]

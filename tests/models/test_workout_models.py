"""Tests for workout intensity and input models."""

import logging
import pytest
from datetime import date

from pydantic import ValidationError as PydanticValidationError

from training_load.exceptions import ErrorCode, InvalidIntensityError
from training_load.models import (
    ActivityRecord,
    HistoryActivity,
    ProposedWorkout,
    WorkoutIntensity,
    WorkoutSport,
)


class TestWorkoutIntensity:
    """Tests for the ordered intensity enum."""

    def test_total_order(self):
        ordered = [
            WorkoutIntensity.RECOVERY,
            WorkoutIntensity.EASY,
            WorkoutIntensity.MODERATE,
            WorkoutIntensity.TEMPO,
            WorkoutIntensity.THRESHOLD,
            WorkoutIntensity.VO2MAX,
            WorkoutIntensity.SPRINT,
        ]

        assert sorted(reversed(ordered)) == ordered
        assert [i.order for i in ordered] == list(range(7))

    def test_comparison_uses_training_order(self):
        # Alphabetically "easy" < "tempo" < "threshold" < "vo2max" would disagree
        assert WorkoutIntensity.VO2MAX > WorkoutIntensity.THRESHOLD
        assert WorkoutIntensity.SPRINT > WorkoutIntensity.RECOVERY
        assert WorkoutIntensity.MODERATE <= WorkoutIntensity.MODERATE

    def test_is_hard(self):
        assert WorkoutIntensity.THRESHOLD.is_hard
        assert WorkoutIntensity.SPRINT.is_hard
        assert not WorkoutIntensity.TEMPO.is_hard

    def test_from_order_clamps(self):
        assert WorkoutIntensity.from_order(3) == WorkoutIntensity.TEMPO
        assert WorkoutIntensity.from_order(9) == WorkoutIntensity.SPRINT
        assert WorkoutIntensity.from_order(-1) == WorkoutIntensity.RECOVERY

    def test_parse_case_insensitive(self):
        assert WorkoutIntensity.parse(" VO2Max ") == WorkoutIntensity.VO2MAX

    def test_parse_strict_rejects_unknown(self):
        with pytest.raises(InvalidIntensityError) as exc_info:
            WorkoutIntensity.parse("hard")

        assert exc_info.value.code == ErrorCode.INVALID_INTENSITY
        assert exc_info.value.details["value"] == "hard"

    def test_parse_lenient_defaults_to_moderate(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = WorkoutIntensity.parse("zone 9", strict=False)

        assert result == WorkoutIntensity.MODERATE
        assert "zone 9" in caplog.text


class TestProposedWorkout:
    """Tests for the ProposedWorkout boundary model."""

    def test_parse_camel_case(self):
        workout = ProposedWorkout.model_validate({
            "sport": "Run",
            "durationMinutes": 45,
            "intensity": "tempo",
            "estimatedTSS": 55,
        })

        assert workout.sport == WorkoutSport.RUN
        assert workout.duration_minutes == 45
        assert workout.intensity == WorkoutIntensity.TEMPO
        assert workout.estimated_tss == 55

    def test_unknown_intensity_rejected(self):
        with pytest.raises(InvalidIntensityError):
            ProposedWorkout(sport="run", duration_minutes=30, intensity="hard")

    def test_negative_duration_rejected(self):
        with pytest.raises(PydanticValidationError):
            ProposedWorkout(sport="run", duration_minutes=-5, intensity="easy")

    def test_unknown_sport_rejected(self):
        with pytest.raises(PydanticValidationError):
            ProposedWorkout(sport="rowing", duration_minutes=30, intensity="easy")

    def test_frozen(self):
        workout = ProposedWorkout(sport="bike", duration_minutes=60, intensity="easy")

        with pytest.raises(PydanticValidationError):
            workout.duration_minutes = 90

    def test_dump_by_alias(self):
        workout = ProposedWorkout(
            sport="swim", duration_minutes=40, intensity="easy", estimated_tss=30
        )

        data = workout.model_dump(mode="json", by_alias=True)

        assert data == {
            "sport": "swim",
            "durationMinutes": 40.0,
            "intensity": "easy",
            "estimatedTSS": 30.0,
        }


class TestHistoryModels:
    """Tests for history and activity records."""

    def test_unknown_history_intensity_defaults(self):
        activity = HistoryActivity.model_validate(
            {"date": "2024-03-04", "tss": 80, "intensity": "brutal"}
        )

        assert activity.intensity == WorkoutIntensity.MODERATE
        assert activity.date == date(2024, 3, 4)

    def test_history_intensity_default(self):
        assert HistoryActivity(date=date(2024, 3, 4)).intensity == WorkoutIntensity.MODERATE

    def test_activity_duration_aliases(self):
        camel = ActivityRecord.model_validate({"date": "2024-03-04", "durationMinutes": 50})
        short = ActivityRecord.model_validate({"date": "2024-03-04", "duration": 40})

        assert camel.duration_minutes == 50
        assert short.duration_minutes == 40

    def test_negative_tss_rejected(self):
        with pytest.raises(PydanticValidationError):
            ActivityRecord.model_validate({"date": "2024-03-04", "tss": -1})

"""Tests for training load validation."""

import pytest

from training_load.config import Settings
from training_load.models import LoadWarningType, RiskLevel, WarningSeverity
from training_load.services.load_validation import (
    CRITICAL_LOAD_MESSAGE,
    SAFE_LOAD_MESSAGE,
    calculate_current_load,
    project_load,
    validate_training_load,
)


def warning_of(result, warning_type):
    return next(w for w in result.warnings if w.type == warning_type)


class TestCurrentAndProjectedLoad:
    """Tests for load snapshots."""

    def test_empty_history(self, make_history):
        load = calculate_current_load(make_history(ramp_rate=None))

        assert load.weekly_tss == 0.0
        assert load.monotony == 0.0
        assert load.strain == 0.0
        assert load.ramp_rate == 0.0

    def test_weekly_tss_from_last_seven_days(self, make_history):
        history = make_history(loads=[500, 0, 0, 50, 60, 0, 70, 80])

        load = calculate_current_load(history)

        # First load falls outside the 7-day window
        assert load.weekly_tss == pytest.approx(260.0)

    def test_projection(self, make_history):
        current = calculate_current_load(make_history(ctl=45.0, atl=50.0, tsb=-5.0))

        projected = project_load(current, 70.0)

        assert projected.atl == pytest.approx(60.0)
        assert projected.tsb == pytest.approx(-15.0)
        assert projected.weekly_tss == pytest.approx(70.0)
        assert projected.ctl == 45.0


class TestValidateTrainingLoad:
    """Tests for validate_training_load."""

    def test_safe_workout(self, make_history, make_workout):
        result = validate_training_load(make_workout("easy", 45), make_history())

        assert result.is_valid is True
        assert result.risk == RiskLevel.LOW
        assert result.warnings == ()
        assert result.recommendations == (SAFE_LOAD_MESSAGE,)

    def test_empty_history_never_raises(self, make_history, make_workout):
        result = validate_training_load(make_workout(), make_history(ramp_rate=None))

        assert result.current_load.weekly_tss == 0
        assert result.current_load.monotony == 0

    def test_overreaching_example(self, make_history, make_workout):
        """Threshold 90 min / 120 TSS while deeply fatigued is refused."""
        history = make_history(ctl=75.0, atl=110.0, tsb=-35.0)
        workout = make_workout("threshold", 90, tss=120)

        result = validate_training_load(workout, history)

        assert result.risk == RiskLevel.CRITICAL
        assert result.is_valid is False
        assert LoadWarningType.OVERREACHING in result.warning_types()
        assert result.recommendations[0] == CRITICAL_LOAD_MESSAGE
        assert result.projected_load.tsb == pytest.approx(-35.0 - 120 / 7)

    def test_overreaching_boundaries(self, make_history, make_workout):
        at_limit = validate_training_load(
            make_workout("moderate", tss=50), make_history(tsb=-25.0)
        )
        light = validate_training_load(
            make_workout("moderate", tss=49), make_history(tsb=-25.0)
        )
        fresher = validate_training_load(
            make_workout("moderate", tss=50), make_history(tsb=-24.9)
        )

        assert LoadWarningType.OVERREACHING in at_limit.warning_types()
        assert at_limit.risk == RiskLevel.CRITICAL
        assert light.warnings == ()
        assert fresher.warnings == ()

    def test_hard_workout_on_very_negative_form_is_critical(self, make_history, make_workout):
        history = make_history(tsb=-31.0)

        hard = validate_training_load(make_workout("threshold", tss=40), history)
        easy = validate_training_load(make_workout("easy", tss=40), history)

        assert hard.risk == RiskLevel.CRITICAL
        assert hard.warnings == ()
        assert easy.risk == RiskLevel.LOW

    @pytest.mark.parametrize("ramp,severity", [
        (8.0, None),
        (8.1, WarningSeverity.WARNING),
        (10.0, WarningSeverity.WARNING),
        (10.1, WarningSeverity.DANGER),
    ])
    def test_ramp_rate_bands(self, make_history, make_workout, ramp, severity):
        result = validate_training_load(make_workout(), make_history(ramp_rate=ramp))

        if severity is None:
            assert result.warnings == ()
        else:
            warning = warning_of(result, LoadWarningType.RAMP_RATE)
            assert warning.severity == severity
            assert warning.actual == ramp

    def test_single_warning_is_moderate(self, make_history, make_workout):
        result = validate_training_load(make_workout(), make_history(ramp_rate=9.0))

        assert result.risk == RiskLevel.MODERATE
        assert result.is_valid is True

    def test_ramp_danger_is_high(self, make_history, make_workout):
        result = validate_training_load(make_workout(), make_history(ramp_rate=12.0))

        assert result.risk == RiskLevel.HIGH
        assert result.is_valid is True

    def test_consecutive_hard_days(self, make_history, make_workout):
        one = validate_training_load(make_workout(), make_history(), consecutive_hard_days=1)
        two = validate_training_load(make_workout(), make_history(), consecutive_hard_days=2)

        assert one.warnings == ()
        assert two.warning_types() == [LoadWarningType.CONSECUTIVE_HARD]

    def test_two_warnings_is_moderate(self, make_history, make_workout):
        result = validate_training_load(
            make_workout(), make_history(ramp_rate=9.0), consecutive_hard_days=2
        )

        assert len(result.warnings) == 2
        assert result.risk == RiskLevel.MODERATE

    def test_three_warnings_is_high(self, make_history, make_workout):
        history = make_history(ramp_rate=9.0, loads=[30, 30, 30, 30, 30, 30, 20])

        result = validate_training_load(make_workout(), history, consecutive_hard_days=2)

        assert set(result.warning_types()) == {
            LoadWarningType.RAMP_RATE,
            LoadWarningType.CONSECUTIVE_HARD,
            LoadWarningType.MONOTONY,
        }
        assert result.risk == RiskLevel.HIGH

    def test_uniform_week_flags_monotony_and_strain(self, make_history, make_workout):
        history = make_history(loads=[50] * 7)

        result = validate_training_load(make_workout(), history)

        assert result.current_load.monotony == 10.0
        assert result.current_load.strain == pytest.approx(3500.0)
        assert warning_of(result, LoadWarningType.MONOTONY).severity == WarningSeverity.WARNING
        assert warning_of(result, LoadWarningType.STRAIN).severity == WarningSeverity.DANGER
        assert result.risk == RiskLevel.HIGH

    def test_custom_settings(self, make_history, make_workout):
        settings = Settings(ramp_rate_warning=5.0, ramp_rate_danger=7.0)

        result = validate_training_load(
            make_workout(), make_history(ramp_rate=6.0), settings=settings
        )

        assert warning_of(result, LoadWarningType.RAMP_RATE).severity == WarningSeverity.WARNING

    def test_to_dict(self, make_history, make_workout):
        data = validate_training_load(make_workout(), make_history()).to_dict()

        assert data["isValid"] is True
        assert data["risk"] == "low"
        assert "weeklyTSS" in data["currentLoad"]
        assert data["projectedLoad"]["weeklyTSS"] == pytest.approx(55.0)

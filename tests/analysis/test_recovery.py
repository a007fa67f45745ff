"""Tests for recovery assessment."""

import pytest

from training_load.analysis.recovery import assess_recovery
from training_load.models import RecoveryFatigueLevel


class TestAssessRecovery:
    """Tests for assess_recovery."""

    def test_insufficient_data(self, make_points):
        assert assess_recovery(make_points([0.0] * 6)) is None

    @pytest.mark.parametrize("atl,level,days", [
        (40.0, RecoveryFatigueLevel.LOW, 0),
        (40.1, RecoveryFatigueLevel.MODERATE, 1),
        (70.0, RecoveryFatigueLevel.MODERATE, 1),
        (70.1, RecoveryFatigueLevel.HIGH, 2),
        (90.0, RecoveryFatigueLevel.HIGH, 2),
        (90.1, RecoveryFatigueLevel.VERY_HIGH, 3),
    ])
    def test_fatigue_bands(self, make_points, atl, level, days):
        points = make_points([0.0] * 7, ctls=[50.0] * 7, atls=[atl] * 7)

        assessment = assess_recovery(points)

        assert assessment.fatigue_level == level
        assert assessment.suggested_recovery_days == days

    def test_overreaching_ramp(self, make_points):
        ctls = [50.0, 51.0, 52.0, 54.0, 55.0, 56.0, 58.0]
        points = make_points([0.0] * 7, ctls=ctls)

        assessment = assess_recovery(points)

        assert assessment.ramp_rate == pytest.approx(8.0)
        assert assessment.is_overreaching is True

    def test_ramp_of_seven_is_not_overreaching(self, make_points):
        ctls = [50.0, 51.0, 52.0, 53.0, 54.0, 55.0, 57.0]
        points = make_points([0.0] * 7, ctls=ctls)

        assessment = assess_recovery(points)

        assert assessment.ramp_rate == pytest.approx(7.0)
        assert assessment.is_overreaching is False

    def test_ramp_just_above_seven_is_overreaching(self, make_points):
        ctls = [50.0, 51.0, 52.0, 53.0, 54.0, 55.0, 57.01]
        points = make_points([0.0] * 7, ctls=ctls)

        assessment = assess_recovery(points)

        assert assessment.ramp_rate == pytest.approx(7.01)
        assert assessment.is_overreaching is True

    def test_uses_last_seven_points(self, make_points):
        ctls = [10.0, 20.0, 30.0] + [50.0] * 7
        points = make_points([0.0] * 10, ctls=ctls)

        assessment = assess_recovery(points)

        assert assessment.ramp_rate == pytest.approx(0.0)

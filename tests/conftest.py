"""Shared fixtures for training load tests."""

from datetime import date, timedelta

import pytest

from training_load.config import get_settings
from training_load.models import (
    FitnessDataPoint,
    FitnessMetrics,
    HistoryActivity,
    ProposedWorkout,
    TrainingHistory,
)


START = date(2024, 3, 4)  # a Monday


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_points():
    """Build consecutive daily fitness points from parallel value lists."""

    def _make(tsbs, ctls=None, atls=None, start=START):
        points = []
        for i, tsb in enumerate(tsbs):
            ctl = ctls[i] if ctls is not None else 50.0
            atl = atls[i] if atls is not None else ctl - tsb
            points.append(FitnessDataPoint(
                date=start + timedelta(days=i),
                ctl=ctl,
                atl=atl,
                tsb=tsb,
            ))
        return points

    return _make


@pytest.fixture
def make_workout():
    """Build a proposed workout with sensible defaults."""

    def _make(intensity="moderate", duration=60, sport="run", tss=None):
        return ProposedWorkout(
            sport=sport,
            duration_minutes=duration,
            intensity=intensity,
            estimated_tss=tss,
        )

    return _make


@pytest.fixture
def make_history():
    """Build a training history from a fitness snapshot and daily loads."""

    def _make(ctl=60.0, atl=60.0, tsb=0.0, ramp_rate=3.0, loads=(), intensities=None, end=START):
        activities = []
        for i, tss in enumerate(loads):
            day = end - timedelta(days=len(loads) - 1 - i)
            intensity = intensities[i] if intensities else "moderate"
            activities.append(HistoryActivity(date=day, tss=tss, intensity=intensity))
        return TrainingHistory(
            activities=activities,
            fitness_metrics=FitnessMetrics(ctl=ctl, atl=atl, tsb=tsb, ramp_rate=ramp_rate),
        )

    return _make

"""Fitness time-series and training history input models."""

from datetime import date as date_type
from typing import List, Optional

from pydantic import AliasChoices, Field

from .common import InputModel
from .workouts import HistoryActivity


class FitnessDataPoint(InputModel):
    """
    Daily CTL/ATL/TSB values for one athlete.

    Series are expected in ascending date order with at most one point per
    calendar date.
    """

    date: date_type
    ctl: float  # Chronic Training Load (fitness)
    atl: float  # Acute Training Load (fatigue)
    tsb: float  # Training Stress Balance (form) = CTL - ATL
    ramp_rate: Optional[float] = None


class ActivityRecord(InputModel):
    """A completed activity with its training stress."""

    date: date_type
    duration_minutes: float = Field(
        0.0,
        ge=0,
        validation_alias=AliasChoices("durationMinutes", "duration_minutes", "duration"),
    )
    tss: float = Field(0.0, ge=0)
    type: Optional[str] = None


class FitnessMetrics(InputModel):
    """Latest fitness snapshot from the upstream provider."""

    ctl: float
    atl: float
    tsb: float
    ramp_rate: Optional[float] = None


class TrainingHistory(InputModel):
    """Recent daily loads plus the current fitness snapshot."""

    activities: List[HistoryActivity] = Field(default_factory=list)
    fitness_metrics: FitnessMetrics

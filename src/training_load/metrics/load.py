"""
Training load calculations: workout TSS estimates, daily load windows,
and Foster's monotony/strain.
"""

import statistics
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..models.workouts import HistoryActivity, ProposedWorkout, WorkoutIntensity


# Approximate TSS accumulated per hour at each intensity.
# One hour at threshold is 100 TSS by definition.
TSS_PER_HOUR: Dict[WorkoutIntensity, float] = {
    WorkoutIntensity.RECOVERY: 25.0,
    WorkoutIntensity.EASY: 40.0,
    WorkoutIntensity.MODERATE: 55.0,
    WorkoutIntensity.TEMPO: 70.0,
    WorkoutIntensity.THRESHOLD: 100.0,
    WorkoutIntensity.VO2MAX: 115.0,
    WorkoutIntensity.SPRINT: 120.0,
}


def estimate_workout_tss(workout: ProposedWorkout) -> float:
    """
    Training stress of a workout.

    Uses the workout's own estimated TSS when present (including 0),
    otherwise the hourly rate for its intensity scaled by duration.
    """
    if workout.estimated_tss is not None:
        return workout.estimated_tss
    return TSS_PER_HOUR[workout.intensity] * workout.duration_minutes / 60


def daily_load_window(
    activities: Iterable[HistoryActivity],
    days: int = 7,
    end_date: Optional[date] = None,
) -> List[float]:
    """
    Daily TSS for the ``days`` calendar days ending on ``end_date``.

    Days without activities count as zero and several activities on one day
    are summed. ``end_date`` defaults to the most recent activity date;
    activities outside the window are ignored.

    Returns:
        List of ``days`` loads, oldest first
    """
    activities = list(activities)
    loads = [0.0] * days
    if not activities:
        return loads

    end = end_date or max(a.date for a in activities)
    start = end - timedelta(days=days - 1)

    for activity in activities:
        if start <= activity.date <= end:
            loads[(activity.date - start).days] += activity.tss

    return loads


@dataclass(frozen=True)
class MonotonyStrainResult:
    """Monotony and strain for a block of daily loads."""

    daily_loads: Tuple[float, ...]
    total_load: float
    mean_load: float
    std_dev: float
    monotony: float      # mean / std_dev
    strain: float        # total_load * monotony

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "dailyLoads": list(self.daily_loads),
            "totalLoad": round(self.total_load, 1),
            "meanLoad": round(self.mean_load, 1),
            "stdDev": round(self.std_dev, 2),
            "monotony": round(self.monotony, 2),
            "strain": round(self.strain, 0),
        }


def calculate_monotony_strain(
    daily_loads: List[float],
    uniform_load_monotony: float = 10.0,
) -> MonotonyStrainResult:
    """
    Calculate training monotony and strain.

    Formulas (Foster, 1998):
        Monotony = Mean daily load / Standard deviation of daily loads
        Strain = Total load * Monotony

    Args:
        daily_loads: Daily training loads, usually 7 days
        uniform_load_monotony: Monotony reported when every day carries the
            same non-zero load (standard deviation of zero)

    Returns:
        MonotonyStrainResult. With no load at all, monotony and strain are 0.
    """
    if not daily_loads:
        return MonotonyStrainResult((), 0.0, 0.0, 0.0, 0.0, 0.0)

    total_load = sum(daily_loads)
    mean_load = statistics.mean(daily_loads)

    try:
        std_dev = statistics.stdev(daily_loads)
    except statistics.StatisticsError:
        # Fewer than two values
        std_dev = 0.0

    if std_dev > 0:
        monotony = mean_load / std_dev
    else:
        monotony = uniform_load_monotony if mean_load > 0 else 0.0

    return MonotonyStrainResult(
        daily_loads=tuple(daily_loads),
        total_load=total_load,
        mean_load=mean_load,
        std_dev=std_dev,
        monotony=monotony,
        strain=total_load * monotony,
    )

"""
Recovery Assessment

Fatigue banding from the latest ATL and overreaching detection from the
weekly CTL ramp.
"""

from typing import Optional, Sequence, Tuple

from ..models.analysis import RecoveryAssessment, RecoveryFatigueLevel
from ..models.fitness import FitnessDataPoint


MIN_POINTS = 7
OVERREACHING_RAMP_RATE = 7.0  # CTL points per week, exclusive

# (upper ATL bound inclusive, level, suggested recovery days)
FATIGUE_BANDS: Tuple[Tuple[float, RecoveryFatigueLevel, int], ...] = (
    (40.0, RecoveryFatigueLevel.LOW, 0),
    (70.0, RecoveryFatigueLevel.MODERATE, 1),
    (90.0, RecoveryFatigueLevel.HIGH, 2),
)


def _fatigue_band(atl: float) -> Tuple[RecoveryFatigueLevel, int]:
    for upper, level, days in FATIGUE_BANDS:
        if atl <= upper:
            return level, days
    return RecoveryFatigueLevel.VERY_HIGH, 3


def assess_recovery(points: Sequence[FitnessDataPoint]) -> Optional[RecoveryAssessment]:
    """
    Assess current recovery state.

    Args:
        points: Fitness points in ascending date order, at least 7

    Returns:
        RecoveryAssessment, or None with fewer than 7 points
    """
    if len(points) < MIN_POINTS:
        return None

    latest = points[-1]
    week_ago = points[-MIN_POINTS]

    ramp_rate = latest.ctl - week_ago.ctl
    fatigue_level, recovery_days = _fatigue_band(latest.atl)

    return RecoveryAssessment(
        fatigue_level=fatigue_level,
        suggested_recovery_days=recovery_days,
        ramp_rate=ramp_rate,
        is_overreaching=ramp_rate > OVERREACHING_RAMP_RATE,
    )

"""
Race Readiness Projection

Extrapolate the current form trend to race day and give phase-based advice.
"""

import logging
from datetime import date
from typing import Optional, Sequence, Union

from ..metrics.fitness import classify_form
from ..models.analysis import Confidence, RaceReadiness
from ..models.common import parse_calendar_date
from ..models.fitness import FitnessDataPoint


logger = logging.getLogger(__name__)

MIN_POINTS = 7
SLOPE_WINDOW = 7  # most recent points used for the TSB slope

# (max days until race inclusive, recommendation), checked in ascending order
PHASE_RECOMMENDATIONS = (
    (2, "Race week - rest and stay fresh."),
    (14, "Taper phase - reduce volume, maintain intensity."),
    (28, "Final build - key workouts then begin taper."),
)
BUILD_RECOMMENDATION = "Continue building fitness with progressive overload."


def _recommendation_for(days_until_race: int) -> str:
    for max_days, recommendation in PHASE_RECOMMENDATIONS:
        if days_until_race <= max_days:
            return recommendation
    return BUILD_RECOMMENDATION


def _confidence_for(days_until_race: int, point_count: int) -> Confidence:
    if days_until_race <= 7 and point_count >= 14:
        return Confidence.HIGH
    elif days_until_race <= 21:
        return Confidence.MEDIUM
    else:
        return Confidence.LOW


def project_race_readiness(
    points: Sequence[FitnessDataPoint],
    race_date: Union[date, str],
    today: Union[date, str],
) -> Optional[RaceReadiness]:
    """
    Project form for race day and assess readiness.

    The daily TSB slope is fitted over the last 7 points:
    (last.tsb - first.tsb) / 6. The full series length only feeds the
    confidence rating.

    Args:
        points: Fitness points in ascending date order, at least 7
        race_date: Race day (date or YYYY-MM-DD)
        today: Reference day (date or YYYY-MM-DD); never read from the clock

    Returns:
        RaceReadiness, or None with fewer than 7 points or a past race

    Raises:
        InvalidDateError: If a date string is malformed
    """
    race_day = parse_calendar_date(race_date, field="race_date")
    reference_day = parse_calendar_date(today, field="today")

    if len(points) < MIN_POINTS:
        return None

    days_until_race = (race_day - reference_day).days
    if days_until_race < 0:
        return None

    window = points[-SLOPE_WINDOW:]
    first = window[0]
    last = window[-1]
    daily_tsb_change = (last.tsb - first.tsb) / (len(window) - 1)
    projected_tsb = last.tsb + daily_tsb_change * days_until_race

    logger.debug(
        f"Race in {days_until_race} days: TSB {last.tsb:+.1f} -> {projected_tsb:+.1f} "
        f"({daily_tsb_change:+.2f}/day over the last {len(window)} of {len(points)} points)"
    )

    return RaceReadiness(
        days_until_race=days_until_race,
        projected_tsb=projected_tsb,
        current_form=classify_form(last.tsb),
        recommendation=_recommendation_for(days_until_race),
        confidence=_confidence_for(days_until_race, len(points)),
    )

"""Fitness-Fatigue model: form classification and CTL/ATL/TSB series."""

import math
import logging
from datetime import date
from typing import List, Tuple, Optional

from ..exceptions import InvalidMetricError
from ..models.analysis import FormStatus
from ..models.fitness import FitnessDataPoint


logger = logging.getLogger(__name__)

# Form (TSB) boundaries
RACE_READY_TSB = 15.0
FRESH_TSB = 5.0
OPTIMAL_FLOOR_TSB = -10.0
OVERTRAINED_TSB = -25.0


def classify_form(tsb: float) -> FormStatus:
    """
    Categorize Training Stress Balance into a form status.

    Bands, evaluated top-down:
        - tsb > 15:            race_ready
        - 5 < tsb <= 15:       fresh
        - -10 <= tsb <= 5:     optimal
        - -25 < tsb < -10:     tired
        - tsb <= -25:          overtrained

    Args:
        tsb: Training Stress Balance (CTL - ATL)

    Returns:
        FormStatus for the value

    Raises:
        InvalidMetricError: If tsb is NaN
    """
    if math.isnan(tsb):
        raise InvalidMetricError("tsb", tsb)

    if tsb > RACE_READY_TSB:
        return FormStatus.RACE_READY
    elif tsb > FRESH_TSB:
        return FormStatus.FRESH
    elif tsb >= OPTIMAL_FLOOR_TSB:
        return FormStatus.OPTIMAL
    elif tsb > OVERTRAINED_TSB:
        return FormStatus.TIRED
    else:
        return FormStatus.OVERTRAINED


def calculate_ewma(
    current_value: float,
    previous_ewma: float,
    time_constant: int,
) -> float:
    """
    Exponentially Weighted Moving Average.

    Uses the formula: EWMA_n = EWMA_{n-1} * decay + value * (1 - decay)
    where decay = e^(-1/time_constant)

    Args:
        current_value: Today's training load
        previous_ewma: Yesterday's EWMA value
        time_constant: Time constant in days (42 for CTL, 7 for ATL)

    Returns:
        New EWMA value
    """
    decay = math.exp(-1 / time_constant)
    return previous_ewma * decay + current_value * (1 - decay)


def build_fitness_series(
    daily_loads: List[Tuple[date, float]],
    initial_ctl: float = 0.0,
    initial_atl: float = 0.0,
    ctl_time_constant: int = 42,
    atl_time_constant: int = 7,
) -> List[FitnessDataPoint]:
    """
    Calculate CTL, ATL and TSB for a series of daily loads.

    For callers that only have daily TSS: produces the FitnessDataPoint
    series the analyzers consume. Days missing between inputs decay with zero
    load. Ramp rate is CTL today minus CTL seven days earlier (calendar days,
    gap days included); it is None until a week of history exists.

    Args:
        daily_loads: List of (date, load) tuples, need not be consecutive.
            Several loads on the same date are summed.
        initial_ctl: Starting CTL value (for new users, use 0)
        initial_atl: Starting ATL value (for new users, use 0)
        ctl_time_constant: Days for CTL calculation (default 42)
        atl_time_constant: Days for ATL calculation (default 7)

    Returns:
        List of FitnessDataPoint, one per distinct input date, ascending
    """
    if not daily_loads:
        return []

    merged: dict = {}
    for load_date, load in daily_loads:
        merged[load_date] = merged.get(load_date, 0.0) + load

    results = []
    ctl = initial_ctl
    atl = initial_atl
    ctl_by_day: List[float] = []  # every calendar day processed, gaps included

    prev_date: Optional[date] = None

    for workout_date in sorted(merged):
        load = merged[workout_date]

        if prev_date is not None:
            days_gap = (workout_date - prev_date).days
            for _ in range(1, days_gap):
                ctl = calculate_ewma(0.0, ctl, ctl_time_constant)
                atl = calculate_ewma(0.0, atl, atl_time_constant)
                ctl_by_day.append(ctl)

        ctl = calculate_ewma(load, ctl, ctl_time_constant)
        atl = calculate_ewma(load, atl, atl_time_constant)
        ctl_by_day.append(ctl)

        ramp_rate = None
        if len(ctl_by_day) > 7:
            ramp_rate = round(ctl - ctl_by_day[-8], 1)

        results.append(
            FitnessDataPoint(
                date=workout_date,
                ctl=round(ctl, 1),
                atl=round(atl, 1),
                tsb=round(ctl - atl, 1),
                ramp_rate=ramp_rate,
            )
        )

        prev_date = workout_date

    logger.debug(f"Built fitness series of {len(results)} points ending {prev_date}")
    return results

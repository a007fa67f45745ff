"""
Form Trend Analysis

Direction of form (TSB) and fitness/fatigue deltas over a window of points.
"""

from typing import List, Optional, Sequence

from ..models.analysis import FormTrend, TrendDirection
from ..models.fitness import FitnessDataPoint


TREND_THRESHOLD = 3.0  # TSB points; changes of exactly +/-3 are stable
DEFAULT_TREND_WINDOW = 7


def _determine_trend_direction(tsb_change: float) -> TrendDirection:
    """Determine trend direction from the TSB change."""
    if tsb_change > TREND_THRESHOLD:
        return TrendDirection.IMPROVING
    elif tsb_change < -TREND_THRESHOLD:
        return TrendDirection.DECLINING
    else:
        return TrendDirection.STABLE


def recent_window(
    points: Sequence[FitnessDataPoint],
    size: int = DEFAULT_TREND_WINDOW,
) -> List[FitnessDataPoint]:
    """The last ``size`` points of a date-ordered series."""
    if size <= 0:
        return []
    return list(points[-size:])


def analyze_trend(points: Sequence[FitnessDataPoint]) -> Optional[FormTrend]:
    """
    Analyze form direction over a window of fitness data points.

    The whole supplied sequence is analyzed; pass ``recent_window(points)``
    for the usual 7-point window.

    Args:
        points: Fitness points in ascending date order

    Returns:
        FormTrend, or None if fewer than 2 points
    """
    if len(points) < 2:
        return None

    first = points[0]
    last = points[-1]

    tsb_change = last.tsb - first.tsb
    average_tsb = sum(p.tsb for p in points) / len(points)

    return FormTrend(
        direction=_determine_trend_direction(tsb_change),
        tsb_change=tsb_change,
        ctl_change=last.ctl - first.ctl,
        atl_change=last.atl - first.atl,
        current_tsb=last.tsb,
        average_tsb=average_tsb,
    )

"""
Analysis module for fitness time series.

Provides form trends, weekly load summaries, recovery assessment and race
readiness projection.
"""

from .trends import (
    analyze_trend,
    recent_window,
)
from .weekly import (
    aggregate_weekly_loads,
    week_start_for,
)
from .recovery import assess_recovery
from .race import project_race_readiness

__all__ = [
    # Trends
    "analyze_trend",
    "recent_window",
    # Weekly
    "aggregate_weekly_loads",
    "week_start_for",
    # Recovery
    "assess_recovery",
    # Race
    "project_race_readiness",
]

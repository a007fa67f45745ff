"""
Weekly Load Aggregation

Bucket activities into Monday-start weeks and summarize load per week.
"""

from collections import defaultdict
from datetime import date, timedelta
from typing import Dict, Iterable, List

from ..models.analysis import WeeklyLoadSummary
from ..models.fitness import ActivityRecord


def week_start_for(day: date) -> date:
    """Monday on or before ``day`` (Sunday belongs to the preceding Monday)."""
    return day - timedelta(days=day.weekday())


def aggregate_weekly_loads(activities: Iterable[ActivityRecord]) -> List[WeeklyLoadSummary]:
    """
    Group activities by ISO week and calculate weekly aggregates.

    Input order does not matter; several activities on the same day are all
    counted.

    Args:
        activities: Activity records with calendar dates

    Returns:
        One WeeklyLoadSummary per week present, ascending by week start
    """
    weeks: Dict[date, List[ActivityRecord]] = defaultdict(list)
    for activity in activities:
        weeks[week_start_for(activity.date)].append(activity)

    summaries = []
    for week_start in sorted(weeks):
        week_activities = weeks[week_start]
        total_tss = sum(a.tss for a in week_activities)
        activity_count = len(week_activities)

        summaries.append(WeeklyLoadSummary(
            week_start=week_start,
            total_tss=total_tss,
            activity_count=activity_count,
            average_tss_per_activity=total_tss / activity_count,
            total_duration=sum(a.duration_minutes for a in week_activities),
        ))

    return summaries

"""Tests for weekly load aggregation."""

import pytest
from datetime import date

from training_load.analysis.weekly import aggregate_weekly_loads, week_start_for
from training_load.models import ActivityRecord


def activity(day, tss, duration=60.0):
    return ActivityRecord(date=day, tss=tss, duration_minutes=duration)


class TestWeekStart:
    """Tests for the Monday week key."""

    def test_monday_is_its_own_week_start(self):
        assert week_start_for(date(2024, 1, 1)) == date(2024, 1, 1)

    def test_sunday_belongs_to_preceding_monday(self):
        assert week_start_for(date(2024, 1, 7)) == date(2024, 1, 1)

    def test_midweek(self):
        assert week_start_for(date(2024, 1, 10)) == date(2024, 1, 8)


class TestAggregateWeeklyLoads:
    """Tests for aggregate_weekly_loads."""

    def test_empty(self):
        assert aggregate_weekly_loads([]) == []

    def test_groups_and_sorts(self):
        activities = [
            activity(date(2024, 1, 8), 50, 45),   # Monday, week 2
            activity(date(2024, 1, 7), 80, 90),   # Sunday, week 1
            activity(date(2024, 1, 2), 40, 30),   # Tuesday, week 1
        ]

        summaries = aggregate_weekly_loads(activities)

        assert [s.week_start for s in summaries] == [date(2024, 1, 1), date(2024, 1, 8)]
        first = summaries[0]
        assert first.total_tss == 120
        assert first.activity_count == 2
        assert first.average_tss_per_activity == pytest.approx(60.0)
        assert first.total_duration == 120
        assert summaries[1].total_tss == 50

    @pytest.mark.parametrize("order", [
        (0, 1, 2, 3),
        (3, 2, 1, 0),
        (2, 0, 3, 1),
        (1, 3, 0, 2),
    ])
    def test_input_order_does_not_matter(self, order):
        activities = [
            activity(date(2024, 1, 2), 40, 30),
            activity(date(2024, 1, 7), 80, 90),
            activity(date(2024, 1, 8), 50, 45),
            activity(date(2024, 1, 17), 65, 60),
        ]
        expected = aggregate_weekly_loads(activities)

        summaries = aggregate_weekly_loads([activities[i] for i in order])

        assert summaries == expected
        assert [s.week_start for s in summaries] == [
            date(2024, 1, 1), date(2024, 1, 8), date(2024, 1, 15),
        ]

    def test_same_day_activities_all_counted(self):
        day = date(2024, 1, 3)

        summaries = aggregate_weekly_loads([activity(day, 30), activity(day, 70)])

        assert len(summaries) == 1
        assert summaries[0].activity_count == 2
        assert summaries[0].total_tss == 100

    def test_to_dict(self):
        data = aggregate_weekly_loads([activity(date(2024, 1, 3), 30)])[0].to_dict()

        assert data["weekStart"] == "2024-01-01"
        assert data["activityCount"] == 1

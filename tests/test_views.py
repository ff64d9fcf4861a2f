from models import DayOfWeek, ScheduleSet
from scheduler import cost_summary, schedule_by_day

from conftest import make_activity


def test_cost_summary_groups_periods_and_flat_rate(locations):
    activities = [
        make_activity("a", "loc_flat", [("monday", "15:00", "16:00"), ("wednesday", "15:00", "16:00")], cost=300),
        make_activity("b", "loc_flat", [("monday", "16:00", "17:00")], cost=200),
        make_activity("c", "loc_2", [("tuesday", "15:00", "16:00")], cost=50, cost_period="month"),
        make_activity("unpinned", "loc_1", cost=999),
    ]
    schedule_set = ScheduleSet(id="s", name="Set A", activity_ids=("a", "b", "c", "missing"))

    summary = cost_summary(schedule_set, activities, locations)

    assert summary.activity_cost_by_period == {"semester": 500, "month": 50}
    # Monday and Wednesday at the flat-rate program
    assert summary.flat_rate_daily_cost == 80
    assert "total" not in summary.model_dump()


def test_cost_summary_of_empty_set(locations):
    summary = cost_summary(ScheduleSet(id="s", name="Set A"), [], locations)
    assert summary.flat_rate_daily_cost == 0
    assert summary.activity_cost_by_period == {}


def test_schedule_by_day_sorts_slots():
    late = make_activity("late", slots=[("monday", "16:00", "17:00")])
    early = make_activity("early", slots=[("monday", "15:00", "16:00"), ("friday", "9:00", "10:00")])

    grid = schedule_by_day([late, early])

    assert list(grid) == list(DayOfWeek)
    assert [a.id for a, _ in grid[DayOfWeek.MONDAY]] == ["early", "late"]
    assert [a.id for a, _ in grid[DayOfWeek.FRIDAY]] == ["early"]
    assert grid[DayOfWeek.SUNDAY] == []

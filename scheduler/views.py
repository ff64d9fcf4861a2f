"""
Read-only summaries of a schedule set for display: what it costs and
what the week looks like.
"""

from collections import defaultdict
from typing import Dict, List, Set, Tuple

from models import Activity, CostSummary, DayOfWeek, Location, ScheduleSet, TimeSlot


def cost_summary(schedule_set: ScheduleSet, activities: List[Activity], locations: List[Location]) -> CostSummary:
    """
    Running cost of a set.

    Member prices are summed per billing period. Flat-rate locations add their
    daily rate once for every weekday the set visits them. The parts are kept
    apart because they are billed over different periods.
    """
    by_id = {a.id: a for a in activities}
    location_map = {loc.id: loc for loc in locations}

    by_period: Dict[str, float] = defaultdict(float)
    days_at: Dict[str, Set[DayOfWeek]] = defaultdict(set)

    for activity_id in schedule_set.activity_ids:
        activity = by_id.get(activity_id)
        if activity is None:
            continue
        by_period[activity.cost_period.value] += activity.cost
        for slot in activity.time_slots:
            days_at[activity.location_id].add(slot.day)

    flat_rate = 0.0
    for location_id, days in days_at.items():
        location = location_map.get(location_id)
        if location and location.has_flat_daily_rate:
            flat_rate += location.daily_rate * len(days)

    return CostSummary(
        activity_cost_by_period=dict(by_period),
        flat_rate_daily_cost=flat_rate
    )


def schedule_by_day(activities: List[Activity]) -> Dict[DayOfWeek, List[Tuple[Activity, TimeSlot]]]:
    """Weekly grid: every day of the week, slots sorted by start time."""
    grid: Dict[DayOfWeek, List[Tuple[Activity, TimeSlot]]] = {day: [] for day in DayOfWeek}
    for activity in activities:
        for slot in activity.time_slots:
            grid[slot.day].append((activity, slot))

    for entries in grid.values():
        entries.sort(key=lambda entry: (entry[1].start, entry[1].end))
    return grid

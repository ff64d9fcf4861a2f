"""
Hard Constraint Validation Logic.

This module answers the binary question: "Can Activity X and Activity Y both be
on the schedule?" It enforces physical reality: two things can't happen at once,
and you can't be in two places without time to get between them.
"""

from typing import List

from models import Activity, ActivityConflict, TimeSlot, format_minutes
from .travel import TravelTimeResolver


class ConflictDetector:
    """
    Pairwise clash checks between activities, with and without a travel buffer.
    """

    def __init__(self, travel: TravelTimeResolver):
        self.travel = travel

    def slots_overlap(self, slot1: TimeSlot, slot2: TimeSlot) -> bool:
        """Plain overlap on the same day. Touching slots do not overlap."""
        if slot1.day != slot2.day:
            return False
        return slot1.start < slot2.end and slot2.start < slot1.end

    def slots_overlap_with_travel(self, slot1: TimeSlot, slot2: TimeSlot, loc1: str, loc2: str) -> bool:
        """
        Overlap after padding both slots with the commute between their locations.

        The buffer is added to both ends regardless of which slot comes first,
        so this over-approximates; scoring and reason strings depend on it.
        """
        if slot1.day != slot2.day:
            return False
        travel = self.travel.get_travel_time(loc1, loc2)
        return slot1.start < slot2.end + travel and slot2.start < slot1.end + travel

    def activities_conflict(self, a: Activity, b: Activity) -> bool:
        for slot_a in a.time_slots:
            for slot_b in b.time_slots:
                if self.slots_overlap_with_travel(slot_a, slot_b, a.location_id, b.location_id):
                    return True
        return False

    def conflict_reason(self, a: Activity, b: Activity) -> str:
        """Short human-readable explanation for why a and b conflict."""
        for slot_a in a.time_slots:
            for slot_b in b.time_slots:
                if self.slots_overlap(slot_a, slot_b):
                    return "time overlap"

        travel = self.travel.get_travel_time(a.location_id, b.location_id)
        if travel > 0:
            return f"{travel}min travel needed"
        return "schedule conflict"

    def find_conflicts(self, activities: List[Activity]) -> List[ActivityConflict]:
        """
        List every clashing slot pair within a group (e.g. the pinned set).

        For a plain overlap the window is the overlapping part; for a
        travel-only clash it is the too-short gap between the two slots.
        """
        conflicts = []
        for i in range(len(activities)):
            for j in range(i + 1, len(activities)):
                a, b = activities[i], activities[j]
                for slot_a in a.time_slots:
                    for slot_b in b.time_slots:
                        if not self.slots_overlap_with_travel(slot_a, slot_b, a.location_id, b.location_id):
                            continue

                        if self.slots_overlap(slot_a, slot_b):
                            window_start = max(slot_a.start, slot_b.start)
                            window_end = min(slot_a.end, slot_b.end)
                            reason = "time overlap"
                        else:
                            window_start = min(slot_a.end, slot_b.end)
                            window_end = max(slot_a.start, slot_b.start)
                            travel = self.travel.get_travel_time(a.location_id, b.location_id)
                            reason = f"{travel}min travel needed"

                        conflicts.append(ActivityConflict(
                            activity_a_id=a.id,
                            activity_b_id=b.id,
                            day=slot_a.day,
                            overlap_start=format_minutes(window_start),
                            overlap_end=format_minutes(window_end),
                            reason=reason
                        ))
        return conflicts

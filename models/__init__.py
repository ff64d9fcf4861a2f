"""
Data models package for the Weekly Activity Planner.

This package exports the three core pillars of the data architecture:
1. Demand (Activity, TimeSlot)
2. Context (Location, TravelTimeEdge, PreferenceRank, FriendInterest)
3. Output (ScheduleSet, ActivityScore, SuggestedSet)
"""

from .activity import (
    Activity,
    CostPeriod,
    DayOfWeek,
    GradeRange,
    TimeSlot,
    format_minutes,
    parse_time_to_minutes,
)

from .resource import (
    CategoryTag,
    Certainty,
    DEFAULT_CATEGORY_TAGS,
    FriendInterest,
    Location,
    PreferenceKind,
    PreferenceRank,
    PreferenceTarget,
    TravelTimeEdge,
)

from .schedule import (
    ActivityConflict,
    ActivityScore,
    CostSummary,
    ScheduleSet,
    ScoreBreakdown,
    SuggestedSet,
)

__all__ = [
    # --- Demand Models ---
    "Activity",
    "CostPeriod",
    "DayOfWeek",
    "GradeRange",
    "TimeSlot",
    "format_minutes",
    "parse_time_to_minutes",

    # --- Context Models ---
    "CategoryTag",
    "Certainty",
    "DEFAULT_CATEGORY_TAGS",
    "FriendInterest",
    "Location",
    "PreferenceKind",
    "PreferenceRank",
    "PreferenceTarget",
    "TravelTimeEdge",

    # --- Output Models ---
    "ActivityConflict",
    "ActivityScore",
    "CostSummary",
    "ScheduleSet",
    "ScoreBreakdown",
    "SuggestedSet",
]

"""
Conflict detection and recommendation engine for the Weekly Activity Planner.
"""

from .travel import TravelTimeResolver, DEFAULT_TRAVEL_MINUTES
from .constraints import ConflictDetector
from .scoring import ActivityScorer, score_activity
from .engine import SetRecommender, generate_suggested_sets
from .state import ScheduleSetManager
from .views import cost_summary, schedule_by_day

__all__ = [
    "TravelTimeResolver",
    "DEFAULT_TRAVEL_MINUTES",
    "ConflictDetector",
    "ActivityScorer",
    "score_activity",
    "SetRecommender",
    "generate_suggested_sets",
    "ScheduleSetManager",
    "cost_summary",
    "schedule_by_day",
]

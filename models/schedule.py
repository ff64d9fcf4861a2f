"""
Schedule data models for the Weekly Activity Planner.

This module defines the candidate schedules the user builds (ScheduleSet)
and the 'Output' of the engine: scores, suggestions, conflicts and costs.
"""

from typing import Dict, List, Tuple
from pydantic import BaseModel, Field, ConfigDict, field_validator

from .activity import Activity, DayOfWeek


class ScheduleSet(BaseModel):
    """
    One named candidate full-week schedule ("Set A", "Set B", ...).
    Frozen: the manager swaps in modified copies.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique identifier")
    name: str = Field(description="Display name")
    activity_ids: Tuple[str, ...] = Field(default=(), description="Members, in insertion order")

    @field_validator('activity_ids')
    @classmethod
    def validate_unique_members(cls, v):
        if len(set(v)) != len(v):
            raise ValueError("A schedule set cannot contain the same activity twice")
        return v


class ScoreBreakdown(BaseModel):
    preference_score: int = 0
    friend_bonus: int = 0
    travel_penalty: int = 0
    flat_rate_penalty: int = 0


class ActivityScore(BaseModel):
    """Desirability of one unselected activity against the pinned set."""
    activity: Activity
    score: int
    breakdown: ScoreBreakdown
    conflicts_with_pinned: bool = False
    conflict_reasons: List[str] = Field(default_factory=list)


class SuggestedSet(BaseModel):
    """A recommended conflict-free bundle of activities."""
    name: str
    description: str
    activity_ids: List[str]
    total_score: int
    has_conflicts: bool = False


class ActivityConflict(BaseModel):
    """A clash between two activities, for display."""
    activity_a_id: str
    activity_b_id: str
    day: DayOfWeek
    overlap_start: str = Field(description="H:MM; start of the clash window")
    overlap_end: str = Field(description="H:MM; end of the clash window")
    reason: str


class CostSummary(BaseModel):
    """Running cost of a schedule set."""
    activity_cost_by_period: Dict[str, float] = Field(
        default_factory=dict,
        description="Sum of member costs keyed by CostPeriod value"
    )
    flat_rate_daily_cost: float = Field(
        default=0.0,
        description="Flat daily rates per week for the days each flat-rate location is visited"
    )

"""
Settings-side data models for the Weekly Activity Planner.

This module defines the context the engine scores against:
1. Locations and the commute between them (TravelTimeEdge)
2. What the user cares about (PreferenceRank, CategoryTag)
3. Social context (FriendInterest)
"""

from enum import Enum
from typing import FrozenSet, List
from pydantic import BaseModel, Field, ConfigDict


class Location(BaseModel):
    """A place activities happen at."""
    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "id": "loc_afterschool",
            "name": "TBS Afterschool",
            "has_flat_daily_rate": True,
            "daily_rate": 40
        }
    })

    id: str = Field(description="Unique identifier")
    name: str = Field(min_length=1, description="Display name")
    address: str = Field(default="")

    # Some afterschool programs bill per day attended regardless of class count
    has_flat_daily_rate: bool = Field(default=False)
    daily_rate: float = Field(default=0.0, ge=0, description="Charge per attended day")


class TravelTimeEdge(BaseModel):
    """Commute minutes between two locations. Direction does not matter."""
    model_config = ConfigDict(frozen=True)

    location_a: str
    location_b: str
    minutes: int = Field(ge=0, description="One-way commute time")

    @property
    def key(self) -> FrozenSet[str]:
        return frozenset((self.location_a, self.location_b))


class PreferenceKind(str, Enum):
    CATEGORY = "category"
    SPECIFIC_ACTIVITY = "specific_activity"


class PreferenceTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: PreferenceKind
    id: str = Field(description="Category tag id or Activity id, depending on kind")


class PreferenceRank(BaseModel):
    """
    One entry of the user's ordered priority list.
    The list order decides ties; 'rank' drives the score decay.
    """
    model_config = ConfigDict(frozen=True)

    rank: int = Field(ge=1, description="1 = highest priority")
    target: PreferenceTarget
    display_name: str = Field(default="")

    def matches(self, activity) -> bool:
        if self.target.kind == PreferenceKind.CATEGORY:
            return self.target.id in activity.category_tags
        return self.target.id == activity.id


class Certainty(str, Enum):
    CONFIRMED = "confirmed"
    LIKELY = "likely"
    MAYBE = "maybe"


class FriendInterest(BaseModel):
    """A friend who is (or may be) taking an activity."""
    model_config = ConfigDict(frozen=True)

    friend_id: str
    activity_id: str
    certainty: Certainty = Field(default=Certainty.MAYBE)


class CategoryTag(BaseModel):
    """User-visible category used to tag activities."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(min_length=1)
    color: str = Field(default="#6b7280", description="Hex color for display")


DEFAULT_CATEGORY_TAGS: List[CategoryTag] = [
    CategoryTag(id="robotics", name="Robotics", color="#3b82f6"),
    CategoryTag(id="dance", name="Dance", color="#ec4899"),
    CategoryTag(id="art", name="Art", color="#f59e0b"),
    CategoryTag(id="music", name="Music", color="#8b5cf6"),
    CategoryTag(id="sports", name="Sports", color="#22c55e"),
    CategoryTag(id="drama", name="Drama", color="#ef4444"),
    CategoryTag(id="stem", name="STEM", color="#06b6d4"),
    CategoryTag(id="language", name="Language", color="#6366f1"),
]

"""
Activity and TimeSlot data models for the Weekly Activity Planner.
"""

from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict
from datetime import datetime, time

MINUTES_PER_DAY = 24 * 60

# Accepted clock formats: "15:00", "3:00 PM", "3:00PM"
TIME_FORMATS = ("%H:%M", "%I:%M %p", "%I:%M%p")


class DayOfWeek(str, Enum):
    """Day a recurring weekly slot happens on."""
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def label(self) -> str:
        return self.value[:3].capitalize()


class CostPeriod(str, Enum):
    """What the listed cost of an activity pays for."""
    SEMESTER = "semester"
    MONTH = "month"
    SESSION = "session"


def parse_time_to_minutes(value: str) -> int:
    """
    Parse "15:00" or "3:00 PM" into minutes since midnight.
    Raises ValueError for anything else.
    """
    cleaned = value.strip().upper()
    # End of day; strptime has no hour 24
    if cleaned == "24:00":
        return MINUTES_PER_DAY

    for fmt in TIME_FORMATS:
        try:
            parsed = datetime.strptime(cleaned, fmt)
        except ValueError:
            continue
        return parsed.hour * 60 + parsed.minute
    raise ValueError(f"Unrecognized time format: {value!r}")


def format_minutes(minutes: int) -> str:
    """Render minutes since midnight as H:MM."""
    return f"{minutes // 60}:{minutes % 60:02d}"


class TimeSlot(BaseModel):
    """A weekly recurring block of time, in minutes since midnight."""
    model_config = ConfigDict(frozen=True)

    day: DayOfWeek = Field(description="Day of the week")
    start: int = Field(ge=0, lt=MINUTES_PER_DAY, description="Start, minutes since midnight")
    end: int = Field(gt=0, le=MINUTES_PER_DAY, description="End, minutes since midnight")

    @field_validator('start', 'end', mode='before')
    @classmethod
    def coerce_clock_time(cls, v):
        """Accept "15:00", "3:00 PM" and datetime.time as well as raw minutes."""
        if isinstance(v, time):
            return v.hour * 60 + v.minute
        if isinstance(v, str):
            return parse_time_to_minutes(v)
        return v

    @model_validator(mode='after')
    def validate_order(self):
        if self.start >= self.end:
            raise ValueError("Slot end must be strictly after start")
        return self

    def __str__(self) -> str:
        return f"{self.day.label} {format_minutes(self.start)}-{format_minutes(self.end)}"


class GradeRange(BaseModel):
    """Grade eligibility as listed by the provider (e.g. "K" to "5")."""
    model_config = ConfigDict(frozen=True)

    grade_min: str = ""
    grade_max: str = ""


class Activity(BaseModel):
    """
    A candidate weekly activity (e.g. an afterschool class).
    Immutable once created; the engine only reads it.
    """
    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "id": "act_robotics_01",
            "name": "Lego Robotics",
            "location_id": "loc_school",
            "time_slots": [{"day": "monday", "start": "15:00", "end": "16:00"}],
            "cost": 450,
            "cost_period": "semester",
            "category_tags": ["robotics", "stem"],
            "grade_range": {"grade_min": "1", "grade_max": "3"}
        }
    })

    # --- Core Identity ---
    id: str = Field(description="Unique identifier for the activity")
    name: str = Field(min_length=1, description="Human-readable name")
    location_id: str = Field(description="ID of the Location it takes place at")

    # --- Timing ---
    time_slots: List[TimeSlot] = Field(default_factory=list, description="Weekly meeting times")

    # --- Cost ---
    cost: float = Field(default=0.0, ge=0, description="Listed price")
    cost_period: CostPeriod = Field(default=CostPeriod.SEMESTER, description="What the price covers")

    # --- Metadata ---
    category_tags: List[str] = Field(
        default_factory=list,
        description="Ordered category tag ids; the first one is the primary category"
    )
    grade_range: GradeRange = Field(default_factory=GradeRange)
    description: str = Field(default="", description="Provider notes")

    @property
    def primary_category(self) -> Optional[str]:
        return self.category_tags[0] if self.category_tags else None

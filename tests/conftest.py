import pytest

from models import Activity, Location, TimeSlot, TravelTimeEdge
from scheduler import TravelTimeResolver


def make_activity(id, location_id="loc_1", slots=(("monday", "15:00", "16:00"),), tags=(), **kwargs):
    return Activity(
        id=id,
        name=kwargs.pop("name", id.replace("_", " ").title()),
        location_id=location_id,
        time_slots=[TimeSlot(day=d, start=s, end=e) for d, s, e in slots],
        category_tags=list(tags),
        **kwargs
    )


@pytest.fixture
def locations():
    return [
        Location(id="loc_1", name="School"),
        Location(id="loc_2", name="Rec Center"),
        Location(id="loc_flat", name="Afterschool Program", has_flat_daily_rate=True, daily_rate=40),
    ]


@pytest.fixture
def travel():
    return TravelTimeResolver([
        TravelTimeEdge(location_a="loc_1", location_b="loc_2", minutes=15),
        TravelTimeEdge(location_a="loc_1", location_b="loc_flat", minutes=0),
    ])

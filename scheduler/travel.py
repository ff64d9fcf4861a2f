"""
Commute lookup between locations.
"""

import logging
from typing import Dict, FrozenSet, Iterable

from models import TravelTimeEdge

logger = logging.getLogger(__name__)

DEFAULT_TRAVEL_MINUTES = 15


class TravelTimeResolver:
    """
    Symmetric lookup of commute minutes between two locations.
    Unknown pairs fall back to a default rather than failing.
    """

    def __init__(self, edges: Iterable[TravelTimeEdge] = (), default_minutes: int = DEFAULT_TRAVEL_MINUTES):
        self.default_minutes = default_minutes

        # Index by unordered pair for O(1) lookup
        self.edges: Dict[FrozenSet[str], int] = {}
        for edge in edges:
            if edge.key in self.edges:
                raise ValueError(
                    f"Duplicate travel time between {edge.location_a} and {edge.location_b}"
                )
            self.edges[edge.key] = edge.minutes

    def get_travel_time(self, loc_a: str, loc_b: str) -> int:
        if loc_a == loc_b:
            return 0

        minutes = self.edges.get(frozenset((loc_a, loc_b)))
        if minutes is None:
            logger.debug(f"No travel time for {loc_a} <-> {loc_b}, using {self.default_minutes}min")
            return self.default_minutes
        return minutes

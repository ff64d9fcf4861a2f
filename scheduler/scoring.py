"""
Heuristic Scoring Engine for the Weekly Activity Planner.

This module determines the 'Desirability' of an activity the user has not
picked yet, measured against what is already pinned in the active set.
Unlike hard constraints (binary Yes/No), this provides a gradient that can go
negative, to guide the user toward "Family-Friendly" weeks.
"""

from collections import defaultdict
from typing import Dict, List, Optional, Set

from models import (
    Activity,
    ActivityScore,
    DayOfWeek,
    FriendInterest,
    Location,
    PreferenceRank,
    ScoreBreakdown,
)
from .constraints import ConflictDetector
from .travel import TravelTimeResolver


class ActivityScorer:
    """
    Evaluates candidate activities based on soft constraints
    (User Preference, Friends, Commute, Flat-Rate Billing).
    """

    PREFERENCE_BASE = 100
    PREFERENCE_DECAY = 0.7   # each rank step keeps 70% of the previous one
    FRIEND_BONUS = 15        # per friend interested
    TRAVEL_PENALTY = 10      # per slot that adds a new location to a day
    FLAT_RATE_PENALTY = 25   # per slot that adds a flat-rate location to a day

    def __init__(self, travel: TravelTimeResolver, locations: List[Location]):
        self.detector = ConflictDetector(travel)
        self.locations = {loc.id: loc for loc in locations}

    def score_activity(
        self,
        candidate: Activity,
        pinned: List[Activity],
        preferences: List[PreferenceRank],
        friend_interests: List[FriendInterest]
    ) -> ActivityScore:
        """
        Master scoring function.
        """
        # 1. What the user asked for
        preference_score = self._score_preference(candidate, preferences)

        # 2. Who else is going
        friend_bonus = self.FRIEND_BONUS * sum(
            1 for fi in friend_interests if fi.activity_id == candidate.id
        )

        # 3. & 4. Commute and billing cost of visiting another place that day
        visited = self._locations_by_day(pinned)
        travel_penalty = self._score_new_location(candidate, visited, self.TRAVEL_PENALTY)

        flat_rate_penalty = 0
        location = self.locations.get(candidate.location_id)
        if location and location.has_flat_daily_rate:
            flat_rate_penalty = self._score_new_location(candidate, visited, self.FLAT_RATE_PENALTY)

        # 5. Clashes with the pinned set
        conflict_reasons = []
        for other in pinned:
            if self.detector.activities_conflict(candidate, other):
                reason = self.detector.conflict_reason(candidate, other)
                conflict_reasons.append(f"{other.name} ({reason})")

        score = preference_score + friend_bonus - travel_penalty - flat_rate_penalty

        return ActivityScore(
            activity=candidate,
            score=score,
            breakdown=ScoreBreakdown(
                preference_score=preference_score,
                friend_bonus=friend_bonus,
                travel_penalty=travel_penalty,
                flat_rate_penalty=flat_rate_penalty
            ),
            conflicts_with_pinned=bool(conflict_reasons),
            conflict_reasons=conflict_reasons
        )

    def rank_activities(
        self,
        activities: List[Activity],
        pinned: List[Activity],
        preferences: List[PreferenceRank],
        friend_interests: List[FriendInterest]
    ) -> List[ActivityScore]:
        """Score every activity not already pinned, best first."""
        pinned_ids = {a.id for a in pinned}
        scores = [
            self.score_activity(activity, pinned, preferences, friend_interests)
            for activity in activities
            if activity.id not in pinned_ids
        ]
        # Stable: ties keep the caller's order
        scores.sort(key=lambda s: s.score, reverse=True)
        return scores

    def _score_preference(self, candidate: Activity, preferences: List[PreferenceRank]) -> int:
        # List order wins over the numeric rank when several entries match
        for pref in preferences:
            if pref.matches(candidate):
                return round(self.PREFERENCE_BASE * self.PREFERENCE_DECAY ** (pref.rank - 1))
        return 0

    def _locations_by_day(self, pinned: List[Activity]) -> Dict[DayOfWeek, Set[str]]:
        visited: Dict[DayOfWeek, Set[str]] = defaultdict(set)
        for activity in pinned:
            for slot in activity.time_slots:
                visited[slot.day].add(activity.location_id)
        return visited

    def _score_new_location(self, candidate: Activity, visited: Dict[DayOfWeek, Set[str]], penalty: int) -> int:
        """
        Charge once per candidate slot landing on a day that already visits
        somewhere else. A multi-day candidate is charged on every such day.
        """
        total = 0
        for slot in candidate.time_slots:
            day_locations = visited.get(slot.day)
            if day_locations and candidate.location_id not in day_locations:
                total += penalty
        return total


def score_activity(
    candidate: Activity,
    pinned_activities: List[Activity],
    preferences: List[PreferenceRank],
    friend_interests: List[FriendInterest],
    travel_resolver: TravelTimeResolver,
    locations: Optional[List[Location]] = None
) -> ActivityScore:
    scorer = ActivityScorer(travel_resolver, locations or [])
    return scorer.score_activity(candidate, pinned_activities, preferences, friend_interests)

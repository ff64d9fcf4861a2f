"""
The Suggested Set Engine.

This module proposes small, ready-made bundles of activities the user could pin
in one go. It combines two strategies:
1. Category Focus - the most activities of one primary category that fit together.
2. Social - the activities friends are taking that fit together.

Every bundle is built greedily and is conflict-free internally and against the
already pinned activities.
"""

import logging
from typing import Dict, List, Optional

from models import Activity, CategoryTag, FriendInterest, SuggestedSet
from .constraints import ConflictDetector
from .travel import TravelTimeResolver

logger = logging.getLogger(__name__)


class SetRecommender:
    """
    Groups remaining candidates into high-value, conflict-free bundles.
    """

    CATEGORY_SET_SCORE = 50  # per member of a category bundle
    FRIEND_SET_SCORE = 65    # per member of the friends bundle
    MIN_SET_SIZE = 2
    MAX_SUGGESTIONS = 3

    def __init__(self, travel: TravelTimeResolver):
        self.detector = ConflictDetector(travel)

    def generate_suggested_sets(
        self,
        available: List[Activity],
        pinned: List[Activity],
        category_tags: List[CategoryTag],
        friend_interests: List[FriendInterest]
    ) -> List[SuggestedSet]:
        """
        Execute the suggestion pipeline.
        """
        logger.info(f"Generating suggestions from {len(available)} activities ({len(pinned)} pinned)")
        tag_names = {tag.id: tag.name for tag in category_tags}
        suggestions = []

        # 1. Category Focus bundles
        for category_id, members in self._group_by_primary_category(available).items():
            if len(members) < self.MIN_SET_SIZE:
                continue

            chosen = self._build_conflict_free(members, pinned)
            if len(chosen) < self.MIN_SET_SIZE:
                logger.debug(f"Category {category_id}: only {len(chosen)} fit, skipping")
                continue

            name = tag_names.get(category_id, category_id)
            suggestions.append(SuggestedSet(
                name=f"{name} Focus",
                description=f"{len(chosen)} {name.lower()} activities without conflicts",
                activity_ids=[a.id for a in chosen],
                total_score=len(chosen) * self.CATEGORY_SET_SCORE,
                has_conflicts=False
            ))

        # 2. Social bundle
        friend_activity_ids = {fi.activity_id for fi in friend_interests}
        with_friends = [a for a in available if a.id in friend_activity_ids]
        chosen = self._build_conflict_free(with_friends, pinned)
        if len(chosen) >= self.MIN_SET_SIZE:
            suggestions.append(SuggestedSet(
                name="With Friends",
                description=f"{len(chosen)} activities your friends are taking",
                activity_ids=[a.id for a in chosen],
                total_score=len(chosen) * self.FRIEND_SET_SCORE,
                has_conflicts=False
            ))

        # 3. Pick Winners (stable: earlier bundles win ties)
        suggestions.sort(key=lambda s: s.total_score, reverse=True)
        return suggestions[:self.MAX_SUGGESTIONS]

    def _group_by_primary_category(self, activities: List[Activity]) -> Dict[str, List[Activity]]:
        """Untagged activities are left out. Groups keep first-seen order."""
        groups: Dict[str, List[Activity]] = {}
        for activity in activities:
            category = activity.primary_category
            if category is None:
                continue
            groups.setdefault(category, []).append(activity)
        return groups

    def _build_conflict_free(self, candidates: List[Activity], pinned: List[Activity]) -> List[Activity]:
        """Admit candidates in order if they clash with nothing chosen or pinned."""
        chosen: List[Activity] = []
        for candidate in candidates:
            if any(self.detector.activities_conflict(candidate, p) for p in pinned):
                continue
            if any(self.detector.activities_conflict(candidate, c) for c in chosen):
                continue
            chosen.append(candidate)
        return chosen


def generate_suggested_sets(
    available: List[Activity],
    pinned: List[Activity],
    category_tags: List[CategoryTag],
    friend_interests: List[FriendInterest],
    travel_resolver: Optional[TravelTimeResolver] = None
) -> List[SuggestedSet]:
    recommender = SetRecommender(travel_resolver or TravelTimeResolver())
    return recommender.generate_suggested_sets(available, pinned, category_tags, friend_interests)

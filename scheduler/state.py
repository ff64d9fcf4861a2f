"""
Schedule Set State Management.

This module acts as the 'Memory' of the planner.
It tracks:
1. The named candidate schedules (Set A, Set B, ...) in creation order.
2. Which one is active, i.e. whose members count as "pinned".

Every mutation swaps in a whole new tuple of sets, so callers never observe a
half-applied change.
"""

import logging
import uuid
from typing import Iterable, List, Optional, Tuple

from models import Activity, ScheduleSet

logger = logging.getLogger(__name__)


def set_label(index: int) -> str:
    """0 -> 'A', 25 -> 'Z', 26 -> 'AA' (spreadsheet-column style)."""
    label = ""
    index += 1
    while index > 0:
        index, rem = divmod(index - 1, 26)
        label = chr(ord("A") + rem) + label
    return label


def label_index(label: str) -> Optional[int]:
    """Inverse of set_label: 'A' -> 0, 'AA' -> 26. None if not a label."""
    if not label or not label.isascii() or not label.isalpha() or not label.isupper():
        return None
    index = 0
    for ch in label:
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index - 1


class ScheduleSetManager:
    """
    Owns the ScheduleSet collection and the active pointer.
    """

    def __init__(self, sets: Iterable[ScheduleSet] = (), active_set_id: Optional[str] = None):
        """Initialize from persisted sets (or empty)."""
        self.sets: Tuple[ScheduleSet, ...] = tuple(sets)
        self.created_count = len(self.sets)
        # Restored sets may have gaps from deletes; never reuse a label
        for s in self.sets:
            if s.name.startswith("Set "):
                index = label_index(s.name[4:])
                if index is not None:
                    self.created_count = max(self.created_count, index + 1)

        if active_set_id is not None and self.get_set(active_set_id) is None:
            logger.warning(f"Active set {active_set_id} not found, falling back to first set.")
            active_set_id = None
        if active_set_id is None and self.sets:
            active_set_id = self.sets[0].id
        self.active_set_id: Optional[str] = active_set_id

    # --- Mutations ---

    def create_set(self) -> ScheduleSet:
        """Append an empty set named after its creation order and make it active."""
        taken = {s.name for s in self.sets}
        while f"Set {set_label(self.created_count)}" in taken:
            self.created_count += 1

        new_set = ScheduleSet(
            id=f"set_{uuid.uuid4().hex[:12]}",
            name=f"Set {set_label(self.created_count)}"
        )
        self.created_count += 1
        self.sets = self.sets + (new_set,)
        self.active_set_id = new_set.id
        logger.info(f"Created {new_set.name} ({new_set.id})")
        return new_set

    def delete_set(self, set_id: str) -> None:
        if self.get_set(set_id) is None:
            logger.warning(f"Cannot delete unknown set {set_id}")
            return

        self.sets = tuple(s for s in self.sets if s.id != set_id)
        if self.active_set_id == set_id:
            self.active_set_id = self.sets[0].id if self.sets else None
        logger.info(f"Deleted set {set_id}; active is now {self.active_set_id}")

    def rename_set(self, set_id: str, name: str) -> None:
        name = name.strip()
        if not name:
            raise ValueError("Set name cannot be blank")
        self._replace(set_id, lambda s: s.model_copy(update={"name": name}))

    def add_activity(self, set_id: str, activity_id: str) -> None:
        """Pin an activity into a set. Adding an existing member is a no-op."""
        target = self.get_set(set_id)
        if target is not None and activity_id in target.activity_ids:
            return
        self._replace(set_id, lambda s: s.model_copy(update={"activity_ids": s.activity_ids + (activity_id,)}))

    def remove_activity(self, set_id: str, activity_id: str) -> None:
        self._replace(set_id, lambda s: s.model_copy(
            update={"activity_ids": tuple(a for a in s.activity_ids if a != activity_id)}
        ))

    def switch_active(self, set_id: str) -> None:
        if self.get_set(set_id) is None:
            logger.warning(f"Cannot activate unknown set {set_id}")
            return
        self.active_set_id = set_id

    # --- Query Methods ---

    def get_set(self, set_id: str) -> Optional[ScheduleSet]:
        for s in self.sets:
            if s.id == set_id:
                return s
        return None

    @property
    def active_set(self) -> Optional[ScheduleSet]:
        if self.active_set_id is None:
            return None
        return self.get_set(self.active_set_id)

    def pinned_activities(self, activities: List[Activity]) -> List[Activity]:
        """Members of the active set, in pin order. Unknown ids are skipped."""
        active = self.active_set
        if active is None:
            return []

        by_id = {a.id: a for a in activities}
        pinned = []
        for activity_id in active.activity_ids:
            activity = by_id.get(activity_id)
            if activity is None:
                logger.warning(f"Pinned activity {activity_id} not found in activity list.")
                continue
            pinned.append(activity)
        return pinned

    def _replace(self, set_id: str, update) -> None:
        if self.get_set(set_id) is None:
            logger.warning(f"Cannot modify unknown set {set_id}")
            return
        self.sets = tuple(update(s) if s.id == set_id else s for s in self.sets)

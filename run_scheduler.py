"""
Main Execution Script for the Weekly Activity Planner.
Builds a sample week in memory, pins a couple of classes and prints what the
engine recommends next.
"""

import os
import sys
import logging

# Add current directory to path so imports work
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from models import (
    Activity,
    DEFAULT_CATEGORY_TAGS,
    FriendInterest,
    Location,
    PreferenceKind,
    PreferenceRank,
    PreferenceTarget,
    TravelTimeEdge,
)
from scheduler import (
    ActivityScorer,
    ScheduleSetManager,
    SetRecommender,
    TravelTimeResolver,
    ConflictDetector,
    cost_summary,
    schedule_by_day,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger("Main")


def build_sample_week():
    locations = [
        Location(id="loc_school", name="School Afterschool", has_flat_daily_rate=True, daily_rate=40),
        Location(id="loc_rec", name="Rec Center"),
        Location(id="loc_studio", name="Dance Studio"),
    ]
    edges = [
        TravelTimeEdge(location_a="loc_school", location_b="loc_rec", minutes=10),
        TravelTimeEdge(location_a="loc_school", location_b="loc_studio", minutes=20),
    ]
    activities = [
        Activity(id="act_robotics", name="Lego Robotics", location_id="loc_school",
                 time_slots=[{"day": "monday", "start": "15:00", "end": "16:00"}],
                 cost=450, category_tags=["robotics", "stem"]),
        Activity(id="act_coding", name="Scratch Coding", location_id="loc_school",
                 time_slots=[{"day": "wednesday", "start": "15:00", "end": "16:00"}],
                 cost=400, category_tags=["robotics"]),
        Activity(id="act_ballet", name="Ballet I", location_id="loc_studio",
                 time_slots=[{"day": "monday", "start": "16:00", "end": "17:00"}],
                 cost=60, cost_period="month", category_tags=["dance"]),
        Activity(id="act_hiphop", name="Hip Hop", location_id="loc_studio",
                 time_slots=[{"day": "thursday", "start": "4:00 PM", "end": "5:00 PM"}],
                 cost=60, cost_period="month", category_tags=["dance"]),
        Activity(id="act_soccer", name="Soccer", location_id="loc_rec",
                 time_slots=[{"day": "tuesday", "start": "15:30", "end": "16:30"},
                             {"day": "thursday", "start": "15:30", "end": "16:30"}],
                 cost=200, category_tags=["sports"]),
        Activity(id="act_art", name="Watercolor", location_id="loc_school",
                 time_slots=[{"day": "tuesday", "start": "15:00", "end": "16:00"}],
                 cost=300, category_tags=["art"]),
    ]
    preferences = [
        PreferenceRank(rank=1, target=PreferenceTarget(kind=PreferenceKind.CATEGORY, id="robotics"), display_name="Robotics"),
        PreferenceRank(rank=2, target=PreferenceTarget(kind=PreferenceKind.CATEGORY, id="dance"), display_name="Dance"),
    ]
    interests = [
        FriendInterest(friend_id="f_maya", activity_id="act_soccer", certainty="confirmed"),
        FriendInterest(friend_id="f_maya", activity_id="act_hiphop", certainty="likely"),
        FriendInterest(friend_id="f_leo", activity_id="act_soccer", certainty="maybe"),
    ]
    return locations, edges, activities, preferences, interests


def main():
    logger.info("🚀 Starting Weekly Activity Planner demo...")
    locations, edges, activities, preferences, interests = build_sample_week()

    travel = TravelTimeResolver(edges)
    manager = ScheduleSetManager()
    active = manager.create_set()
    manager.add_activity(active.id, "act_robotics")
    manager.add_activity(active.id, "act_art")

    pinned = manager.pinned_activities(activities)
    pinned_ids = {a.id for a in pinned}

    # --- PHASE 1: RANK WHAT IS LEFT ---
    scorer = ActivityScorer(travel, locations)
    ranked = scorer.rank_activities(activities, pinned, preferences, interests)

    print("\n" + "="*50)
    print(f"📊 RANKED ACTIVITIES vs {manager.active_set.name}")
    print("="*50)
    for entry in ranked:
        flag = "❌" if entry.conflicts_with_pinned else "✅"
        print(f"{flag} {entry.score:>4}  {entry.activity.name}")
        for reason in entry.conflict_reasons:
            print(f"        Conflicts with {reason}")

    # --- PHASE 2: SUGGESTED BUNDLES ---
    recommender = SetRecommender(travel)
    available = [a for a in activities if a.id not in pinned_ids]
    suggestions = recommender.generate_suggested_sets(available, pinned, DEFAULT_CATEGORY_TAGS, interests)

    print("\n💡 SUGGESTED SETS")
    for s in suggestions:
        print(f"  [{s.total_score}] {s.name}: {s.description} -> {', '.join(s.activity_ids)}")

    # --- PHASE 3: WEEK & COST ---
    print("\n🗓️  WEEK")
    for day, entries in schedule_by_day(pinned).items():
        if entries:
            print(f"  {day.label}: " + ", ".join(f"{a.name} {slot}" for a, slot in entries))

    clashes = ConflictDetector(travel).find_conflicts(pinned)
    if clashes:
        print("\n🔍 CONFLICTS IN SET")
        for c in clashes:
            print(f"  {c.activity_a_id} / {c.activity_b_id} on {c.day.label} {c.overlap_start}-{c.overlap_end}: {c.reason}")

    costs = cost_summary(manager.active_set, activities, locations)
    print(f"\n💸 Cost: {costs.activity_cost_by_period} + ${costs.flat_rate_daily_cost:.2f}/week flat rate")

    print("\n✅ Demo Complete.")


if __name__ == "__main__":
    main()

import itertools

from models import CategoryTag, DEFAULT_CATEGORY_TAGS, FriendInterest
from scheduler import ConflictDetector, SetRecommender, generate_suggested_sets

from conftest import make_activity


def assert_conflict_free(suggestions, pool, travel):
    detector = ConflictDetector(travel)
    by_id = {a.id: a for a in pool}
    for s in suggestions:
        assert not s.has_conflicts
        for a, b in itertools.combinations(s.activity_ids, 2):
            assert not detector.activities_conflict(by_id[a], by_id[b])


def test_category_focus_set_is_greedy_and_conflict_free(travel):
    available = [
        make_activity("r1", "loc_1", [("monday", "15:00", "16:00")], tags=["robotics"]),
        make_activity("r2", "loc_2", [("monday", "16:00", "17:00")], tags=["robotics"]),
        make_activity("r3", "loc_1", [("tuesday", "15:00", "16:00")], tags=["robotics", "art"]),
        make_activity("r4", "loc_1", [("wednesday", "15:00", "16:00")], tags=["robotics"]),
    ]

    suggestions = generate_suggested_sets(available, [], DEFAULT_CATEGORY_TAGS, [], travel)

    assert len(suggestions) == 1
    focus = suggestions[0]
    assert focus.name == "Robotics Focus"
    assert focus.description == "3 robotics activities without conflicts"
    assert focus.activity_ids == ["r1", "r3", "r4"]
    assert focus.total_score == 150
    assert_conflict_free(suggestions, available, travel)


def test_pinned_activities_block_candidates(travel):
    pinned = [make_activity("p", "loc_1", [("monday", "15:00", "16:00")])]
    available = [
        make_activity("d1", "loc_1", [("monday", "15:30", "16:30")], tags=["dance"]),
        make_activity("d2", "loc_1", [("tuesday", "15:00", "16:00")], tags=["dance"]),
        make_activity("d3", "loc_1", [("friday", "15:00", "16:00")], tags=["dance"]),
    ]

    suggestions = SetRecommender(travel).generate_suggested_sets(available, pinned, DEFAULT_CATEGORY_TAGS, [])

    assert [s.activity_ids for s in suggestions] == [["d2", "d3"]]


def test_groups_below_two_members_are_dropped(travel):
    available = [
        make_activity("a1", tags=["art"]),
        make_activity("s1", "loc_1", [("monday", "15:00", "16:00")], tags=["sports"]),
        make_activity("s2", "loc_1", [("monday", "15:30", "16:30")], tags=["sports"]),
        make_activity("untagged", "loc_1", [("friday", "15:00", "16:00")]),
    ]
    assert generate_suggested_sets(available, [], DEFAULT_CATEGORY_TAGS, [], travel) == []


def test_unknown_category_falls_back_to_id(travel):
    available = [
        make_activity("c1", "loc_1", [("monday", "15:00", "16:00")], tags=["chess"]),
        make_activity("c2", "loc_1", [("tuesday", "15:00", "16:00")], tags=["chess"]),
    ]
    tags = [CategoryTag(id="art", name="Art")]
    suggestions = generate_suggested_sets(available, [], tags, [], travel)
    assert suggestions[0].name == "chess Focus"
    assert suggestions[0].description == "2 chess activities without conflicts"


def test_friends_set(travel):
    available = [
        make_activity("a", "loc_1", [("monday", "15:00", "16:00")], tags=["art"]),
        make_activity("b", "loc_2", [("monday", "16:00", "17:00")], tags=["sports"]),
        make_activity("c", "loc_2", [("thursday", "16:00", "17:00")], tags=["music"]),
    ]
    interests = [
        FriendInterest(friend_id="f1", activity_id="a"),
        FriendInterest(friend_id="f1", activity_id="b"),
        FriendInterest(friend_id="f2", activity_id="c"),
        FriendInterest(friend_id="f2", activity_id="not_available"),
    ]

    suggestions = generate_suggested_sets(available, [], DEFAULT_CATEGORY_TAGS, interests, travel)

    assert len(suggestions) == 1
    friends = suggestions[0]
    assert friends.name == "With Friends"
    assert friends.description == "2 activities your friends are taking"
    assert friends.activity_ids == ["a", "c"]
    assert friends.total_score == 130


def test_at_most_three_sorted_by_score(travel):
    available = []
    for i, category in enumerate(["art", "dance", "music", "sports"]):
        size = i + 2
        for j in range(size):
            day = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday"][j]
            available.append(make_activity(f"{category}_{j}", "loc_1", [(day, "15:00", "16:00")], tags=[category]))
    interests = [FriendInterest(friend_id="f", activity_id=a.id) for a in available if a.id.startswith("art_")]

    suggestions = generate_suggested_sets(available, [], DEFAULT_CATEGORY_TAGS, interests, travel)

    assert len(suggestions) == 3
    scores = [s.total_score for s in suggestions]
    assert scores == sorted(scores, reverse=True)
    assert [s.name for s in suggestions] == ["Sports Focus", "Music Focus", "Dance Focus"]
    assert_conflict_free(suggestions, available, travel)


def test_empty_available_yields_nothing(travel):
    assert generate_suggested_sets([], [], DEFAULT_CATEGORY_TAGS, [], travel) == []


def test_friends_set_excludes_travel_clash_with_pinned(travel):
    pinned = [make_activity("p", "loc_1", [("monday", "15:00", "16:00")])]
    available = [
        make_activity("a", "loc_2", [("monday", "16:00", "17:00")], tags=["art"]),
        make_activity("b", "loc_1", [("tuesday", "15:00", "16:00")], tags=["music"]),
        make_activity("c", "loc_2", [("wednesday", "15:00", "16:00")], tags=["sports"]),
    ]
    interests = [FriendInterest(friend_id="f1", activity_id=a.id) for a in available]

    suggestions = generate_suggested_sets(available, pinned, DEFAULT_CATEGORY_TAGS, interests, travel)

    assert [s.name for s in suggestions] == ["With Friends"]
    assert suggestions[0].activity_ids == ["b", "c"]
    assert suggestions[0].total_score == 130
    assert_conflict_free(suggestions, available + pinned, travel)

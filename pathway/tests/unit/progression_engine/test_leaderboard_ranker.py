"""Unit tests for leaderboard_ranker.py"""

import pytest
from pathway.services.progression_engine.leaderboard_ranker import (
    assign_competition_ranks,
    format_display_name,
    rank_leaderboard,
)


def member(user_id, full_name=None):
    return {"user_id": user_id, "full_name": full_name}


@pytest.fixture
def thirty_members():
    """30 members with distinct scores; user-15 is ranked 15th."""
    members = [member(f"user-{n:02d}", f"Member Number{n}") for n in range(1, 31)]
    points = {f"user-{n:02d}": 1000 - n * 10 for n in range(1, 31)}
    return members, points


def test_competition_ranks_with_tie():
    """[100, 100, 80] ranks as [1, 1, 3]."""
    members = [member("a", "Ann Lee"), member("b", "Bob Ray"), member("c", "Cy Dunn")]
    points = {"a": 100, "b": 100, "c": 80}

    result = rank_leaderboard(members, points, {}, "a")

    assert [entry["rank"] for entry in result["entries"]] == [1, 1, 3]


def test_assign_competition_ranks_multiple_ties():
    entries = [{"points": p} for p in [50, 40, 40, 40, 10, 10]]

    assert [e["rank"] for e in assign_competition_ranks(entries)] == [1, 2, 2, 2, 5, 5]


def test_self_append_outside_top_ten(thirty_members):
    members, points = thirty_members

    result = rank_leaderboard(members, points, {}, "user-15")

    assert len(result["entries"]) == 11
    assert [entry["rank"] for entry in result["entries"][:10]] == list(range(1, 11))
    assert result["entries"][10]["user_id"] == "user-15"
    assert result["entries"][10]["rank"] == 15
    assert result["entries"][10]["is_current_user"] is True
    assert result["current_user_appended"] is True
    assert result["current_user_rank"] == 15
    assert result["current_user_points"] == 850
    assert result["total_participants"] == 30


def test_no_append_inside_top_ten(thirty_members):
    members, points = thirty_members

    result = rank_leaderboard(members, points, {}, "user-03")

    assert len(result["entries"]) == 10
    assert result["current_user_appended"] is False
    assert result["entries"][2]["is_current_user"] is True


def test_custom_limit(thirty_members):
    members, points = thirty_members

    result = rank_leaderboard(members, points, {}, "user-01", limit=5)

    assert len(result["entries"]) == 5


def test_invalid_limit():
    with pytest.raises(ValueError):
        rank_leaderboard([], {}, {}, None, limit=0)


def test_empty_member_list():
    result = rank_leaderboard([], {}, {}, "user-01")

    assert result == {
        "entries": [],
        "current_user_rank": None,
        "current_user_points": 0,
        "total_participants": 0,
        "current_user_appended": False,
    }


def test_members_without_points_or_streaks_get_zero():
    result = rank_leaderboard([member("a", "Ann Lee"), member("b", "Bob Ray")], {"b": 20}, {"b": 3}, "a")

    assert result["entries"][0]["user_id"] == "b"
    assert result["entries"][0]["current_streak"] == 3
    assert result["entries"][1]["points"] == 0
    assert result["entries"][1]["current_streak"] == 0
    assert result["current_user_rank"] == 2


def test_tie_order_is_independent_of_member_order():
    points = {"a": 10, "b": 10, "c": 10}
    forward = rank_leaderboard([member("a"), member("b"), member("c")], points, {}, "a")
    backward = rank_leaderboard([member("c"), member("b"), member("a")], points, {}, "a")

    assert forward == backward


def test_duplicate_members_counted_once():
    result = rank_leaderboard([member("a", "Ann Lee"), member("a", "Ann Lee")], {"a": 5}, {}, "a")

    assert result["total_participants"] == 1


@pytest.mark.parametrize("full_name, expected", [
    ("Jane Doe", "Jane D."),
    ("Mary Ann Smith", "Mary S."),
    ("Cher", "Cher"),
    ("  ", "Unknown"),
    ("", "Unknown"),
    (None, "Unknown"),
])
def test_format_display_name(full_name, expected):
    assert format_display_name(full_name) == expected

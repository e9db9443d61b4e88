"""Unit tests for sequence_evaluator.py"""

from datetime import date

import pytest
from pathway.services.progression_engine.sequence_evaluator import (
    evaluate_content_access,
    evaluate_sequence,
    find_next_item,
)


@pytest.fixture
def completion_path():
    """Completion-based path with items listed out of order."""
    return {
        "name": "PATH-001",
        "path_name": "Leadership Foundations",
        "unlock_mode": "completion_based",
        "completion_requirement": "video_only",
        "enrollment_date": None,
        "unlock_interval_days": 7,
        "items": [
            {"content_id": "CONTENT-003", "sequence_order": 3, "is_optional": True},
            {"content_id": "CONTENT-001", "sequence_order": 1},
            {"content_id": "CONTENT-002", "sequence_order": 2},
        ],
    }


@pytest.fixture
def completion_states():
    return {
        "CONTENT-001": {
            "video_progress_percent": 100,
            "worksheet_submitted": True,
            "checkin_status": "none",
            "bold_action_status": "none",
        },
        "CONTENT-002": {
            "video_progress_percent": 40,
            "worksheet_submitted": False,
            "checkin_status": "none",
            "bold_action_status": "none",
        },
    }


def test_no_path_has_no_sequence():
    result = evaluate_sequence(None, {}, date(2025, 1, 1))

    assert result["has_sequence"] is False
    assert result["items"] == []
    assert result["summary"]["total_items"] == 0
    assert result["summary"]["next_content_id"] is None


def test_path_without_items_has_no_sequence(completion_path):
    completion_path["items"] = []

    assert evaluate_sequence(completion_path, {}, date(2025, 1, 1))["has_sequence"] is False


def test_items_are_sorted_and_evaluated(completion_path, completion_states):
    result = evaluate_sequence(completion_path, completion_states, date(2025, 1, 1))

    assert result["has_sequence"] is True
    assert result["path_name"] == "Leadership Foundations"
    assert result["unlock_mode"] == "completion_based"
    assert [item["content_id"] for item in result["items"]] == ["CONTENT-001", "CONTENT-002", "CONTENT-003"]
    assert [item["is_unlocked"] for item in result["items"]] == [True, True, False]
    assert [item["is_complete"] for item in result["items"]] == [True, False, False]
    assert result["items"][2]["unlock_reason"] == "Complete previous module first"
    assert result["items"][2]["is_optional"] is True


def test_item_progress_fields(completion_path, completion_states):
    items = evaluate_sequence(completion_path, completion_states, date(2025, 1, 1))["items"]

    assert items[0]["progress_percent"] == 100
    assert items[0]["completed_steps"] == 2
    assert items[1]["progress_percent"] == 40
    assert items[2]["progress_percent"] == 0
    assert items[2]["completed_steps"] == 0


def test_summary(completion_path, completion_states):
    summary = evaluate_sequence(completion_path, completion_states, date(2025, 1, 1))["summary"]

    assert summary == {
        "total_items": 3,
        "completed_items": 1,
        "unlocked_items": 2,
        "completion_percentage": 33.33,
        "next_content_id": "CONTENT-002",
    }


def test_unlock_dates_are_iso_strings():
    path = {
        "name": "PATH-002",
        "path_name": "Weekly",
        "unlock_mode": "time_based",
        "completion_requirement": "full",
        "enrollment_date": date(2025, 1, 1),
        "unlock_interval_days": 7,
        "items": [
            {"content_id": "A", "sequence_order": 1},
            {"content_id": "B", "sequence_order": 2},
            {"content_id": "C", "sequence_order": 3},
        ],
    }
    items = evaluate_sequence(path, {}, date(2025, 1, 10))["items"]

    assert [item["unlock_date"] for item in items] == ["2025-01-01", "2025-01-08", "2025-01-15"]
    assert items[2]["unlock_reason"] == "Unlocks 2025-01-15"


def test_invalid_path_raises(completion_path):
    completion_path["unlock_mode"] = "random"

    with pytest.raises(ValueError):
        evaluate_sequence(completion_path, {}, date(2025, 1, 1))


def test_sequence_is_deterministic(completion_path, completion_states):
    today = date(2025, 3, 3)

    assert evaluate_sequence(completion_path, completion_states, today) == evaluate_sequence(
        completion_path, completion_states, today
    )


def test_content_access_without_sequence_is_unlocked():
    """An organization without a path never locks anything."""
    sequence = evaluate_sequence(None, {}, date(2025, 1, 1))
    access = evaluate_content_access(sequence, ["CONTENT-001", "CONTENT-999"])

    assert access == {
        "CONTENT-001": {"is_unlocked": True, "unlock_reason": None, "in_sequence": False},
        "CONTENT-999": {"is_unlocked": True, "unlock_reason": None, "in_sequence": False},
    }


def test_content_access_against_sequence(completion_path, completion_states):
    sequence = evaluate_sequence(completion_path, completion_states, date(2025, 1, 1))
    access = evaluate_content_access(sequence, ["CONTENT-003", "CONTENT-002", "OUTSIDE"])

    assert access["CONTENT-003"] == {
        "is_unlocked": False,
        "unlock_reason": "Complete previous module first",
        "in_sequence": True,
    }
    assert access["CONTENT-002"]["is_unlocked"] is True
    assert access["OUTSIDE"] == {"is_unlocked": True, "unlock_reason": None, "in_sequence": False}


def test_find_next_item_skips_complete_and_locked():
    items = [
        {"content_id": "A", "is_unlocked": True, "is_complete": True},
        {"content_id": "B", "is_unlocked": False, "is_complete": False},
        {"content_id": "C", "is_unlocked": True, "is_complete": False},
    ]

    assert find_next_item(items) == "C"
    assert find_next_item(items[:2]) is None

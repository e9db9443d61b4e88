"""Unit tests for unlock_evaluator.py"""

from datetime import date

import pytest
from pathway.services.progression_engine.unlock_evaluator import (
    compute_time_unlock_date,
    evaluate_unlocks,
    sort_items,
    validate_path_config,
)


def make_path(unlock_mode, enrollment_date="2025-01-01", interval=7, requirement="video_only"):
    return {
        "name": "PATH-001",
        "unlock_mode": unlock_mode,
        "completion_requirement": requirement,
        "enrollment_date": enrollment_date,
        "unlock_interval_days": interval,
    }


def make_items(count, overrides=None):
    items = []
    for index in range(count):
        item = {
            "content_id": f"CONTENT-{index + 1:03d}",
            "sequence_order": index + 1,
            "unlock_date": None,
            "is_optional": False,
            "is_manually_unlocked": False,
        }
        item.update((overrides or {}).get(index, {}))
        items.append(item)
    return items


def never_complete(item):
    return False


def complete_ids(*content_ids):
    return lambda item: item["content_id"] in content_ids


@pytest.mark.parametrize("unlock_mode", ["manual", "time_based", "completion_based", "hybrid"])
def test_first_item_always_unlocked(unlock_mode):
    """First item is unlocked in every mode, even before enrollment."""
    path = make_path(unlock_mode, enrollment_date="2030-06-01")
    result = evaluate_unlocks(path, make_items(3), never_complete, date(2025, 1, 1))

    assert result[0]["is_unlocked"] is True
    assert result[0]["unlock_reason"] is None
    assert result[0]["lock_cause"] is None


def test_time_based_interval_arithmetic():
    """Item at index 2 unlocks 14 days after enrollment, on the 15th."""
    path = make_path("time_based", enrollment_date="2025-01-01", interval=7)
    result = evaluate_unlocks(path, make_items(3), never_complete, date(2025, 1, 14))

    assert [r["unlock_date"] for r in result] == [date(2025, 1, 1), date(2025, 1, 8), date(2025, 1, 15)]
    assert result[1]["is_unlocked"] is True
    assert result[2]["is_unlocked"] is False
    assert result[2]["unlock_reason"] == "Unlocks 2025-01-15"
    assert result[2]["lock_cause"] == "time"


def test_time_based_unlocks_on_the_day():
    path = make_path("time_based", enrollment_date="2025-01-01", interval=7)
    result = evaluate_unlocks(path, make_items(3), never_complete, date(2025, 1, 15))

    assert all(r["is_unlocked"] for r in result)


def test_time_based_explicit_unlock_date_overrides_schedule():
    path = make_path("time_based", enrollment_date="2025-01-01", interval=7)
    items = make_items(3, {2: {"unlock_date": "2025-01-03"}})
    result = evaluate_unlocks(path, items, never_complete, date(2025, 1, 5))

    assert result[1]["is_unlocked"] is False
    assert result[2]["is_unlocked"] is True
    assert result[2]["unlock_date"] == date(2025, 1, 3)


def test_time_based_zero_interval_unlocks_everything_at_enrollment():
    path = make_path("time_based", enrollment_date="2025-01-01", interval=0)
    result = evaluate_unlocks(path, make_items(4), never_complete, date(2025, 1, 1))

    assert all(r["is_unlocked"] for r in result)


def test_manual_mode_respects_admin_unlock():
    path = make_path("manual", enrollment_date=None)
    items = make_items(3, {1: {"is_manually_unlocked": True}})
    result = evaluate_unlocks(path, items, never_complete, date(2025, 1, 1))

    assert result[1]["is_unlocked"] is True
    assert result[2]["is_unlocked"] is False
    assert result[2]["unlock_reason"] == "Awaiting admin unlock"
    assert result[2]["lock_cause"] == "awaiting_admin"


def test_completion_based_follows_previous_item():
    path = make_path("completion_based", enrollment_date=None)
    result = evaluate_unlocks(path, make_items(3), complete_ids("CONTENT-001"), date(2025, 1, 1))

    assert result[1]["is_unlocked"] is True
    assert result[2]["is_unlocked"] is False
    assert result[2]["unlock_reason"] == "Complete previous module first"
    assert result[2]["lock_cause"] == "completion"


def test_completion_based_ignores_dates():
    path = make_path("completion_based", enrollment_date="2030-01-01")
    result = evaluate_unlocks(path, make_items(2), complete_ids("CONTENT-001"), date(2025, 1, 1))

    assert result[1]["is_unlocked"] is True


class TestHybrid:
    """Hybrid mode needs both the date and the previous completion."""

    path = make_path("hybrid", enrollment_date="2025-01-01", interval=7)

    def evaluate(self, today, is_complete):
        return evaluate_unlocks(self.path, make_items(2), is_complete, today)[1]

    def test_unlocked_when_both_conditions_hold(self):
        result = self.evaluate(date(2025, 1, 8), complete_ids("CONTENT-001"))

        assert result["is_unlocked"] is True
        assert result["unlock_reason"] is None

    def test_neither_condition_names_both(self):
        result = self.evaluate(date(2025, 1, 5), never_complete)

        assert result["is_unlocked"] is False
        assert result["unlock_reason"] == "Unlocks 2025-01-08 (requires previous completion)"
        assert result["lock_cause"] == "time_and_completion"

    def test_complete_but_too_early_names_only_the_date(self):
        result = self.evaluate(date(2025, 1, 5), complete_ids("CONTENT-001"))

        assert result["is_unlocked"] is False
        assert result["unlock_reason"] == "Unlocks 2025-01-08"
        assert result["lock_cause"] == "time"

    def test_time_elapsed_but_previous_incomplete(self):
        result = self.evaluate(date(2025, 2, 1), never_complete)

        assert result["is_unlocked"] is False
        assert result["unlock_reason"] == "Complete previous module first"
        assert result["lock_cause"] == "completion"


def test_no_path_means_no_sequence():
    assert evaluate_unlocks(None, make_items(3), never_complete, date(2025, 1, 1)) == []


def test_path_without_items_means_no_sequence():
    assert evaluate_unlocks(make_path("hybrid"), [], never_complete, date(2025, 1, 1)) == []


def test_evaluation_is_deterministic():
    path = make_path("hybrid")
    items = make_items(5)
    today = date(2025, 1, 20)

    first = evaluate_unlocks(path, items, complete_ids("CONTENT-001", "CONTENT-002"), today)
    second = evaluate_unlocks(path, items, complete_ids("CONTENT-001", "CONTENT-002"), today)

    assert first == second


def test_sort_items_keeps_input_order_for_duplicates():
    items = [
        {"content_id": "C", "sequence_order": 2},
        {"content_id": "A", "sequence_order": 1},
        {"content_id": "B", "sequence_order": 2},
        {"content_id": "D", "sequence_order": None},
        {"content_id": "E", "sequence_order": 10},
    ]

    assert [item["content_id"] for item in sort_items(items)] == ["A", "C", "B", "E", "D"]


def test_compute_time_unlock_date_without_enrollment():
    assert compute_time_unlock_date({"unlock_date": None}, 3, None, 7) is None
    assert compute_time_unlock_date({"unlock_date": "2025-03-01"}, 3, None, 7) == date(2025, 3, 1)


@pytest.mark.parametrize("overrides, message", [
    ({"unlock_mode": "weekly"}, "Unknown unlock mode"),
    ({"completion_requirement": "quiz"}, "Unknown completion requirement"),
    ({"unlock_interval_days": -1}, "must be >= 0"),
    ({"unlock_interval_days": 1.5}, "must be an integer"),
    ({"unlock_interval_days": True}, "must be an integer"),
    ({"enrollment_date": None}, "requires an enrollment_date"),
])
def test_validate_path_config_rejects_bad_input(overrides, message):
    path = make_path("hybrid")
    path.update(overrides)

    with pytest.raises(ValueError, match=message):
        validate_path_config(path)


def test_evaluate_unlocks_fails_fast_on_negative_interval():
    with pytest.raises(ValueError):
        evaluate_unlocks(make_path("time_based", interval=-7), make_items(2), never_complete, date(2025, 1, 1))


def test_manual_and_completion_modes_need_no_enrollment_date():
    validate_path_config(make_path("manual", enrollment_date=None))
    validate_path_config(make_path("completion_based", enrollment_date=None))

"""Unit tests for the leaderboard aggregation."""

from types import SimpleNamespace

import pytest

from streamboard.services.leaderboard import (
    aggregate_leaderboard,
    coerce_score,
    unwrap_field_value,
)

EMPTY = {"totalPlayers": 0, "leaderboard": []}


def record(player, score):
    return [
        {"name": "player", "value": {"value": player}},
        {"name": "score", "value": {"value": score}},
    ]


@pytest.mark.parametrize("records", [[], None, "not-a-list", 42, {"a": 1}])
def test_empty_or_invalid_input(records):
    assert aggregate_leaderboard(records) == EMPTY


def test_best_score_per_player_ranked():
    records = [record("A", 10), record("A", 25), record("B", 30), record("B", 5)]

    result = aggregate_leaderboard(records)

    assert result == {
        "totalPlayers": 2,
        "leaderboard": [
            {"rank": 1, "player": "B", "score": "30"},
            {"rank": 2, "player": "A", "score": "25"},
        ],
    }


def test_equal_scores_keep_first_seen_order():
    first = SimpleNamespace(name="player", value="A")
    second = SimpleNamespace(name="player", value="A")
    records = [
        [first, {"name": "score", "value": 10}],
        [second, {"name": "score", "value": 10}],
        record("B", 10),
    ]

    result = aggregate_leaderboard(records)

    assert result["totalPlayers"] == 2
    # Ties keep first-seen order in the ranking as well.
    assert [entry["player"] for entry in result["leaderboard"]] == ["A", "B"]
    assert [entry["rank"] for entry in result["leaderboard"]] == [1, 2]


def test_records_without_player_are_dropped():
    records = [
        record("", 100),
        [{"name": "player", "value": None}, {"name": "score", "value": 90}],
        [{"name": "score", "value": 80}],
        record("A", 1),
    ]

    result = aggregate_leaderboard(records)

    assert result["totalPlayers"] == 1
    assert result["leaderboard"] == [{"rank": 1, "player": "A", "score": "1"}]


def test_large_scores_render_exactly():
    huge = 2**200 + 1
    result = aggregate_leaderboard([record("A", huge), record("B", 2**53 + 1)])

    assert result["leaderboard"][0] == {"rank": 1, "player": "A", "score": str(huge)}
    assert result["leaderboard"][1]["score"] == "9007199254740993"


def test_string_scores_are_numeric():
    result = aggregate_leaderboard([record("A", "9"), record("B", "10")])

    assert [entry["player"] for entry in result["leaderboard"]] == ["B", "A"]


class TestUnwrapFieldValue:
    def test_wrapped_mapping(self):
        assert unwrap_field_value({"name": "score", "value": {"value": 7}}) == 7

    def test_bare_mapping(self):
        assert unwrap_field_value({"name": "score", "value": 7}) == 7

    def test_wrapped_object(self):
        field = SimpleNamespace(name="player", value=SimpleNamespace(value="A"))
        assert unwrap_field_value(field) == "A"

    def test_null_inner_value_falls_back_to_outer(self):
        outer = {"value": None, "type": "uint256"}
        assert unwrap_field_value({"name": "score", "value": outer}) is outer

    def test_missing_value(self):
        assert unwrap_field_value({"name": "score"}) is None

    def test_only_one_level_is_unwrapped(self):
        field = {"value": {"value": {"value": 3}}}
        assert unwrap_field_value(field) == {"value": 3}


@pytest.mark.parametrize(
    "raw, expected",
    [
        (5, 5),
        ("12", 12),
        ("010", 10),
        ("0x1f", 31),
        ("2.5", 2.5),
        (True, 1),
        ("abc", 0),
        (None, 0),
        ("Infinity", 0),
        ("nan", 0),
        (float("inf"), 0),
    ],
)
def test_coerce_score(raw, expected):
    assert coerce_score(raw) == expected


def test_wrapper_without_inner_player_is_dropped():
    records = [
        [
            {"name": "player", "value": {"value": None, "type": "address"}},
            {"name": "score", "value": 5},
        ],
        [{"name": "player", "value": ["A"]}, {"name": "score", "value": 7}],
        record("B", 3),
    ]

    result = aggregate_leaderboard(records)

    assert result == {
        "totalPlayers": 1,
        "leaderboard": [{"rank": 1, "player": "B", "score": "3"}],
    }


def test_hex_string_scores_rank_numerically():
    result = aggregate_leaderboard([record("A", "0x1f"), record("B", "30")])

    assert result["leaderboard"][0] == {"rank": 1, "player": "A", "score": "31"}

"""Best-score leaderboard built from raw data-stream records."""

from __future__ import annotations

import math
from collections.abc import Hashable
from typing import Any, Dict, List, Mapping, Union

Number = Union[int, float]

_MISSING = object()


def _lookup(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key, _MISSING)
    return getattr(obj, key, _MISSING)


def unwrap_field_value(field: Any) -> Any:
    """Return a field's scalar value, unwrapping at most one ``value`` level.

    Retrieved fields carry either a bare value (``{"value": 10}``) or a wrapper
    holding the value (``{"value": {"value": 10}}``). Mappings and objects with
    a ``value`` attribute are both accepted.
    """

    value = _lookup(field, "value")
    if value is _MISSING:
        return None
    inner = _lookup(value, "value")
    if inner is _MISSING or inner is None:
        return value
    return inner


def coerce_score(value: Any) -> Number:
    """Best-effort numeric conversion; unparseable or non-finite input counts as 0."""

    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else 0
    if isinstance(value, str):
        text = value.strip()
        for base in (10, 0):
            try:
                return int(text, base)
            except ValueError:
                pass
        try:
            number = float(text)
        except ValueError:
            return 0
        return number if math.isfinite(number) else 0
    return 0


def render_score(score: Number) -> str:
    if isinstance(score, float) and score.is_integer():
        return str(int(score))
    return str(score)


def normalize_record(fields: Any) -> Dict[str, Any]:
    """Pull ``player`` and ``score`` out of one record's field list."""

    player: Any = ""
    score: Number = 0
    if not isinstance(fields, (list, tuple)):
        return {"player": player, "score": score}
    for field in fields:
        name = _lookup(field, "name")
        if name == "player":
            player = unwrap_field_value(field)
        elif name == "score":
            score = coerce_score(unwrap_field_value(field))
    return {"player": player, "score": score}


def aggregate_leaderboard(records: Any) -> Dict[str, Any]:
    """Reduce raw records to one ranked entry per player, best score first."""

    if not isinstance(records, (list, tuple)) or not records:
        return {"totalPlayers": 0, "leaderboard": []}

    best: Dict[Any, Dict[str, Any]] = {}
    for fields in records:
        entry = normalize_record(fields)
        # Players that cannot key the table (e.g. an unwrapped mapping) are dropped.
        if not entry["player"] or not isinstance(entry["player"], Hashable):
            continue
        current = best.get(entry["player"])
        if current is None or entry["score"] > current["score"]:
            best[entry["player"]] = entry

    # sorted() is stable, so equal scores keep first-seen order.
    ranked = sorted(best.values(), key=lambda item: item["score"], reverse=True)
    leaderboard: List[Dict[str, Any]] = [
        {"rank": index, "player": item["player"], "score": render_score(item["score"])}
        for index, item in enumerate(ranked, start=1)
    ]
    return {"totalPlayers": len(leaderboard), "leaderboard": leaderboard}


__all__ = [
    "aggregate_leaderboard",
    "coerce_score",
    "normalize_record",
    "render_score",
    "unwrap_field_value",
]

"""Service layer helpers."""

from .leaderboard import aggregate_leaderboard, unwrap_field_value
from .schema import PLAYER_SCHEMA, PLAYER_SCHEMA_NAME, InitState, SchemaInitializer
from .scores import fetch_leaderboard, parse_score, publish_score

__all__ = [
    "InitState",
    "PLAYER_SCHEMA",
    "PLAYER_SCHEMA_NAME",
    "SchemaInitializer",
    "aggregate_leaderboard",
    "fetch_leaderboard",
    "parse_score",
    "publish_score",
    "unwrap_field_value",
]

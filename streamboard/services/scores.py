"""Publish and read paths for player scores."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..chain import DataStream, SchemaEncoder, SchemaEncodingError, StreamsClient, to_bytes32
from ..core.time import epoch_millis
from .leaderboard import aggregate_leaderboard

logger = logging.getLogger(__name__)


def parse_score(value: Any) -> int:
    """Convert integer-like input to ``int``.

    Accepts ints, bools, integral floats and decimal or ``0x`` strings.
    Range is not checked here; negative values fail at uint256 encoding.
    """

    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ValueError(f"Cannot convert {value} to an integer score")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text, 10)
        except ValueError:
            pass
        try:
            return int(text, 0)
        except ValueError:
            raise ValueError(f"Cannot convert {value!r} to an integer score") from None
    raise ValueError(f"Cannot convert {value!r} to an integer score")


def record_key(now_ms: Optional[int] = None) -> bytes:
    """Per-submission record id derived from the current timestamp."""

    return to_bytes32(f"player-{epoch_millis() if now_ms is None else now_ms}")


async def publish_score(
    streams: StreamsClient,
    encoder: SchemaEncoder,
    schema_id: str,
    player: str,
    score: Any,
    now_ms: Optional[int] = None,
) -> str:
    """Encode one score record, write it and return the transaction hash."""

    data = encoder.encode_data(
        [
            {"name": "player", "value": player, "type": "address"},
            {"name": "score", "value": parse_score(score), "type": "uint256"},
        ]
    )
    if not data:
        raise SchemaEncodingError("Failed to encode data")

    tx_hash = await streams.set(
        [DataStream(id=record_key(now_ms), schema_id=schema_id, data=data)]
    )
    logger.info("Published: %s | Score %s | Tx %s", player, score, tx_hash)
    return tx_hash


async def fetch_leaderboard(
    streams: StreamsClient,
    encoder: SchemaEncoder,
    schema_id: str,
    publisher: str,
) -> Dict[str, Any]:
    records = await streams.get_all_publisher_data_for_schema(
        schema_id, publisher, encoder
    )
    return aggregate_leaderboard(records)


__all__ = ["fetch_leaderboard", "parse_score", "publish_score", "record_key"]

"""Score publishing and leaderboard endpoints."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException

from ...chain import SchemaEncoder, StreamsClient
from ...dependencies import (
    get_player_encoder,
    get_publisher,
    get_schema_initializer,
    get_streams_client,
)
from ...services.schema import SchemaInitializer
from ...services.scores import fetch_leaderboard, publish_score

logger = logging.getLogger(__name__)

router = APIRouter(tags=["scores"])


@router.post("/publish")
async def publish(
    body: Any = Body(default=None),
    streams: StreamsClient = Depends(get_streams_client),
    encoder: SchemaEncoder = Depends(get_player_encoder),
    initializer: SchemaInitializer = Depends(get_schema_initializer),
) -> Dict[str, Any]:
    """Write one score record on chain."""

    # Non-object JSON bodies carry neither field.
    if not isinstance(body, Mapping):
        body = {}
    player = body.get("player")
    score = body.get("score")
    # A score of 0 is valid; only an absent score is rejected.
    if not player or score is None:
        raise HTTPException(400, "Missing player or score")

    try:
        schema_id = await initializer.ensure_schema_id()
        tx_hash = await publish_score(streams, encoder, schema_id, player, score)
    except Exception as exc:
        logger.exception("Publish error")
        raise HTTPException(500, str(exc)) from exc

    return {"success": True, "txHash": tx_hash}


@router.get("/data")
async def leaderboard(
    streams: StreamsClient = Depends(get_streams_client),
    encoder: SchemaEncoder = Depends(get_player_encoder),
    initializer: SchemaInitializer = Depends(get_schema_initializer),
    publisher: str = Depends(get_publisher),
) -> Dict[str, Any]:
    """Best score per player, ranked."""

    try:
        schema_id = await initializer.ensure_schema_id()
        return await fetch_leaderboard(streams, encoder, schema_id, publisher)
    except Exception as exc:
        logger.error("Fetch error: %s", exc)
        raise HTTPException(500, str(exc)) from exc


__all__ = ["router"]

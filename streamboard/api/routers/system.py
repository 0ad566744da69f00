"""System-level API endpoints."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from ...chain import ChainClient
from ...core import CHAIN_CURRENCY_DECIMALS, CHAIN_NAME, RPC_URL
from ...dependencies import get_chain_client, get_schema_initializer
from ...services.schema import SchemaInitializer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


def format_balance(balance: int, decimals: int = CHAIN_CURRENCY_DECIMALS) -> str:
    """Render a wei balance in whole tokens with four decimal places."""

    return f"{balance / 10 ** decimals:.4f}"


@router.get("/health")
async def health(
    chain: ChainClient = Depends(get_chain_client),
    initializer: SchemaInitializer = Depends(get_schema_initializer),
) -> Dict[str, Any]:
    """Wallet, balance and schema readiness."""

    try:
        address = chain.address
        balance = await chain.get_balance(address)
        schema_id = await initializer.ensure_schema_id()
    except Exception as exc:
        logger.error("Health check failed: %s", exc)
        raise HTTPException(500, str(exc)) from exc

    return {
        "status": "ok",
        "wallet": address,
        "balance": str(balance),
        "balanceSTT": format_balance(balance),
        "schemaId": schema_id,
        "network": CHAIN_NAME,
        "rpc": RPC_URL,
    }


@router.get("/schema")
async def get_schema(
    initializer: SchemaInitializer = Depends(get_schema_initializer),
) -> Dict[str, str]:
    try:
        schema_id = await initializer.ensure_schema_id()
    except Exception as exc:
        raise HTTPException(
            500, {"error": "Failed to compute schema ID", "message": str(exc)}
        ) from exc
    return {"schemaId": schema_id}


__all__ = ["format_balance", "router"]

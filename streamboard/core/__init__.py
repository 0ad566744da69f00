"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    CHAIN_CURRENCY_DECIMALS,
    CHAIN_ID,
    CHAIN_NAME,
    LOG_LEVEL,
    PRIVATE_KEY,
    PUBLISHER_WALLET,
    RECEIPT_TIMEOUT_SECONDS,
    RPC_URL,
    SCHEMA_WARMUP,
    STREAMS_CONTRACT_ADDRESS,
)
from .time import epoch_millis, utcnow

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "CHAIN_CURRENCY_DECIMALS",
    "CHAIN_ID",
    "CHAIN_NAME",
    "LOG_LEVEL",
    "PRIVATE_KEY",
    "PUBLISHER_WALLET",
    "RECEIPT_TIMEOUT_SECONDS",
    "RPC_URL",
    "SCHEMA_WARMUP",
    "STREAMS_CONTRACT_ADDRESS",
    "epoch_millis",
    "utcnow",
]

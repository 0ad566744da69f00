"""Application settings and environment helpers."""

from __future__ import annotations

import os
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _require_env(name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Signing and publishing -----------------------------------------------------
PRIVATE_KEY = _require_env("PRIVATE_KEY")
STREAMS_CONTRACT_ADDRESS = _require_env("STREAMS_CONTRACT_ADDRESS")

# Falls back to the signer address when unset (see core.chain).
PUBLISHER_WALLET = os.getenv("PUBLISHER_WALLET") or None


# Network --------------------------------------------------------------------
RPC_URL = os.getenv("RPC_URL", "https://dream-rpc.somnia.network")
CHAIN_ID = _env_int("CHAIN_ID", 50312)
CHAIN_NAME = os.getenv("CHAIN_NAME", "Somnia Testnet")
CHAIN_CURRENCY_DECIMALS = _env_int("CHAIN_CURRENCY_DECIMALS", 18)
RECEIPT_TIMEOUT_SECONDS = _env_int("RECEIPT_TIMEOUT_SECONDS", 120)


# Runtime behaviour ----------------------------------------------------------
SCHEMA_WARMUP = _env_bool("SCHEMA_WARMUP", True)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_split_csv(os.getenv("ALLOWED_CORS_ORIGINS")),
        *_local_dev_origins,
    ]
)


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
]

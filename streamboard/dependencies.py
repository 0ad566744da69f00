"""Process-wide chain collaborators exposed as FastAPI dependencies."""

from __future__ import annotations

from functools import lru_cache

from .chain import ChainClient, SchemaEncoder, StreamsClient
from .core import (
    CHAIN_ID,
    PRIVATE_KEY,
    PUBLISHER_WALLET,
    RECEIPT_TIMEOUT_SECONDS,
    RPC_URL,
    STREAMS_CONTRACT_ADDRESS,
)
from .services.schema import PLAYER_SCHEMA, SchemaInitializer


@lru_cache(maxsize=None)
def get_chain_client() -> ChainClient:
    return ChainClient(
        RPC_URL,
        PRIVATE_KEY,
        chain_id=CHAIN_ID,
        receipt_timeout=RECEIPT_TIMEOUT_SECONDS,
    )


@lru_cache(maxsize=None)
def get_streams_client() -> StreamsClient:
    return StreamsClient(get_chain_client(), STREAMS_CONTRACT_ADDRESS)


@lru_cache(maxsize=None)
def get_schema_initializer() -> SchemaInitializer:
    """The single schema initializer shared by every request."""

    return SchemaInitializer(get_streams_client(), get_chain_client())


@lru_cache(maxsize=None)
def get_player_encoder() -> SchemaEncoder:
    return SchemaEncoder(PLAYER_SCHEMA)


def get_publisher() -> str:
    """Publisher whose records are read, defaulting to the signing wallet."""

    return PUBLISHER_WALLET or get_chain_client().address


__all__ = [
    "get_chain_client",
    "get_player_encoder",
    "get_publisher",
    "get_schema_initializer",
    "get_streams_client",
]

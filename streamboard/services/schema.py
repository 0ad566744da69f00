"""Lazy, single-flight schema initialization.

The player-score schema id is computed once per process and the schema is
registered on chain at most once. Concurrent callers share one in-flight
initialization; a failed id computation resets the initializer so the next
call starts over. Registration problems are logged and never fail the
initialization, since the id is still usable for reads.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Optional

from ..chain import (
    AlreadyRegistered,
    ChainClient,
    RegistrationFailed,
    SchemaRegistration,
    StreamsClient,
    TransactionSubmitted,
    ZERO_BYTES32,
)

logger = logging.getLogger(__name__)

PLAYER_SCHEMA = "address player, uint256 score"
PLAYER_SCHEMA_NAME = "player_score"


class InitState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


class SchemaInitializer:
    """Owns the process-wide schema id."""

    def __init__(
        self,
        streams: StreamsClient,
        chain: ChainClient,
        schema: str = PLAYER_SCHEMA,
        name: str = PLAYER_SCHEMA_NAME,
    ) -> None:
        self.streams = streams
        self.chain = chain
        self.schema = schema
        self.name = name
        self.last_error: Optional[BaseException] = None
        self._schema_id: Optional[str] = None
        self._inflight: Optional[asyncio.Future] = None

    @property
    def state(self) -> InitState:
        if self._schema_id is not None:
            return InitState.READY
        if self._inflight is not None:
            return InitState.INITIALIZING
        return InitState.UNINITIALIZED

    @property
    def schema_id(self) -> Optional[str]:
        return self._schema_id

    async def ensure_schema_id(self) -> str:
        """Return the schema id, initializing it on first use."""

        if self._schema_id is not None:
            return self._schema_id

        # No await between the check and the assignment, so only one task
        # can start the initialization.
        if self._inflight is None:
            self._inflight = asyncio.ensure_future(self._initialize())

        # Shielded so a cancelled request does not cancel the shared work.
        return await asyncio.shield(self._inflight)

    async def _initialize(self) -> str:
        try:
            schema_id = await self.streams.compute_schema_id(self.schema)
        except Exception as exc:
            logger.error("Failed to initialize schema: %s", exc)
            self.last_error = exc
            self._inflight = None
            raise

        logger.info("Schema ID: %s", schema_id)
        try:
            await self._register()
        except Exception as exc:
            logger.warning("Schema registration warning: %s", exc)

        self._schema_id = schema_id
        self._inflight = None
        return schema_id

    async def _register(self) -> None:
        registration = SchemaRegistration(
            id=self.name, schema=self.schema, parent_schema_id=ZERO_BYTES32
        )
        outcome = await self.streams.register_data_schemas(
            [registration], ignore_registered=True
        )

        if isinstance(outcome, TransactionSubmitted):
            try:
                await self.chain.wait_for_receipt(outcome.tx_hash)
            except Exception as exc:
                logger.warning("Schema registration warning: %s", exc)
                return
            logger.info("Schema registered with transaction: %s", outcome.tx_hash)
        elif isinstance(outcome, RegistrationFailed):
            logger.warning("Schema registration warning: %s", outcome.error)
        elif isinstance(outcome, AlreadyRegistered):
            logger.info("Schema already registered, no action required")


__all__ = [
    "InitState",
    "PLAYER_SCHEMA",
    "PLAYER_SCHEMA_NAME",
    "SchemaInitializer",
]

"""Data-stream contract client.

Wraps the streams contract: schema ids, schema registration, record writes and
per-publisher reads. Registration results are classified here, and only here,
into :class:`RegistrationOutcome` values so callers never inspect error text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

from web3 import Web3
from web3.exceptions import ContractCustomError

from .abi import STREAMS_ABI, ZERO_BYTES32
from .client import ChainClient
from .encoder import SchemaEncoder

logger = logging.getLogger(__name__)

_ALREADY_REGISTERED_MARKERS = (
    "Nothing to register",
    "SchemaAlreadyRegistered",
    "already registered",
)
_ALREADY_REGISTERED_SELECTOR = Web3.to_hex(
    Web3.keccak(text="SchemaAlreadyRegistered()")[:4]
)


@dataclass(frozen=True)
class SchemaRegistration:
    id: str
    schema: str
    parent_schema_id: str = ZERO_BYTES32


@dataclass(frozen=True)
class DataStream:
    id: bytes
    schema_id: str
    data: bytes


@dataclass(frozen=True)
class AlreadyRegistered:
    """Nothing had to be sent; the schema is on chain."""


@dataclass(frozen=True)
class TransactionSubmitted:
    tx_hash: str


@dataclass(frozen=True)
class RegistrationFailed:
    error: BaseException


RegistrationOutcome = Union[AlreadyRegistered, TransactionSubmitted, RegistrationFailed]


def classify_registration_result(result: Any) -> RegistrationOutcome:
    """Map a registration call's return value to an outcome."""

    if isinstance(result, str) and result.startswith("0x"):
        return TransactionSubmitted(result)
    return AlreadyRegistered()


def classify_registration_error(error: BaseException) -> RegistrationOutcome:
    """Map a registration error to an outcome."""

    if isinstance(error, ContractCustomError):
        data = str(getattr(error, "data", "") or "")
        if data.lower().startswith(_ALREADY_REGISTERED_SELECTOR):
            return AlreadyRegistered()
    message = str(error)
    if any(marker in message for marker in _ALREADY_REGISTERED_MARKERS):
        return AlreadyRegistered()
    return RegistrationFailed(error)


def _to_bytes32(value: Union[str, bytes]) -> bytes:
    if isinstance(value, bytes):
        return value
    return Web3.to_bytes(hexstr=value)


class StreamsClient:
    """Client for the data-streams contract."""

    def __init__(self, chain: ChainClient, contract_address: str) -> None:
        self.chain = chain
        self.contract = chain.contract(contract_address, STREAMS_ABI)

    async def compute_schema_id(self, schema: str) -> str:
        schema_id = await self.contract.functions.computeSchemaId(schema).call()
        return Web3.to_hex(schema_id)

    async def is_schema_registered(self, schema_id: str) -> bool:
        return await self.contract.functions.isDataSchemaRegistered(
            _to_bytes32(schema_id)
        ).call()

    async def _submit_registrations(
        self, registrations: Sequence[SchemaRegistration], ignore_registered: bool
    ) -> Optional[str]:
        pending = list(registrations)
        if ignore_registered:
            pending = []
            for registration in registrations:
                schema_id = await self.compute_schema_id(registration.schema)
                if not await self.is_schema_registered(schema_id):
                    pending.append(registration)
            if not pending:
                return None

        tx_hash = await self.contract.functions.registerDataSchemas(
            [
                (item.id, item.schema, _to_bytes32(item.parent_schema_id))
                for item in pending
            ]
        ).transact(self.chain.tx_params())
        return Web3.to_hex(tx_hash)

    async def register_data_schemas(
        self,
        registrations: Sequence[SchemaRegistration],
        ignore_registered: bool = True,
    ) -> RegistrationOutcome:
        """Register schemas, skipping ones already on chain when asked to."""

        try:
            result = await self._submit_registrations(registrations, ignore_registered)
        except Exception as exc:
            return classify_registration_error(exc)
        return classify_registration_result(result)

    async def set(self, streams: Sequence[DataStream]) -> str:
        """Write records in one transaction and return its hash."""

        tx_hash = await self.contract.functions.esstores(
            [(item.id, _to_bytes32(item.schema_id), item.data) for item in streams]
        ).transact(self.chain.tx_params())
        return Web3.to_hex(tx_hash)

    async def get_all_publisher_data_for_schema(
        self, schema_id: str, publisher: str, encoder: SchemaEncoder
    ) -> List[List[Dict[str, Any]]]:
        """Read and decode every record ``publisher`` wrote for ``schema_id``."""

        raw_records = await self.contract.functions.getAllPublisherDataForSchema(
            _to_bytes32(schema_id), Web3.to_checksum_address(publisher)
        ).call()
        logger.debug("Fetched %d records for schema %s", len(raw_records), schema_id)
        return [encoder.decode_data(raw) for raw in raw_records]


__all__ = [
    "AlreadyRegistered",
    "DataStream",
    "RegistrationFailed",
    "RegistrationOutcome",
    "SchemaRegistration",
    "StreamsClient",
    "TransactionSubmitted",
    "classify_registration_error",
    "classify_registration_result",
]

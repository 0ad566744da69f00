"""Chain and data-stream integration."""

from .abi import ZERO_BYTES32
from .client import ChainClient
from .encoder import SchemaEncoder, to_bytes32
from .errors import SchemaEncodingError, StreamsError
from .streams import (
    AlreadyRegistered,
    DataStream,
    RegistrationFailed,
    RegistrationOutcome,
    SchemaRegistration,
    StreamsClient,
    TransactionSubmitted,
)

__all__ = [
    "AlreadyRegistered",
    "ChainClient",
    "DataStream",
    "RegistrationFailed",
    "RegistrationOutcome",
    "SchemaEncoder",
    "SchemaEncodingError",
    "SchemaRegistration",
    "StreamsClient",
    "StreamsError",
    "TransactionSubmitted",
    "ZERO_BYTES32",
    "to_bytes32",
]

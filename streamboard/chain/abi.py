"""ABI fragments for the data-streams contract."""

from __future__ import annotations

from typing import Any, Dict, List

ZERO_BYTES32 = "0x" + "00" * 32

_DATA_SCHEMA_REGISTRATION = [
    {"name": "id", "type": "string"},
    {"name": "schema", "type": "string"},
    {"name": "parentSchemaId", "type": "bytes32"},
]

_DATA_STREAM = [
    {"name": "id", "type": "bytes32"},
    {"name": "schemaId", "type": "bytes32"},
    {"name": "data", "type": "bytes"},
]

STREAMS_ABI: List[Dict[str, Any]] = [
    {
        "type": "function",
        "name": "computeSchemaId",
        "stateMutability": "view",
        "inputs": [{"name": "schema", "type": "string"}],
        "outputs": [{"name": "", "type": "bytes32"}],
    },
    {
        "type": "function",
        "name": "isDataSchemaRegistered",
        "stateMutability": "view",
        "inputs": [{"name": "schemaId", "type": "bytes32"}],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {
        "type": "function",
        "name": "registerDataSchemas",
        "stateMutability": "nonpayable",
        "inputs": [
            {
                "name": "registrations",
                "type": "tuple[]",
                "components": _DATA_SCHEMA_REGISTRATION,
            }
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "esstores",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "dataStreams", "type": "tuple[]", "components": _DATA_STREAM}
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "getAllPublisherDataForSchema",
        "stateMutability": "view",
        "inputs": [
            {"name": "schemaId", "type": "bytes32"},
            {"name": "publisher", "type": "address"},
        ],
        "outputs": [{"name": "", "type": "bytes[]"}],
    },
    {"type": "error", "name": "SchemaAlreadyRegistered", "inputs": []},
]


__all__ = ["STREAMS_ABI", "ZERO_BYTES32"]

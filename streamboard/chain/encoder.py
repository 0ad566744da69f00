"""Schema-aware encoding of data-stream records.

A schema is a comma separated list of ``<solidity type> <field name>`` pairs,
for example ``address player, uint256 score``. Records are ABI-encoded as a
tuple in schema order.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence, Tuple

from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from web3 import Web3

from .errors import SchemaEncodingError


def parse_schema(schema: str) -> List[Tuple[str, str]]:
    """Split schema text into ``(type, name)`` pairs."""

    fields: List[Tuple[str, str]] = []
    for part in schema.split(","):
        tokens = part.split()
        if len(tokens) != 2:
            raise SchemaEncodingError(f"Invalid schema field: {part.strip()!r}")
        fields.append((tokens[0], tokens[1]))
    return fields


def to_bytes32(text: str) -> bytes:
    """UTF-8 encode ``text`` and right-pad it with zero bytes to 32 bytes."""

    raw = text.encode("utf-8")
    if len(raw) > 32:
        raise SchemaEncodingError(f"Value does not fit in 32 bytes: {text!r}")
    return raw.ljust(32, b"\x00")


class SchemaEncoder:
    """Encode and decode records for one schema."""

    def __init__(self, schema: str) -> None:
        self.schema = schema
        self.fields = parse_schema(schema)

    @property
    def types(self) -> List[str]:
        return [field_type for field_type, _ in self.fields]

    def encode_data(self, items: Sequence[Mapping[str, Any]]) -> bytes:
        """Encode ``{name, value, type}`` items given in schema order."""

        if len(items) != len(self.fields):
            raise SchemaEncodingError(
                f"Expected {len(self.fields)} values, got {len(items)}"
            )
        values = []
        for (field_type, name), item in zip(self.fields, items):
            if item.get("name") != name or item.get("type") != field_type:
                raise SchemaEncodingError(
                    f"Field mismatch: expected {field_type} {name}, "
                    f"got {item.get('type')} {item.get('name')}"
                )
            values.append(item.get("value"))
        return abi_encode(self.types, values)

    def decode_data(self, raw: bytes) -> List[Dict[str, Any]]:
        """Decode one record into a list of wrapped field dicts."""

        values = abi_decode(self.types, bytes(raw))
        decoded = []
        for (field_type, name), value in zip(self.fields, values):
            if field_type == "address":
                value = Web3.to_checksum_address(value)
            decoded.append(
                {
                    "name": name,
                    "type": field_type,
                    "signature": f"{field_type} {name}",
                    "value": {"name": name, "type": field_type, "value": value},
                }
            )
        return decoded


__all__ = ["SchemaEncoder", "parse_schema", "to_bytes32"]

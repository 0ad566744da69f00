"""Exceptions raised at the chain integration boundary."""

from __future__ import annotations


class StreamsError(Exception):
    """Base error for data-stream operations."""


class SchemaEncodingError(StreamsError):
    """Values do not fit the schema, or encoding produced no output."""


__all__ = ["SchemaEncodingError", "StreamsError"]

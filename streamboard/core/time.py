"""Time helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def epoch_millis() -> int:
    """Milliseconds since the Unix epoch, used to key published records."""
    return int(utcnow().timestamp() * 1000)


__all__ = ["epoch_millis", "utcnow"]

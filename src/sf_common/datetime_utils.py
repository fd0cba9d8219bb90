"""UTC datetime utilities."""

import time
from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(UTC)


def current_millis() -> int:
    """Wall-clock milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def millis_to_utc(timestamp_ms: int) -> datetime:
    """Convert Unix milliseconds to a timezone-aware UTC datetime."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC)

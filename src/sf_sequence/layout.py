"""Snowflake bit layout.

Layout (64 bits, high to low):
  - 41 bits: milliseconds since EPOCH_MS
  - 10 bits: datacenter_id (0-1023)
  - 12 bits: sequence (0-4095 per millisecond)
"""

from dataclasses import dataclass
from datetime import datetime

from src.sf_common.datetime_utils import millis_to_utc

EPOCH_MS = 1_451_586_600_000

DATACENTER_ID_BITS = 10
SEQUENCE_BITS = 12

MAX_DATACENTER_ID = (1 << DATACENTER_ID_BITS) - 1
SEQUENCE_MASK = (1 << SEQUENCE_BITS) - 1

DATACENTER_ID_SHIFT = SEQUENCE_BITS
TIMESTAMP_SHIFT = SEQUENCE_BITS + DATACENTER_ID_BITS

_UINT64_MASK = (1 << 64) - 1
_INT64_SIGN = 1 << 63


def to_int64(value: int) -> int:
    """Wrap an arbitrary int to a signed 64-bit two's-complement value."""
    value &= _UINT64_MASK
    return value - (1 << 64) if value & _INT64_SIGN else value


def to_uint64(value: int) -> int:
    return value & _UINT64_MASK


def compose_id(timestamp_ms: int, datacenter_id: int, sequence: int) -> int:
    """Pack absolute Unix ms, datacenter id and sequence into a signed 64-bit ID."""
    return to_int64(
        ((timestamp_ms - EPOCH_MS) << TIMESTAMP_SHIFT)
        | (datacenter_id << DATACENTER_ID_SHIFT)
        | sequence
    )


@dataclass(frozen=True)
class SnowflakeParts:
    timestamp_ms: int  # absolute Unix milliseconds
    datacenter_id: int
    sequence: int

    @property
    def created_at(self) -> datetime:
        return millis_to_utc(self.timestamp_ms)


def parse_id(snowflake_id: int) -> SnowflakeParts:
    """Split an ID back into its fields."""
    raw = to_uint64(snowflake_id)
    return SnowflakeParts(
        timestamp_ms=(raw >> TIMESTAMP_SHIFT) + EPOCH_MS,
        datacenter_id=(raw >> DATACENTER_ID_SHIFT) & MAX_DATACENTER_ID,
        sequence=raw & SEQUENCE_MASK,
    )

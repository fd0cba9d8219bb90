"""Snowflake ID generator.

Generates monotonically increasing, unique 64-bit integer IDs without
coordination between processes, provided every live generator holds a
distinct datacenter id. See layout.py for the bit layout.

All state changes happen under one lock per instance. Waiting out a clock
regression or a sequence rollover also happens under that lock, so a stalled
generator blocks every caller until the clock catches up.
"""

import logging
import random
import threading
import time
from collections.abc import Callable

from config.settings import settings
from src.sf_common.datetime_utils import current_millis
from src.sf_identity.resolver import resolve_datacenter_id
from src.sf_sequence.layout import SEQUENCE_MASK, compose_id, to_uint64

logger = logging.getLogger(__name__)


class SnowflakeIdGenerator:
    """Thread-safe snowflake ID generator.

    Args:
        datacenter_id: 1-1023 to use as-is, 0 to derive from the host's MAC
            address. Anything else is replaced by a random id.
        clock: returns wall-clock Unix milliseconds.
        sleep: blocks for the given number of seconds.
        spin_yield: call sleep(0) between clock polls during a rollover wait.
        rng: random source for datacenter id derivation and fallback.
    """

    def __init__(
        self,
        datacenter_id: int = 0,
        *,
        clock: Callable[[], int] = current_millis,
        sleep: Callable[[float], None] = time.sleep,
        spin_yield: bool | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._datacenter_id = resolve_datacenter_id(datacenter_id, rng)
        self._clock = clock
        self._sleep = sleep
        self._spin_yield = settings.SNOWFLAKE_SPIN_YIELD if spin_yield is None else spin_yield
        self._sequence = 0
        self._last_timestamp_ms = -1
        self._lock = threading.Lock()

    @property
    def datacenter_id(self) -> int:
        return self._datacenter_id

    def next_id(self) -> int:
        with self._lock:
            ts = self._clock()
            while ts < self._last_timestamp_ms:
                ts = self._wait_out_regression(ts)

            if ts == self._last_timestamp_ms:
                self._sequence = (self._sequence + 1) & SEQUENCE_MASK
                if self._sequence == 0:
                    ts = self._wait_next_ms(self._last_timestamp_ms)
            else:
                self._sequence = 0

            self._last_timestamp_ms = ts
            id_int = compose_id(ts, self._datacenter_id, self._sequence)

        if id_int < 0:
            logger.warning("Generated snowflake ID is negative: %d", id_int)
        return id_int

    def next_id_str(self, prefix: str | None = None) -> str:
        """Decimal ID, appended to `prefix` when one is given."""
        id_str = str(self.next_id())
        return id_str if prefix is None else prefix + id_str

    def next_id_hex(self, prefix: str | None = None) -> str:
        """Uppercase hex of the 64-bit ID, appended to `prefix` when one is given."""
        id_hex = format(to_uint64(self.next_id()), "X")
        return id_hex if prefix is None else prefix + id_hex

    def _wait_out_regression(self, ts: int) -> int:
        delta_ms = self._last_timestamp_ms - ts
        logger.warning(
            "Clock moved backwards. Refusing to generate id for %d milliseconds.",
            delta_ms,
        )
        self._sleep(delta_ms / 1000)
        return self._clock()

    def _wait_next_ms(self, last_ts: int) -> int:
        ts = self._clock()
        while ts <= last_ts:
            if self._spin_yield:
                self._sleep(0)
            ts = self._clock()
        return ts

"""Process-wide shared snowflake generator.

The first call to get_shared_instance() builds the generator with
settings.SNOWFLAKE_DATACENTER_ID (default 0: derive from the host). Later
calls, from any thread, return that same instance. Construction is guarded
by double-checked locking, so at most one instance is ever built even when
threads race on first use.
"""

import threading

from config.settings import settings
from src.sf_sequence.generator import SnowflakeIdGenerator

_shared_instance: SnowflakeIdGenerator | None = None
_shared_lock = threading.Lock()


def get_shared_instance() -> SnowflakeIdGenerator:
    """Get or create the process-wide generator."""
    global _shared_instance  # noqa: PLW0603
    if _shared_instance is not None:
        return _shared_instance
    with _shared_lock:
        if _shared_instance is None:
            _shared_instance = SnowflakeIdGenerator(settings.SNOWFLAKE_DATACENTER_ID)
    return _shared_instance


def generate_id() -> str:
    """Generate a unique snowflake string ID using the shared generator."""
    return get_shared_instance().next_id_str()

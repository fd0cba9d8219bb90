"""Datacenter id resolution for the snowflake generator.

The datacenter id occupies 10 bits of every ID. A requested value of 0 means
"derive one from this host", so 0 itself can never be requested explicitly.
Every failure path falls back to a random id in [1, MAX_DATACENTER_ID];
resolution never raises.
"""

import logging
import random

from src.sf_common.errors import AppError
from src.sf_identity.network import first_hardware_address
from src.sf_sequence.layout import MAX_DATACENTER_ID

logger = logging.getLogger(__name__)

AUTO_DETECT = 0


def _random_datacenter_id(rng: random.Random) -> int:
    return rng.randint(1, MAX_DATACENTER_ID)


def derive_from_mac(mac: bytes, random_byte: int) -> int:
    """Mix the MAC's last byte with a random byte and fit the result to 10 bits."""
    return ((mac[-1] & 0xFF) | ((random_byte & 0xFF) << 8)) >> 6


def resolve_datacenter_id(requested: int, rng: random.Random | None = None) -> int:
    """Return a datacenter id in [0, MAX_DATACENTER_ID] for `requested`."""
    rng = rng or random.Random()

    if requested == AUTO_DETECT:
        try:
            mac = first_hardware_address()
        except AppError as exc:
            logger.warning(
                "Could not determine machine address (%s); using random datacenter ID",
                exc.message,
            )
            datacenter_id = _random_datacenter_id(rng)
        else:
            datacenter_id = derive_from_mac(mac, rng.getrandbits(8))
    elif not 0 <= requested <= MAX_DATACENTER_ID:
        logger.warning(
            "Datacenter ID %d outside [0, %d]; using random datacenter ID",
            requested,
            MAX_DATACENTER_ID,
        )
        datacenter_id = _random_datacenter_id(rng)
    else:
        datacenter_id = requested

    logger.info("Snowflake generator initialised with datacenter ID %d", datacenter_id)
    return datacenter_id

"""Root logging configuration for processes embedding the generator.

The library modules only create named loggers; nothing here runs on import.
Call configure_logging() once at process startup if no other logging setup
exists.

Log format:
    2026-01-01 12:00:00,000 WARNING src.sf_sequence.generator: Clock moved backwards ...
"""

import logging

from config.settings import settings

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Attach a stream handler to the root logger at LOG_LEVEL (or `level`)."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=_LOG_FORMAT,
        force=True,
    )

"""
Logging setup built on loguru.

Modules obtain a bound logger with ``get_logger(__name__)``; the CLI calls
``setup_logging`` once per invocation to choose the level.
"""

import sys

from loguru import logger

_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)


def setup_logging(level: str = "WARNING") -> None:
    """Replace loguru's default sink with a single stderr sink at ``level``."""
    logger.remove()
    # resolve sys.stderr per message so redirected streams are honoured
    logger.add(lambda msg: sys.stderr.write(msg), level=level.upper(), format=_FORMAT)


def get_logger(name: str):
    """Return a logger tagged with the calling module's name."""
    return logger.bind(name=name)

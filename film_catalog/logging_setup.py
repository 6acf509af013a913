"""
Console logging configuration built on loguru.
"""

import sys

from loguru import logger

from . import settings

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"


def configure_logging(level: str = None) -> None:
	"""Replace loguru's default sink with a single stderr sink at the given level."""
	logger.remove()  # drop the default handler so records are not printed twice
	logger.add(sys.stderr, level=(level or settings.LOG_LEVEL), format=_FORMAT)
	logger.debug(f"[Logging] Console sink ready at level {level or settings.LOG_LEVEL}")

from __future__ import annotations

import sys

from loguru import logger


def configure_logging(level: str = "INFO") -> None:
    """Route loguru to a single stderr sink at *level*."""
    logger.remove()
    logger.add(sys.stderr, level=level)

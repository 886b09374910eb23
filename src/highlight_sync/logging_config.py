"""Logging configuration for highlight-sync."""

import sys
from typing import TextIO

from loguru import logger

# Lines lead with time since process start.
LOG_FORMAT = "<green>{elapsed}</green> {level.icon} {message}"


def configure_logging(*, verbose: bool = False, sink: TextIO | None = None) -> None:
    """Send progress lines to ``sink`` (stderr by default).

    INFO carries book and highlight counts; DEBUG adds remote requests and
    duplicate matches.
    """
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(sink or sys.stderr, level=level, format=LOG_FORMAT)

#  Copyright © 2025 Emmi AI GmbH. All rights reserved.

from __future__ import annotations

import sys

from loguru import logger

_DEBUG_FORMAT = (
    "<green>{time:DD-MM-YYYY HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
_COMPACT_FORMAT = "<green>{time:DD-MM-YYYY HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | {message}"


def configure_logging(debug: bool = False, quiet: bool = False) -> None:
    """Route loguru output to stderr for the files CLI.

    Args:
        debug: Log cache hits and download progress with caller details. Defaults to False.
        quiet: Only log warnings and errors. Ignored when ``debug`` is set. Defaults to False.
    """
    logger.remove()
    if debug:
        logger.add(sys.stderr, level="DEBUG", format=_DEBUG_FORMAT)
    else:
        logger.add(sys.stderr, level="WARNING" if quiet else "INFO", format=_COMPACT_FORMAT)

"""Logging configuration using Loguru.

The package logs under the "rotater" name and is disabled on import.
Host applications opt in with `setup_logging()`, or with
`logger.enable("rotater")` to route messages into their own sinks.
"""

import sys
from typing import Optional

from loguru import logger

from rotater.utils.config import get_project_root, settings


def setup_logging(level: Optional[str] = None, file_enabled: Optional[bool] = None) -> list[int]:
    """Add ROTATER's sinks and enable its messages. Returns the sink ids."""
    level = level or settings.logging.level
    if file_enabled is None:
        file_enabled = settings.logging.file_enabled

    fmt = settings.logging.format
    handler_ids = [logger.add(sys.stderr, format=fmt, level=level, colorize=True)]

    if file_enabled:
        log_dir = get_project_root() / "logs"
        log_dir.mkdir(exist_ok=True)

        handler_ids.append(logger.add(
            log_dir / "rotater.log",
            format=fmt,
            level=level,
            rotation=settings.logging.rotation,
            retention=settings.logging.retention,
            compression="zip",
        ))
        # Errors only
        handler_ids.append(logger.add(
            log_dir / "errors.log",
            format=fmt,
            level="ERROR",
            rotation=settings.logging.rotation,
            retention=settings.logging.retention,
            compression="zip",
        ))

    logger.enable("rotater")
    logger.debug(f"Logging initialized - Level: {level}")
    return handler_ids

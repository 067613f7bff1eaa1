"""
================================================================================
Logging Configuration
================================================================================

Centralized Loguru setup for the UI suite and the test runner.

Features:
    - One-time sink configuration per process
    - Level and format overridable through LOG_LEVEL / LOG_FORMAT
    - Optional rotating file sink through LOG_FILE

Author: Automation Team
License: MIT
================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

DEFAULT_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(level: Optional[str] = None, format_str: Optional[str] = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Safe to call several times; only the first call configures sinks.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL or INFO.
        format_str: Custom log format string. Defaults to LOG_FORMAT or DEFAULT_FORMAT.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_format = format_str or os.getenv("LOG_FORMAT", DEFAULT_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = os.getenv("LOG_FILE")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),
            rotation="10 MB",
            retention="7 days",
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


__all__ = [
    "init_logger",
]

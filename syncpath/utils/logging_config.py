"""
Logging configuration for syncpath.

The path engine only emits DEBUG records through module-level loggers
under the ``syncpath`` namespace (sanitization rewrites, skipped short-name
expansions, strict-policy rejections). Applications embedding it call
setup_logging() once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .constants import LOG_FORMAT

LIBRARY_LOGGER = "syncpath"


def setup_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    library_level: Optional[str] = None,
) -> None:
    """
    Configure application-wide logging.

    Args:
        level: Root log level (DEBUG, INFO, WARNING, ERROR).
            Defaults to Settings.log_level, read from LOG_LEVEL or .env.
        format_string: Custom log format string. Defaults to standard format.
        library_level: Level for the ``syncpath`` loggers only, so path
            rewrites can be traced without DEBUG output from everything else.

    Example:
        >>> setup_logging(level="INFO", library_level="DEBUG")
        >>> sanitize_path("reports\\\\CON.txt")  # logs "Sanitized path ..." at DEBUG
        'reports\\\\_CON.txt'
    """
    if level is None:
        # Deferred: config.settings imports this package
        from syncpath.config.settings import get_settings

        level = get_settings().log_level

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format=format_string or LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,  # Override any existing configuration
    )

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if library_level:
        library_logger.setLevel(getattr(logging, library_level.upper(), logging.DEBUG))
    else:
        library_logger.setLevel(logging.NOTSET)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {level}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)

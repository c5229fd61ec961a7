"""
Logging configuration

Importing this module attaches a stream handler to the package logger,
using the level and format from the settings.
"""

import logging

from osmcoord.core.config import settings

PACKAGE_LOGGER_NAME = "osmcoord"


def configure_logging(level: str = settings.LOG_LEVEL) -> logging.Logger:
    """
    Configure the package logger.

    Calling this more than once only updates the level, the handler is
    attached a single time.

    Args:
        level: Logging level name, e.g. "DEBUG"

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level.upper())

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
        package_logger.addHandler(handler)

    return package_logger


configure_logging()

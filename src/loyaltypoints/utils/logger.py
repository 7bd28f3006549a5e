"""Logging setup for loyaltypoints."""

import logging
import sys

ROOT_LOGGER_NAME = "loyaltypoints"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Configure the package logger to write to stderr.

    Calling this more than once replaces the previous handler, so repeated
    CLI invocations in one process (tests) do not stack handlers.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)

    Returns:
        The package root logger

    Raises:
        ValueError: If level is not a known log level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level '{level}'")

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger

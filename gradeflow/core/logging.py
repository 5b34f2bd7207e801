"""Centralized logging configuration for the grading pipeline."""

import logging
import sys


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure and return the application logger.

    Installs a single stdout handler on the ``gradeflow`` logger with
    timestamps, log level, module name, and the message.  Calling it again
    only updates the level.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Returns:
        The configured root application logger.
    """
    log_format = "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logger = logging.getLogger("gradeflow")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
        logger.addHandler(handler)

    # Prevent duplicate logs through the root logger
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger under the gradeflow namespace.

    Usage:
        from gradeflow.core.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Ingesting student file")

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        A child logger with the given name.
    """
    if name.startswith("gradeflow"):
        return logging.getLogger(name)
    return logging.getLogger(f"gradeflow.{name}")

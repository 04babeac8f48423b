"""
Logging for errorkit.

errorkit logs through two channels: the error sink, which receives one
line per handled error, and module loggers under `errorkit.*`, which
trace the pipeline steps at DEBUG level. Both live under the `errorkit`
logger configured here.
Logging must not change how an error is handled.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER_NAME = "errorkit"
DEFAULT_SINK_NAME = "errorkit.errors"


class PackageHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging."""


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a formatted stdout handler to the `errorkit` logger.

    Calling this again only updates the level; the handler is added once.
    Records still propagate, so host applications keep their own handlers.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            DEBUG also shows the per-step pipeline trace.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(isinstance(h, PackageHandler) for h in package_logger.handlers):
        handler = PackageHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        package_logger.addHandler(handler)

    return package_logger


def default_sink() -> logging.Logger:
    """Return the logger that receives error lines by default."""
    return logging.getLogger(DEFAULT_SINK_NAME)

"""Structured logging configuration for Weather Lambda.

Informational records go to stdout and errors go to stderr, so the two
channels can be shipped and filtered independently. Every line carries the
timestamp, level and source location. Lambda forwards both streams to
CloudWatch, so no file handler is installed.
"""

import logging
import sys
from typing import Any

from pythonjsonlogger import jsonlogger

JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d"
TEXT_FORMAT = "%(levelname)s: %(asctime)s %(filename)s:%(lineno)d %(message)s"


class _BelowErrorFilter(logging.Filter):
    """Let through only records below ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.ERROR


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return jsonlogger.JsonFormatter(JSON_FORMAT, timestamp=True)
    return logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logging(log_level: str = "INFO", log_format: str = "json") -> logging.Logger:
    """Configure the info (stdout) and error (stderr) channels.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: ``json`` for structured lines, ``text`` for plain lines

    Returns:
        Configured root logger instance
    """
    level = getattr(logging, log_level.upper())
    formatter = _build_formatter(log_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # The Lambda runtime pre-installs its own handler
    root_logger.handlers.clear()

    info_handler = logging.StreamHandler(sys.stdout)
    info_handler.setFormatter(formatter)
    info_handler.setLevel(level)
    info_handler.addFilter(_BelowErrorFilter())
    root_logger.addHandler(info_handler)

    error_handler = logging.StreamHandler(sys.stderr)
    error_handler.setFormatter(formatter)
    error_handler.setLevel(max(level, logging.ERROR))
    root_logger.addHandler(error_handler)

    # Reduce noise from third-party libraries
    for noisy in ("httpx", "httpcore", "botocore", "boto3", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with structured logging support.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance configured for structured logging
    """
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with additional structured context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Additional fields to include in JSON log (e.g., city, cache_key)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra_fields)

"""Logging configuration for egypt-national-id.

Provides structured JSON logging. Raw National IDs are masked before any
record is emitted.
"""

import logging
import os
import sys
from typing import Any, Optional, TextIO

from pythonjsonlogger import jsonlogger

from egypt_national_id.utils.text import mask_national_ids_in_text

SERVICE_NAME = "egypt-national-id"


class NationalIdMaskingFilter(logging.Filter):
    """Filter that masks 14-digit runs in the rendered log message."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Replace the record message with its masked rendering."""
        message = record.getMessage()
        masked = mask_national_ids_in_text(message)
        if masked != message:
            record.msg = masked
            record.args = ()
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with additional fields."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)

        # Rename fields for better compatibility
        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")
        if "asctime" in log_record:
            log_record["timestamp"] = log_record.pop("asctime")

        log_record["service"] = SERVICE_NAME


def setup_logging(
    level: Optional[str] = None,
    json_format: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure application logging.

    Library code never calls this; it is meant for applications and the
    command line entry point.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env var
               EGYPT_NID_LOG_LEVEL or INFO.
        json_format: Whether to use JSON format. Defaults to env var
                     EGYPT_NID_LOG_FORMAT == 'json' or True.
        stream: Output stream. Defaults to stdout.
    """
    if level is None:
        level = os.getenv("EGYPT_NID_LOG_LEVEL", "INFO")
    level = level.upper()
    if json_format is None:
        log_format = os.getenv("EGYPT_NID_LOG_FORMAT", "json").lower()
        json_format = log_format == "json"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.addFilter(NationalIdMaskingFilter())

    if json_format:
        formatter = CustomJsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Presidio logs every recognizer load at INFO
    logging.getLogger("presidio-analyzer").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(name)

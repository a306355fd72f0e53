"""Logging configuration module for egypt-national-id."""

from egypt_national_id.logging.setup import (
    CustomJsonFormatter,
    NationalIdMaskingFilter,
    get_logger,
    setup_logging,
)

__all__ = ["CustomJsonFormatter", "NationalIdMaskingFilter", "get_logger", "setup_logging"]

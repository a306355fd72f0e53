"""Utility functions and validators."""

# Text processing utilities
from egypt_national_id.utils.text import (
    mask_national_id,
    mask_national_ids_in_text,
    normalize_national_id,
)

# Validation utilities
from egypt_national_id.utils.validators import (
    CHECKSUM_WEIGHTS,
    NATIONAL_ID_LENGTH,
    calculate_check_digit,
    is_valid_format,
    validate_checksum,
)

__all__ = [
    # Text processing
    "normalize_national_id",
    "mask_national_id",
    "mask_national_ids_in_text",
    # Validation
    "CHECKSUM_WEIGHTS",
    "NATIONAL_ID_LENGTH",
    "calculate_check_digit",
    "is_valid_format",
    "validate_checksum",
]

"""Module-level shortcuts for validating and parsing National IDs."""

from typing import Any, NamedTuple, Optional

from egypt_national_id.config.options import ParseOptions
from egypt_national_id.core.national_id import EgyptianNationalId


class ParseAttempt(NamedTuple):
    """Outcome of try_parse_as_national_id."""

    success: bool
    national_id: Optional[EgyptianNationalId]


def is_valid_egyptian_national_id(value: Any, options: Optional[ParseOptions] = None) -> bool:
    """Check whether a string is a valid Egyptian National ID.

    Examples:
        >>> is_valid_egyptian_national_id("30101010123456")
        True
        >>> is_valid_egyptian_national_id("30101019999999")
        False
    """
    return EgyptianNationalId.is_valid(value, options)


def to_egyptian_national_id(
    value: Any, options: Optional[ParseOptions] = None
) -> Optional[EgyptianNationalId]:
    """Convert a string to an EgyptianNationalId, or None if invalid."""
    return EgyptianNationalId.try_create(value, options)


def try_parse_as_national_id(value: Any, options: Optional[ParseOptions] = None) -> ParseAttempt:
    """Parse a string, reporting success alongside the parsed ID."""
    national_id = EgyptianNationalId.try_create(value, options)
    return ParseAttempt(success=national_id is not None, national_id=national_id)


def has_valid_national_id_format(value: Any) -> bool:
    """Check only the 14-digit format, without domain rules."""
    return EgyptianNationalId.is_valid_format(value)


def has_valid_national_id_checksum(value: Any) -> bool:
    """Check only the best-effort check digit."""
    return EgyptianNationalId.validate_checksum(value)

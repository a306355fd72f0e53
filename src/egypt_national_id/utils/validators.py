"""Validation functions for raw National ID strings."""

from typing import Any

NATIONAL_ID_LENGTH = 14

# Best-effort weights for the first 13 digits. The issuing authority has not
# published the real algorithm, so checksum validation is opt-in.
CHECKSUM_WEIGHTS = (2, 7, 6, 5, 4, 3, 2, 7, 6, 5, 4, 3, 2)

_ASCII_DIGITS = frozenset("0123456789")


def is_valid_format(value: Any) -> bool:
    """Check that a value is exactly 14 ASCII digits.

    Only "0"-"9" are accepted; Arabic-Indic digits and other Unicode
    decimals fail even though ``str.isdigit`` would accept them.

    Args:
        value: Candidate National ID. Any type is accepted.

    Returns:
        True if the format is valid, False otherwise. Never raises.

    Examples:
        >>> is_valid_format("30101011234567")
        True
        >>> is_valid_format("3010101123456")
        False
        >>> is_valid_format(None)
        False
    """
    if not value or not isinstance(value, str):
        return False
    if len(value) != NATIONAL_ID_LENGTH:
        return False
    return all(char in _ASCII_DIGITS for char in value)


def calculate_check_digit(prefix: str) -> int:
    """Compute the best-effort check digit for a 13-digit prefix.

    Args:
        prefix: The first 13 digits of a National ID.

    Returns:
        The weighted digit sum modulo 10.

    Raises:
        ValueError: If the prefix is not exactly 13 ASCII digits.
    """
    if (
        not isinstance(prefix, str)
        or len(prefix) != len(CHECKSUM_WEIGHTS)
        or not all(char in _ASCII_DIGITS for char in prefix)
    ):
        raise ValueError("Prefix must be exactly 13 digits")

    total = sum(int(digit) * weight for digit, weight in zip(prefix, CHECKSUM_WEIGHTS))
    return total % 10


def validate_checksum(value: Any) -> bool:
    """Validate the 14th digit against the best-effort checksum.

    Args:
        value: Candidate National ID.

    Returns:
        True if the format is valid and the check digit matches,
        False otherwise.

    Examples:
        >>> validate_checksum("30101010123458")
        True
        >>> validate_checksum("30101010123459")
        False
        >>> validate_checksum("123")
        False
    """
    if not is_valid_format(value):
        return False
    return calculate_check_digit(value[:13]) == int(value[13])

"""
National ID decoder

Layout of the 14 digits: C YYMMDD GG SSSS K

    C      century digit (2 = 1900s, 3 = 2000s)
    YYMMDD birth date
    GG     governorate code
    SSSS   serial number; its last digit is odd for males, even for females
    K      check digit

Decoding runs a fixed sequence of checks and stops at the first failure,
raising the matching EgyptianNationalIdError subclass.
"""

from dataclasses import dataclass
from datetime import date

from egypt_national_id.exceptions import (
    InvalidBirthDateError,
    InvalidChecksumError,
    InvalidGovernorateCodeError,
    InvalidNationalIdFormatError,
)
from egypt_national_id.reference import Gender, Governorate, governorate_from_code
from egypt_national_id.utils.validators import is_valid_format, validate_checksum

CENTURY_DIGIT_INDEX = 0
BIRTH_YEAR_START_INDEX = 1
BIRTH_MONTH_START_INDEX = 3
BIRTH_DAY_START_INDEX = 5
GOVERNORATE_CODE_START_INDEX = 7
SERIAL_START_INDEX = 9
SERIAL_LENGTH = 4
GENDER_DIGIT_INDEX = 12

CENTURY_BASES = {
    "2": 1900,
    "3": 2000,
}


@dataclass(frozen=True)
class ParsedFields:
    """Fields extracted from a structurally valid National ID."""

    century_digit: int
    year_two_digit: int
    month: int
    day: int
    governorate_code: int
    serial: int
    gender_digit: int
    birth_date: date
    governorate: Governorate

    @property
    def gender(self) -> Gender:
        return gender_from_digit(self.gender_digit)


def _two_digits(value: str, start: int) -> int:
    return int(value[start:start + 2])


def resolve_century_base(century_digit: str) -> int:
    """Map the century digit to the first year of that century.

    Raises:
        InvalidBirthDateError: For any digit other than 2 or 3.
    """
    try:
        return CENTURY_BASES[century_digit]
    except KeyError:
        raise InvalidBirthDateError("Unsupported century digit in National ID.") from None


def build_birth_date(year: int, month: int, day: int) -> date:
    """Build the birth date, rejecting dates that do not exist.

    ``datetime.date`` never rolls over, so February 31 or month 13 fail
    instead of silently becoming a nearby valid date.

    Raises:
        InvalidBirthDateError: If year/month/day is not a real calendar date.
    """
    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidBirthDateError("Invalid birth date extracted from National ID.") from None


def gender_from_digit(digit: int) -> Gender:
    """Even digits are female, odd digits male."""
    return Gender.FEMALE if digit % 2 == 0 else Gender.MALE


def decode_fields(value: str, *, validate_checksum_digit: bool = False) -> ParsedFields:
    """Decode and validate a raw National ID.

    Args:
        value: The raw 14-digit string.
        validate_checksum_digit: Also verify the best-effort check digit.

    Returns:
        ParsedFields for the ID.

    Raises:
        InvalidNationalIdFormatError: Not exactly 14 ASCII digits.
        InvalidChecksumError: Checksum requested and mismatched.
        InvalidBirthDateError: Bad century digit or impossible date.
        InvalidGovernorateCodeError: Unknown governorate code.

    Example:
        >>> fields = decode_fields("30101010123456")
        >>> fields.birth_date
        datetime.date(2001, 1, 1)
        >>> fields.governorate
        <Governorate.CAIRO: 1>
    """
    if not is_valid_format(value):
        raise InvalidNationalIdFormatError()

    if validate_checksum_digit and not validate_checksum(value):
        raise InvalidChecksumError()

    century_digit = value[CENTURY_DIGIT_INDEX]
    century_base = resolve_century_base(century_digit)

    year_two_digit = _two_digits(value, BIRTH_YEAR_START_INDEX)
    month = _two_digits(value, BIRTH_MONTH_START_INDEX)
    day = _two_digits(value, BIRTH_DAY_START_INDEX)
    birth_date = build_birth_date(century_base + year_two_digit, month, day)

    governorate_code = _two_digits(value, GOVERNORATE_CODE_START_INDEX)
    governorate = governorate_from_code(governorate_code)
    if governorate is None:
        raise InvalidGovernorateCodeError(governorate_code)

    serial = int(value[SERIAL_START_INDEX:SERIAL_START_INDEX + SERIAL_LENGTH])
    gender_digit = int(value[GENDER_DIGIT_INDEX])

    return ParsedFields(
        century_digit=int(century_digit),
        year_two_digit=year_two_digit,
        month=month,
        day=day,
        governorate_code=governorate_code,
        serial=serial,
        gender_digit=gender_digit,
        birth_date=birth_date,
        governorate=governorate,
    )

"""
egypt-national-id: Egyptian National ID decoding and validation

Parses 14-digit Egyptian National IDs into birth date, gender,
governorate, region and serial number, and estimates card issue and
expiry dates.
"""

__version__ = "1.0.0"

from egypt_national_id.config.options import ParseOptions
from egypt_national_id.core.national_id import EgyptianNationalId
from egypt_national_id.core.result import ParseResult
from egypt_national_id.exceptions import (
    EgyptianNationalIdError,
    InvalidBirthDateError,
    InvalidChecksumError,
    InvalidGovernorateCodeError,
    InvalidNationalIdFormatError,
)
from egypt_national_id.helpers import (
    ParseAttempt,
    has_valid_national_id_checksum,
    has_valid_national_id_format,
    is_valid_egyptian_national_id,
    to_egyptian_national_id,
    try_parse_as_national_id,
)
from egypt_national_id.models import NationalIdRecord
from egypt_national_id.reference import (
    GOVERNORATE_ARABIC_NAMES,
    GOVERNORATE_ENGLISH_NAMES,
    GOVERNORATE_TO_REGION,
    REGION_ARABIC_NAMES,
    REGION_ENGLISH_NAMES,
    VALID_GOVERNORATE_CODES,
    Gender,
    Governorate,
    Region,
)

__all__ = [
    "EgyptianNationalId",
    "ParseOptions",
    "ParseResult",
    "NationalIdRecord",
    # Errors
    "EgyptianNationalIdError",
    "InvalidNationalIdFormatError",
    "InvalidChecksumError",
    "InvalidBirthDateError",
    "InvalidGovernorateCodeError",
    # Helpers
    "ParseAttempt",
    "is_valid_egyptian_national_id",
    "to_egyptian_national_id",
    "try_parse_as_national_id",
    "has_valid_national_id_format",
    "has_valid_national_id_checksum",
    # Reference tables
    "Gender",
    "Governorate",
    "Region",
    "GOVERNORATE_ARABIC_NAMES",
    "GOVERNORATE_ENGLISH_NAMES",
    "REGION_ARABIC_NAMES",
    "REGION_ENGLISH_NAMES",
    "GOVERNORATE_TO_REGION",
    "VALID_GOVERNORATE_CODES",
]

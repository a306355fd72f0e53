"""Core modules for decoding and validating National IDs."""

from egypt_national_id.core.calendar import Clock, system_today
from egypt_national_id.core.decoder import ParsedFields, decode_fields
from egypt_national_id.core.national_id import EgyptianNationalId
from egypt_national_id.core.result import NationalIdResult, ParseResult

__all__ = [
    "Clock",
    "EgyptianNationalId",
    "NationalIdResult",
    "ParseResult",
    "ParsedFields",
    "decode_fields",
    "system_today",
]

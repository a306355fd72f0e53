"""
Egyptian National ID value object.

An EgyptianNationalId can only exist for input that passed the full
decoding pipeline. Everything that depends on the current date (age,
issue and expiry estimates relative to today) is recomputed on every
access from the instance's clock, so a long-lived object stays correct
across day boundaries.
"""

from dataclasses import InitVar, dataclass, field, replace
from datetime import date
from functools import total_ordering
from typing import Any, Optional

from egypt_national_id.config.options import DEFAULT_OPTIONS, ParseOptions
from egypt_national_id.core import calendar
from egypt_national_id.core.calendar import Clock, system_today
from egypt_national_id.core.decoder import decode_fields
from egypt_national_id.core.result import NationalIdResult, ParseResult
from egypt_national_id.exceptions import EgyptianNationalIdError
from egypt_national_id.logging.setup import get_logger
from egypt_national_id.models import NationalIdRecord
from egypt_national_id.reference import Gender, Governorate, Region
from egypt_national_id.utils import validators
from egypt_national_id.utils.text import mask_national_id

logger = get_logger(__name__)


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class EgyptianNationalId:
    """A validated 14-digit Egyptian National ID.

    Equality and hashing use the raw value. Ordering is by birth date,
    then serial number, then raw value, so it agrees with equality.
    ``compare_to`` ignores the raw value and returns 0 for IDs that share
    a birth date and serial.

    Example:
        >>> nid = EgyptianNationalId("30101010123456")
        >>> nid.birth_date
        datetime.date(2001, 1, 1)
        >>> nid.gender
        <Gender.MALE: 'Male'>
        >>> nid.format_with_dashes()
        '3-010101-01-23456'

    Raises:
        InvalidNationalIdFormatError: Input is not 14 ASCII digits.
        InvalidChecksumError: ``options.validate_checksum`` is set and the
            check digit does not match.
        InvalidBirthDateError: Unsupported century or impossible date.
        InvalidGovernorateCodeError: Unknown governorate code.
    """

    value: str
    options: InitVar[Optional[ParseOptions]] = None
    clock: Optional[Clock] = field(default=None, kw_only=True)

    birth_date: date = field(init=False)
    governorate_code: int = field(init=False)
    governorate: Governorate = field(init=False)
    serial_number: int = field(init=False)
    gender: Gender = field(init=False)

    def __post_init__(self, options: Optional[ParseOptions]) -> None:
        options = options or DEFAULT_OPTIONS
        fields = decode_fields(self.value, validate_checksum_digit=options.validate_checksum)

        object.__setattr__(self, "birth_date", fields.birth_date)
        object.__setattr__(self, "governorate_code", fields.governorate_code)
        object.__setattr__(self, "governorate", fields.governorate)
        object.__setattr__(self, "serial_number", fields.serial)
        object.__setattr__(self, "gender", fields.gender)

    # ==================== Factories and predicates ====================

    @classmethod
    def parse(
        cls,
        value: Any,
        options: Optional[ParseOptions] = None,
        *,
        clock: Optional[Clock] = None,
    ) -> NationalIdResult:
        """Run the construction pipeline without raising domain errors.

        Returns:
            A ParseResult holding the instance, or the
            EgyptianNationalIdError that rejected the input. Unexpected
            exceptions are not captured.
        """
        try:
            return ParseResult(value=cls(value, options, clock=clock))
        except EgyptianNationalIdError as e:
            shown = mask_national_id(value) if isinstance(value, str) else type(value).__name__
            logger.debug("Rejected National ID %s: %s", shown, e)
            return ParseResult(error=e)

    @classmethod
    def try_create(
        cls,
        value: Any,
        options: Optional[ParseOptions] = None,
        *,
        clock: Optional[Clock] = None,
    ) -> Optional["EgyptianNationalId"]:
        """Create an instance, or return None if the input is rejected."""
        return cls.parse(value, options, clock=clock).unwrap_or(None)

    @classmethod
    def is_valid(cls, value: Any, options: Optional[ParseOptions] = None) -> bool:
        """True if the full construction pipeline accepts ``value``."""
        return cls.parse(value, options).ok

    @staticmethod
    def is_valid_format(value: Any) -> bool:
        """True if ``value`` is exactly 14 ASCII digits."""
        return validators.is_valid_format(value)

    @staticmethod
    def validate_checksum(value: Any) -> bool:
        """True if ``value`` is well formed and its check digit matches."""
        return validators.validate_checksum(value)

    def with_clock(self, clock: Clock) -> "EgyptianNationalId":
        """Copy of this ID whose date-dependent properties use ``clock``."""
        return replace(self, clock=clock)

    def _today(self) -> date:
        return (self.clock or system_today)()

    # ==================== Birth data ====================

    @property
    def birth_year(self) -> int:
        return self.birth_date.year

    @property
    def birth_month(self) -> int:
        return self.birth_date.month

    @property
    def birth_day(self) -> int:
        return self.birth_date.day

    @property
    def age(self) -> int:
        """Age in full years as of today."""
        return calendar.calculate_age(self.birth_date, self._today())

    @property
    def is_adult(self) -> bool:
        return self.age >= calendar.ADULT_AGE

    @property
    def gender_ar(self) -> str:
        return self.gender.name_ar

    @property
    def governorate_name_ar(self) -> str:
        return self.governorate.name_ar

    @property
    def governorate_name_en(self) -> str:
        return self.governorate.name_en

    # ==================== Card issue and expiry ====================

    @property
    def estimated_issue_date(self) -> date:
        """Estimated first issue date (the 16th birthday)."""
        return calendar.estimate_issue_date(self.birth_date)

    @property
    def years_since_issue(self) -> int:
        """Full years since the estimated issue date, 0 if not yet issued."""
        return calendar.years_since(self.estimated_issue_date, self._today())

    @property
    def card_age(self) -> int:
        return self.years_since_issue

    @property
    def estimated_expiry_date(self) -> date:
        """Estimated expiry: 5 years for cards issued before 2021, else 7."""
        return calendar.estimate_expiry_date(self.birth_date)

    @property
    def is_likely_expired(self) -> bool:
        return calendar.is_past(self.estimated_expiry_date, self._today())

    @property
    def years_until_expiry(self) -> int:
        """Signed full years to expiry; negative once expired."""
        return calendar.years_until(self.estimated_expiry_date, self._today())

    @property
    def is_expiring_soon(self) -> bool:
        return 0 <= self.years_until_expiry <= 1

    @property
    def is_eligible_for_national_id(self) -> bool:
        return self.age >= calendar.FIRST_ISSUE_AGE

    # ==================== Birth region ====================

    @property
    def birth_region(self) -> Region:
        return self.governorate.region

    @property
    def birth_region_name_ar(self) -> str:
        return self.birth_region.name_ar

    @property
    def birth_region_name_en(self) -> str:
        return self.birth_region.name_en

    @property
    def is_from_upper_egypt(self) -> bool:
        return self.birth_region is Region.UPPER_EGYPT

    @property
    def is_from_lower_egypt(self) -> bool:
        return self.birth_region in (Region.GREATER_CAIRO, Region.DELTA)

    @property
    def is_from_coastal_region(self) -> bool:
        return self.birth_region in (
            Region.DELTA,
            Region.CANAL,
            Region.SINAI_AND_RED_SEA,
            Region.WESTERN_DESERT,
        )

    @property
    def is_from_greater_cairo(self) -> bool:
        return self.birth_region is Region.GREATER_CAIRO

    @property
    def is_from_delta(self) -> bool:
        return self.birth_region is Region.DELTA

    @property
    def is_from_sinai(self) -> bool:
        return self.birth_region is Region.SINAI_AND_RED_SEA

    @property
    def is_born_abroad(self) -> bool:
        return self.birth_region is Region.FOREIGN

    # ==================== Formatting ====================

    def format_with_dashes(self) -> str:
        """Format as ``C-YYMMDD-GG-SSSSS``, e.g. ``3-010101-01-23456``."""
        v = self.value
        return f"{v[0]}-{v[1:7]}-{v[7:9]}-{v[9:14]}"

    def format_with_spaces(self) -> str:
        """Format as ``C YYMMDD GG SSSSS``, e.g. ``3 010101 01 23456``."""
        v = self.value
        return f"{v[0]} {v[1:7]} {v[7:9]} {v[9:14]}"

    def format_with_brackets(self) -> str:
        """Format as ``[C][YYMMDD][GG][SSSSS]``."""
        v = self.value
        return f"[{v[0]}][{v[1:7]}][{v[7:9]}][{v[9:14]}]"

    def format_masked(self) -> str:
        """First 3 and last 2 digits only, e.g. ``301********67``."""
        return mask_national_id(self.value)

    def format_detailed(self) -> str:
        """Multi-line labelled breakdown of the ID."""
        century_text = "1900s" if self.value[0] == "2" else "2000s"
        return (
            f"Century: {self.value[0]} ({century_text})\n"
            f"Birth Date: {self.birth_date:%d/%m/%Y}\n"
            f"Governorate: {self.governorate_code:02d} ({self.governorate_name_en})\n"
            f"Serial: {self.serial_number:04d}\n"
            f"Gender: {self.gender.value}"
        )

    # ==================== Serialization ====================

    def to_record(self) -> NationalIdRecord:
        """Snapshot of the ID as a pydantic model."""
        return NationalIdRecord(
            value=self.value,
            birth_date=self.birth_date,
            birth_year=self.birth_year,
            birth_month=self.birth_month,
            birth_day=self.birth_day,
            age=self.age,
            is_adult=self.is_adult,
            gender=self.gender.value,
            gender_ar=self.gender_ar,
            governorate_code=self.governorate_code,
            governorate=self.governorate_name_en,
            governorate_name_ar=self.governorate_name_ar,
            governorate_name_en=self.governorate_name_en,
            serial_number=self.serial_number,
            birth_region=self.birth_region_name_en,
            birth_region_name_ar=self.birth_region_name_ar,
            birth_region_name_en=self.birth_region_name_en,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible dict with camelCase keys."""
        return self.to_record().model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.to_record().model_dump_json(by_alias=True)

    # ==================== Comparison ====================

    def compare_to(self, other: Optional["EgyptianNationalId"]) -> int:
        """Three-way comparison by birth date, then serial number.

        Returns:
            Negative if this person is older, positive if younger or if
            ``other`` is None, 0 for the same birth date and serial.
        """
        if other is None:
            return 1
        if self.birth_date != other.birth_date:
            return (self.birth_date - other.birth_date).days
        return self.serial_number - other.serial_number

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EgyptianNationalId):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, EgyptianNationalId):
            return NotImplemented
        return (self.birth_date, self.serial_number, self.value) < (
            other.birth_date,
            other.serial_number,
            other.value,
        )

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"EgyptianNationalId({self.format_masked()!r})"

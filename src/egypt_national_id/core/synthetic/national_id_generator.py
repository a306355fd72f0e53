"""
Synthetic National ID generator

Builds realistic, structurally valid Egyptian National IDs, for example to
replace real IDs in test fixtures or masked datasets.

Note: generated numbers are for testing and development only and carry no
legal meaning.

Features:
- Build an ID from birth date, governorate and gender
- Imitate a real ID, optionally keeping its birth date, governorate and gender
- Best-effort check digit, so generated IDs pass checksum validation
- Deterministic output (same input and seed, same ID)
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from egypt_national_id.config.options import ParseOptions
from egypt_national_id.core.decoder import CENTURY_BASES, gender_from_digit
from egypt_national_id.core.national_id import EgyptianNationalId
from egypt_national_id.core.synthetic.base import BaseSyntheticGenerator
from egypt_national_id.reference import Gender, Governorate, governorate_from_code
from egypt_national_id.utils.validators import calculate_check_digit

_CHECKSUM_OPTIONS = ParseOptions(validate_checksum=True)


@dataclass
class NationalIdGenerationResult:
    """Result of imitating a National ID."""

    original: str
    synthetic: str
    birth_date: Optional[date]
    governorate: Optional[Governorate]
    gender: Optional[Gender]
    is_valid: bool


def century_digit_for(year: int) -> str:
    """Century digit for a birth year.

    Raises:
        ValueError: If the year is outside 1900-2099.
    """
    for digit, base in CENTURY_BASES.items():
        if base <= year < base + 100:
            return digit
    raise ValueError(f"Birth year must be between 1900 and 2099, got {year}")


class NationalIdGenerator(BaseSyntheticGenerator):
    """Egyptian National ID generator.

    Example:
        >>> gen = NationalIdGenerator()
        >>> nid = gen.build(date(2001, 1, 1), Governorate.CAIRO, Gender.MALE, serial=2345)
        >>> str(nid)
        '30101010123458'
    """

    def __init__(
        self,
        *,
        preserve_birth_date: bool = True,
        preserve_governorate: bool = True,
        preserve_gender: bool = True,
        seed: int = 42,
    ):
        """Initialize the generator.

        Args:
            preserve_birth_date: Keep the birth date when imitating an ID.
            preserve_governorate: Keep the governorate when imitating an ID.
            preserve_gender: Keep the gender when imitating an ID.
            seed: Seed for deterministic generation.
        """
        super().__init__(seed=seed)
        self.preserve_birth_date = preserve_birth_date
        self.preserve_governorate = preserve_governorate
        self.preserve_gender = preserve_gender

    def build(
        self,
        birth_date: date,
        governorate: Governorate | int,
        gender: Gender,
        serial: Optional[int] = None,
    ) -> EgyptianNationalId:
        """Compose a National ID from its parts.

        Args:
            birth_date: Birth date between 1900-01-01 and 2099-12-31.
            governorate: Governorate or its numeric code.
            gender: Gender to encode in the serial's last digit.
            serial: Four-digit serial. Derived from the other fields when
                omitted; when given, its last digit must match ``gender``.

        Returns:
            The generated EgyptianNationalId.

        Raises:
            ValueError: If any part cannot be encoded.
        """
        century = century_digit_for(birth_date.year)

        resolved = governorate_from_code(int(governorate))
        if resolved is None:
            raise ValueError(f"Unknown governorate code: {int(governorate)}")

        if serial is None:
            serial = self._generate_serial(f"{birth_date.isoformat()}:{int(resolved)}", gender)
        elif not 0 <= serial <= 9999:
            raise ValueError(f"Serial must be between 0 and 9999, got {serial}")
        elif gender_from_digit(serial % 10) is not gender:
            raise ValueError(f"Serial {serial:04d} does not encode gender {gender.value}")

        prefix = f"{century}{birth_date:%y%m%d}{int(resolved):02d}{serial:04d}"
        check_digit = calculate_check_digit(prefix)

        return EgyptianNationalId(f"{prefix}{check_digit}", _CHECKSUM_OPTIONS)

    def generate(self, original: str) -> NationalIdGenerationResult:
        """Generate a synthetic ID that imitates ``original``.

        Invalid input is returned unchanged with ``is_valid=False``.
        """
        parsed = EgyptianNationalId.try_create(original)

        if parsed is None:
            return NationalIdGenerationResult(
                original=original,
                synthetic=original,
                birth_date=None,
                governorate=None,
                gender=None,
                is_valid=False,
            )

        birth_date = parsed.birth_date if self.preserve_birth_date else self._generate_birth_date(original)
        governorate = parsed.governorate if self.preserve_governorate else self._pick_governorate(original)
        gender = parsed.gender if self.preserve_gender else self._pick_gender(original)

        serial = self._generate_serial(original, gender)
        synthetic = self.build(birth_date, governorate, gender, serial=serial)

        return NationalIdGenerationResult(
            original=original,
            synthetic=str(synthetic),
            birth_date=birth_date,
            governorate=governorate,
            gender=gender,
            is_valid=True,
        )

    def _generate_serial(self, key: str, gender: Gender) -> int:
        """Four-digit serial whose last digit encodes the gender."""
        hash_val = self._hash_string(key + ":serial")

        head = hash_val % 1000
        last = 2 * ((hash_val >> 16) % 5)
        if gender is Gender.MALE:
            last += 1

        return head * 10 + last

    def _generate_birth_date(self, key: str) -> date:
        """Birth date between 1950 and 2005."""
        hash_val = self._hash_string(key + ":birth")

        year = 1950 + (hash_val % 56)
        month = 1 + ((hash_val >> 8) % 12)
        day = 1 + ((hash_val >> 16) % 28)  # valid in every month

        return date(year, month, day)

    def _pick_governorate(self, key: str) -> Governorate:
        members = list(Governorate)
        return members[self._hash_string(key + ":governorate") % len(members)]

    def _pick_gender(self, key: str) -> Gender:
        return Gender.MALE if self._hash_string(key + ":gender") % 2 else Gender.FEMALE

"""Tests for the National ID decoder."""

from datetime import date

import pytest

from egypt_national_id.core.decoder import (
    build_birth_date,
    decode_fields,
    gender_from_digit,
    resolve_century_base,
)
from egypt_national_id.exceptions import (
    InvalidBirthDateError,
    InvalidChecksumError,
    InvalidGovernorateCodeError,
    InvalidNationalIdFormatError,
)
from egypt_national_id.reference import Gender, Governorate


class TestDecodeFields:
    """Tests for field extraction."""

    def test_extracts_all_fields(self):
        fields = decode_fields("30101011234567")

        assert fields.century_digit == 3
        assert fields.year_two_digit == 1
        assert fields.month == 1
        assert fields.day == 1
        assert fields.governorate_code == 12
        assert fields.governorate is Governorate.DAKAHLIA
        assert fields.serial == 3456
        assert fields.gender_digit == 6
        assert fields.gender is Gender.FEMALE
        assert fields.birth_date == date(2001, 1, 1)

    def test_serial_keeps_leading_zeros_as_int(self):
        fields = decode_fields("31506283500098")
        assert fields.serial == 9
        assert fields.governorate is Governorate.SOUTH_SINAI
        assert fields.gender is Gender.MALE

    def test_checksum_skipped_by_default(self):
        fields = decode_fields("30101010123456")
        assert fields.birth_date == date(2001, 1, 1)

    def test_checksum_validated_when_requested(self):
        with pytest.raises(InvalidChecksumError):
            decode_fields("30101010123456", validate_checksum_digit=True)
        assert decode_fields("30101010123458", validate_checksum_digit=True).serial == 2345


class TestValidationOrder:
    """The first failing check determines the error type."""

    def test_format_first(self):
        with pytest.raises(InvalidNationalIdFormatError):
            decode_fields("1234", validate_checksum_digit=True)

    def test_checksum_before_century(self):
        with pytest.raises(InvalidChecksumError):
            decode_fields("10101010123456", validate_checksum_digit=True)

    def test_century_before_governorate(self):
        with pytest.raises(InvalidBirthDateError):
            decode_fields("10101019999999")

    def test_governorate_last(self):
        with pytest.raises(InvalidGovernorateCodeError):
            decode_fields("30101019999999")


class TestHelpers:
    def test_century_bases(self):
        assert resolve_century_base("2") == 1900
        assert resolve_century_base("3") == 2000

    @pytest.mark.parametrize("digit", ["0", "1", "4", "9"])
    def test_unsupported_century(self, digit):
        with pytest.raises(InvalidBirthDateError):
            resolve_century_base(digit)

    def test_build_birth_date(self):
        assert build_birth_date(2004, 2, 29) == date(2004, 2, 29)

    @pytest.mark.parametrize(
        "year, month, day",
        [(2001, 2, 29), (2001, 2, 31), (2001, 4, 31), (2001, 13, 1), (2001, 0, 1), (2001, 1, 0)],
    )
    def test_impossible_dates(self, year, month, day):
        with pytest.raises(InvalidBirthDateError):
            build_birth_date(year, month, day)

    @pytest.mark.parametrize(
        "digit, expected",
        [(0, Gender.FEMALE), (1, Gender.MALE), (4, Gender.FEMALE), (9, Gender.MALE)],
    )
    def test_gender_from_digit(self, digit, expected):
        assert gender_from_digit(digit) is expected

"""Tests for the EgyptianNationalId value object."""

import dataclasses
import json
from datetime import date

import pytest

from egypt_national_id import (
    EgyptianNationalId,
    EgyptianNationalIdError,
    Gender,
    Governorate,
    InvalidBirthDateError,
    InvalidChecksumError,
    InvalidGovernorateCodeError,
    InvalidNationalIdFormatError,
    ParseOptions,
    ParseResult,
    Region,
)
from egypt_national_id.core.result import NationalIdResult


class TestConstruction:
    """Tests for the throwing constructor."""

    def test_valid_national_id(self):
        nid = EgyptianNationalId("30101010123456")
        assert nid.value == "30101010123456"
        assert str(nid) == "30101010123456"

    def test_parsed_fields(self):
        nid = EgyptianNationalId("30101010123456")
        assert nid.birth_date == date(2001, 1, 1)
        assert nid.governorate_code == 1
        assert nid.governorate is Governorate.CAIRO
        assert nid.serial_number == 2345

    def test_birth_date_components(self):
        nid = EgyptianNationalId("31506283500098")
        assert nid.birth_year == 2015
        assert nid.birth_month == 6
        assert nid.birth_day == 28

    def test_1900s_century(self):
        nid = EgyptianNationalId("25512150123451")
        assert nid.birth_date == date(1955, 12, 15)

    def test_gender_female_when_digit_even(self):
        assert EgyptianNationalId("30101011234568").gender is Gender.FEMALE

    def test_gender_male_when_digit_odd(self):
        assert EgyptianNationalId("30101011234577").gender is Gender.MALE

    def test_gender_uses_thirteenth_digit_not_check_digit(self):
        # digit 13 is 6 (female) while the check digit 7 is odd
        assert EgyptianNationalId("30101011234567").gender is Gender.FEMALE

    def test_gender_arabic(self):
        assert EgyptianNationalId("30101011234577").gender_ar == "ذكر"
        assert EgyptianNationalId("30101011234568").gender_ar == "أنثى"

    def test_leap_day_birth(self):
        nid = EgyptianNationalId("30402290123456")
        assert nid.birth_date == date(2004, 2, 29)

    def test_foreign_governorate(self):
        nid = EgyptianNationalId("30101018812345")
        assert nid.governorate is Governorate.FOREIGN
        assert nid.governorate_code == 88
        assert nid.serial_number == 1234


class TestConstructionErrors:
    """Tests for rejected input."""

    @pytest.mark.parametrize(
        "value",
        ["", "123", "301010101234567", "3010101012345A", "3010101012345 ", None, 30101010123456],
    )
    def test_invalid_format(self, value):
        with pytest.raises(InvalidNationalIdFormatError):
            EgyptianNationalId(value)

    def test_arabic_indic_digits_rejected(self):
        with pytest.raises(InvalidNationalIdFormatError):
            EgyptianNationalId("٣٠١٠١٠١٠١٢٣٤٥٦")

    def test_invalid_governorate_code(self):
        with pytest.raises(InvalidGovernorateCodeError) as exc_info:
            EgyptianNationalId("30101019999999")
        assert exc_info.value.code == 99
        assert "99" in str(exc_info.value)

    @pytest.mark.parametrize("code", ["00", "05", "10", "20", "30", "36", "87", "89"])
    def test_unassigned_governorate_codes(self, code):
        with pytest.raises(InvalidGovernorateCodeError):
            EgyptianNationalId(f"3010101{code}23456")

    def test_february_31_rejected(self):
        with pytest.raises(InvalidBirthDateError):
            EgyptianNationalId("30102310123456")

    def test_month_13_rejected(self):
        with pytest.raises(InvalidBirthDateError):
            EgyptianNationalId("30113010123456")

    def test_month_and_day_zero_rejected(self):
        with pytest.raises(InvalidBirthDateError):
            EgyptianNationalId("30100010123456")
        with pytest.raises(InvalidBirthDateError):
            EgyptianNationalId("30101000123456")

    def test_february_29_in_common_year_rejected(self):
        with pytest.raises(InvalidBirthDateError):
            EgyptianNationalId("30102290123456")

    @pytest.mark.parametrize("century", ["0", "1", "4", "9"])
    def test_unsupported_century(self, century):
        with pytest.raises(InvalidBirthDateError):
            EgyptianNationalId(f"{century}0101010123456")

    def test_birth_date_checked_before_governorate(self):
        # both the date and the governorate are invalid
        with pytest.raises(InvalidBirthDateError):
            EgyptianNationalId("30113019999999")

    def test_all_errors_share_base_class(self, invalid_national_ids):
        for value in invalid_national_ids.values():
            with pytest.raises(EgyptianNationalIdError):
                EgyptianNationalId(value)


class TestChecksumOption:
    """Tests for opt-in checksum validation."""

    def test_checksum_disabled_by_default(self):
        assert EgyptianNationalId.validate_checksum("30101011234567") is False
        nid = EgyptianNationalId("30101011234567")
        assert nid.value == "30101011234567"

    def test_checksum_enabled_rejects(self):
        with pytest.raises(InvalidChecksumError):
            EgyptianNationalId("30101011234567", ParseOptions(validate_checksum=True))

    def test_checksum_enabled_accepts_matching_digit(self):
        nid = EgyptianNationalId("30101010123458", ParseOptions(validate_checksum=True))
        assert nid.birth_date == date(2001, 1, 1)

    def test_checksum_checked_before_century(self):
        with pytest.raises(InvalidChecksumError):
            EgyptianNationalId("10101010123456", ParseOptions(validate_checksum=True))


class TestTryFactories:
    """Tests for the non-throwing construction paths."""

    def test_try_create_valid(self):
        nid = EgyptianNationalId.try_create("30101011234567")
        assert nid is not None
        assert nid.value == "30101011234567"

    def test_try_create_invalid_format(self):
        assert EgyptianNationalId.try_create("123") is None
        assert EgyptianNationalId.try_create(None) is None

    def test_try_create_domain_failure(self):
        assert EgyptianNationalId.try_create("30101019999999") is None

    def test_try_create_checksum_failure(self):
        options = ParseOptions(validate_checksum=True)
        assert EgyptianNationalId.try_create("30101011234567", options) is None

    def test_parse_returns_error(self):
        result = EgyptianNationalId.parse("30102310123456")
        assert not result.ok
        assert not result
        assert isinstance(result.error, InvalidBirthDateError)
        assert result.value is None
        with pytest.raises(InvalidBirthDateError):
            result.unwrap()

    def test_parse_returns_value(self):
        result = EgyptianNationalId.parse("30101010123456")
        assert result.ok
        assert result.error is None
        assert result.unwrap().governorate is Governorate.CAIRO

    def test_parse_return_type(self):
        assert EgyptianNationalId.parse.__annotations__["return"] is NationalIdResult
        assert isinstance(EgyptianNationalId.parse("123"), ParseResult)

    def test_unexpected_errors_propagate(self, monkeypatch):
        def broken_decoder(value, *, validate_checksum_digit=False):
            raise RuntimeError("decoder bug")

        monkeypatch.setattr("egypt_national_id.core.national_id.decode_fields", broken_decoder)

        with pytest.raises(RuntimeError, match="decoder bug"):
            EgyptianNationalId.try_create("30101010123456")
        with pytest.raises(RuntimeError):
            EgyptianNationalId.is_valid("30101010123456")

    def test_is_valid(self):
        assert EgyptianNationalId.is_valid("30101011234567") is True
        assert EgyptianNationalId.is_valid("123") is False
        assert EgyptianNationalId.is_valid("30101019999999") is False

    def test_is_valid_with_checksum(self):
        options = ParseOptions(validate_checksum=True)
        assert EgyptianNationalId.is_valid("30101010123458", options) is True
        assert EgyptianNationalId.is_valid("30101010123456", options) is False


class TestImmutability:
    """Tests for immutability and identity."""

    def test_cannot_reassign_fields(self):
        nid = EgyptianNationalId("30101010123456")
        with pytest.raises(dataclasses.FrozenInstanceError):
            nid.value = "29001010123452"  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            nid.birth_date = date(1990, 1, 1)  # type: ignore[misc]

    def test_same_construction_is_deterministic(self, fixed_clock):
        first = EgyptianNationalId("30101010123456", clock=fixed_clock)
        second = EgyptianNationalId("30101010123456", clock=fixed_clock)
        assert first.to_dict() == second.to_dict()

    def test_repr_is_masked(self):
        nid = EgyptianNationalId("30101010123456")
        assert "30101010123456" not in repr(nid)
        assert "301********56" in repr(nid)


class TestComparison:
    """Tests for equality and ordering."""

    def test_equal_by_raw_value(self, fixed_clock):
        assert EgyptianNationalId("30101010123456") == EgyptianNationalId(
            "30101010123456", clock=fixed_clock
        )

    def test_not_equal(self):
        assert EgyptianNationalId("30101010123456") != EgyptianNationalId("30101010123458")

    def test_not_equal_to_string(self):
        assert EgyptianNationalId("30101010123456") != "30101010123456"

    def test_hashable(self):
        ids = {
            EgyptianNationalId("30101010123456"),
            EgyptianNationalId("30101010123456"),
            EgyptianNationalId("29001010123452"),
        }
        assert len(ids) == 2

    def test_sorted_by_birth_date_then_serial(self):
        older = EgyptianNationalId("29001010123452")
        low_serial = EgyptianNationalId("30101010123456")
        high_serial = EgyptianNationalId("30101011234577")

        assert sorted([high_serial, low_serial, older]) == [older, low_serial, high_serial]
        assert older < low_serial < high_serial
        assert high_serial >= low_serial

    def test_same_birth_date_and_serial_is_totally_ordered(self):
        cairo = EgyptianNationalId("30101010123456")
        alexandria = EgyptianNationalId("30101010223456")

        assert cairo != alexandria
        assert cairo < alexandria
        assert not (cairo > alexandria and alexandria > cairo)
        assert (cairo < alexandria) + (cairo == alexandria) + (cairo > alexandria) == 1
        assert cairo <= alexandria
        assert alexandria >= cairo
        assert max(alexandria, cairo) is alexandria

    def test_same_birth_date_and_serial_compare_to_is_zero(self):
        cairo = EgyptianNationalId("30101010123456")
        alexandria = EgyptianNationalId("30101010223456")
        assert cairo.compare_to(alexandria) == 0

    def test_compare_to(self):
        older = EgyptianNationalId("29001010123452")
        younger = EgyptianNationalId("30101010123456")

        assert older.compare_to(younger) < 0
        assert younger.compare_to(older) > 0
        assert younger.compare_to(EgyptianNationalId("30101010123458")) == 0
        assert younger.compare_to(EgyptianNationalId("30101011234577")) < 0
        assert younger.compare_to(None) == 1


class TestRegions:
    """Tests for region-derived properties."""

    def test_greater_cairo(self):
        nid = EgyptianNationalId("30101010123456")
        assert nid.birth_region is Region.GREATER_CAIRO
        assert nid.birth_region_name_en == "GreaterCairo"
        assert nid.birth_region_name_ar == "القاهرة الكبرى"
        assert nid.is_from_greater_cairo is True
        assert nid.is_from_lower_egypt is True
        assert nid.is_from_coastal_region is False
        assert nid.is_from_upper_egypt is False
        assert nid.is_born_abroad is False

    def test_delta(self):
        nid = EgyptianNationalId("30101010223456")  # Alexandria
        assert nid.governorate is Governorate.ALEXANDRIA
        assert nid.is_from_delta is True
        assert nid.is_from_lower_egypt is True
        assert nid.is_from_coastal_region is True

    def test_canal(self):
        nid = EgyptianNationalId("30101010323456")  # Port Said
        assert nid.birth_region is Region.CANAL
        assert nid.is_from_coastal_region is True
        assert nid.is_from_lower_egypt is False

    def test_upper_egypt(self):
        nid = EgyptianNationalId("30101012523456")  # Asyut
        assert nid.is_from_upper_egypt is True
        assert nid.is_from_coastal_region is False

    def test_sinai(self):
        nid = EgyptianNationalId("30101013423456")  # North Sinai
        assert nid.is_from_sinai is True
        assert nid.is_from_coastal_region is True

    def test_western_desert(self):
        nid = EgyptianNationalId("30101013223456")  # New Valley
        assert nid.birth_region is Region.WESTERN_DESERT
        assert nid.is_from_coastal_region is True

    def test_born_abroad(self):
        nid = EgyptianNationalId("30101018812345")
        assert nid.is_born_abroad is True
        assert nid.birth_region_name_ar == "خارج الجمهورية"
        assert nid.is_from_lower_egypt is False
        assert nid.is_from_upper_egypt is False

    def test_governorate_names(self):
        nid = EgyptianNationalId("30101012123456")  # Giza
        assert nid.governorate_name_en == "Giza"
        assert nid.governorate_name_ar == "الجيزة"
        assert nid.is_from_greater_cairo is True


class TestFormatting:
    """Tests for display formats."""

    @pytest.fixture
    def nid(self):
        return EgyptianNationalId("30101010123456")

    def test_dashes(self, nid):
        assert nid.format_with_dashes() == "3-010101-01-23456"

    def test_spaces(self, nid):
        assert nid.format_with_spaces() == "3 010101 01 23456"

    def test_brackets(self, nid):
        assert nid.format_with_brackets() == "[3][010101][01][23456]"

    def test_masked(self):
        assert EgyptianNationalId("30101011234567").format_masked() == "301********67"

    def test_detailed(self, nid):
        assert nid.format_detailed() == (
            "Century: 3 (2000s)\n"
            "Birth Date: 01/01/2001\n"
            "Governorate: 01 (Cairo)\n"
            "Serial: 2345\n"
            "Gender: Male"
        )

    def test_detailed_1900s(self):
        detailed = EgyptianNationalId("25512150123451").format_detailed()
        assert detailed.startswith("Century: 2 (1900s)\n")
        assert "Birth Date: 15/12/1955" in detailed


class TestSerialization:
    """Tests for the structured representation."""

    def test_to_dict(self, fixed_clock):
        nid = EgyptianNationalId("30101010123456", clock=fixed_clock)
        assert nid.to_dict() == {
            "value": "30101010123456",
            "birthDate": "2001-01-01",
            "birthYear": 2001,
            "birthMonth": 1,
            "birthDay": 1,
            "age": 25,
            "isAdult": True,
            "gender": "Male",
            "genderAr": "ذكر",
            "governorateCode": 1,
            "governorate": "Cairo",
            "governorateNameAr": "القاهرة",
            "governorateNameEn": "Cairo",
            "serialNumber": 2345,
            "birthRegion": "GreaterCairo",
            "birthRegionNameAr": "القاهرة الكبرى",
            "birthRegionNameEn": "GreaterCairo",
        }

    def test_to_json(self, fixed_clock):
        nid = EgyptianNationalId("30101018812345", clock=fixed_clock)
        data = json.loads(nid.to_json())
        assert data["governorateCode"] == 88
        assert data["birthRegion"] == "Foreign"
        assert data["gender"] == "Female"

    def test_to_record(self, fixed_clock):
        record = EgyptianNationalId("30101010123456", clock=fixed_clock).to_record()
        assert record.birth_date == date(2001, 1, 1)
        assert record.serial_number == 2345

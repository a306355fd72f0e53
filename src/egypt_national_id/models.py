"""
Pydantic models for the serialized National ID representation.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class NationalIdRecord(BaseModel):
    """Structured, JSON-ready view of a parsed National ID."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    value: str = Field(..., description="The original 14-digit National ID")
    birth_date: date = Field(..., alias="birthDate", description="Birth date (ISO 8601)")
    birth_year: int = Field(..., alias="birthYear")
    birth_month: int = Field(..., alias="birthMonth", ge=1, le=12)
    birth_day: int = Field(..., alias="birthDay", ge=1, le=31)
    age: int = Field(..., description="Age in full years at serialization time")
    is_adult: bool = Field(..., alias="isAdult")
    gender: str = Field(..., description="Male or Female")
    gender_ar: str = Field(..., alias="genderAr")
    governorate_code: int = Field(..., alias="governorateCode")
    governorate: str = Field(..., description="Governorate English name")
    governorate_name_ar: str = Field(..., alias="governorateNameAr")
    governorate_name_en: str = Field(..., alias="governorateNameEn")
    serial_number: int = Field(..., alias="serialNumber", ge=0, le=9999)
    birth_region: str = Field(..., alias="birthRegion", description="Region English name")
    birth_region_name_ar: str = Field(..., alias="birthRegionNameAr")
    birth_region_name_en: str = Field(..., alias="birthRegionNameEn")

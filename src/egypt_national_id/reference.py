"""
Reference tables for Egyptian National IDs

Governorate codes as they appear in digits 8-9 of the National ID, their
Arabic and English display names, and the coarser geographic region each
governorate belongs to. The tables are closed: every enum member has an
entry in every table, and nothing is registered at runtime.
"""

from enum import Enum, IntEnum
from typing import Optional


class Gender(str, Enum):
    """Gender encoded by the parity of the 13th digit."""

    MALE = "Male"
    FEMALE = "Female"

    @property
    def name_ar(self) -> str:
        return GENDER_ARABIC_NAMES[self]


class Governorate(IntEnum):
    """Governorates with their official two-digit codes."""

    CAIRO = 1
    ALEXANDRIA = 2
    PORT_SAID = 3
    SUEZ = 4
    DAMIETTA = 11
    DAKAHLIA = 12
    SHARQIA = 13
    QALYUBIA = 14
    KAFR_EL_SHEIKH = 15
    GHARBIA = 16
    MONUFIA = 17
    BEHEIRA = 18
    ISMAILIA = 19
    GIZA = 21
    BENI_SUEF = 22
    FAYOUM = 23
    MINYA = 24
    ASYUT = 25
    SOHAG = 26
    QENA = 27
    ASWAN = 28
    LUXOR = 29
    RED_SEA = 31
    NEW_VALLEY = 32
    MATROUH = 33
    NORTH_SINAI = 34
    SOUTH_SINAI = 35
    FOREIGN = 88

    @property
    def name_ar(self) -> str:
        return GOVERNORATE_ARABIC_NAMES[self]

    @property
    def name_en(self) -> str:
        return GOVERNORATE_ENGLISH_NAMES[self]

    @property
    def region(self) -> "Region":
        return GOVERNORATE_TO_REGION[self]


class Region(IntEnum):
    """Geographic regions of Egypt."""

    GREATER_CAIRO = 1
    DELTA = 2
    CANAL = 3
    UPPER_EGYPT = 4
    SINAI_AND_RED_SEA = 5
    WESTERN_DESERT = 6
    FOREIGN = 7

    @property
    def name_ar(self) -> str:
        return REGION_ARABIC_NAMES[self]

    @property
    def name_en(self) -> str:
        return REGION_ENGLISH_NAMES[self]


GENDER_ARABIC_NAMES: dict[Gender, str] = {
    Gender.MALE: "ذكر",
    Gender.FEMALE: "أنثى",
}

GOVERNORATE_ARABIC_NAMES: dict[Governorate, str] = {
    Governorate.CAIRO: "القاهرة",
    Governorate.ALEXANDRIA: "الإسكندرية",
    Governorate.PORT_SAID: "بورسعيد",
    Governorate.SUEZ: "السويس",
    Governorate.DAMIETTA: "دمياط",
    Governorate.DAKAHLIA: "الدقهلية",
    Governorate.SHARQIA: "الشرقية",
    Governorate.QALYUBIA: "القليوبية",
    Governorate.KAFR_EL_SHEIKH: "كفر الشيخ",
    Governorate.GHARBIA: "الغربية",
    Governorate.MONUFIA: "المنوفية",
    Governorate.BEHEIRA: "البحيرة",
    Governorate.ISMAILIA: "الإسماعيلية",
    Governorate.GIZA: "الجيزة",
    Governorate.BENI_SUEF: "بني سويف",
    Governorate.FAYOUM: "الفيوم",
    Governorate.MINYA: "المنيا",
    Governorate.ASYUT: "أسيوط",
    Governorate.SOHAG: "سوهاج",
    Governorate.QENA: "قنا",
    Governorate.ASWAN: "أسوان",
    Governorate.LUXOR: "الأقصر",
    Governorate.RED_SEA: "البحر الأحمر",
    Governorate.NEW_VALLEY: "الوادي الجديد",
    Governorate.MATROUH: "مطروح",
    Governorate.NORTH_SINAI: "شمال سيناء",
    Governorate.SOUTH_SINAI: "جنوب سيناء",
    Governorate.FOREIGN: "خارج الجمهورية",
}

GOVERNORATE_ENGLISH_NAMES: dict[Governorate, str] = {
    Governorate.CAIRO: "Cairo",
    Governorate.ALEXANDRIA: "Alexandria",
    Governorate.PORT_SAID: "PortSaid",
    Governorate.SUEZ: "Suez",
    Governorate.DAMIETTA: "Damietta",
    Governorate.DAKAHLIA: "Dakahlia",
    Governorate.SHARQIA: "Sharqia",
    Governorate.QALYUBIA: "Qalyubia",
    Governorate.KAFR_EL_SHEIKH: "KafrElSheikh",
    Governorate.GHARBIA: "Gharbia",
    Governorate.MONUFIA: "Monufia",
    Governorate.BEHEIRA: "Beheira",
    Governorate.ISMAILIA: "Ismailia",
    Governorate.GIZA: "Giza",
    Governorate.BENI_SUEF: "BeniSuef",
    Governorate.FAYOUM: "Fayoum",
    Governorate.MINYA: "Minya",
    Governorate.ASYUT: "Asyut",
    Governorate.SOHAG: "Sohag",
    Governorate.QENA: "Qena",
    Governorate.ASWAN: "Aswan",
    Governorate.LUXOR: "Luxor",
    Governorate.RED_SEA: "RedSea",
    Governorate.NEW_VALLEY: "NewValley",
    Governorate.MATROUH: "Matrouh",
    Governorate.NORTH_SINAI: "NorthSinai",
    Governorate.SOUTH_SINAI: "SouthSinai",
    Governorate.FOREIGN: "Foreign",
}

REGION_ARABIC_NAMES: dict[Region, str] = {
    Region.GREATER_CAIRO: "القاهرة الكبرى",
    Region.DELTA: "الدلتا",
    Region.CANAL: "قناة السويس",
    Region.UPPER_EGYPT: "الصعيد",
    Region.SINAI_AND_RED_SEA: "سيناء والبحر الأحمر",
    Region.WESTERN_DESERT: "الصحراء الغربية",
    Region.FOREIGN: "خارج الجمهورية",
}

REGION_ENGLISH_NAMES: dict[Region, str] = {
    Region.GREATER_CAIRO: "GreaterCairo",
    Region.DELTA: "Delta",
    Region.CANAL: "Canal",
    Region.UPPER_EGYPT: "UpperEgypt",
    Region.SINAI_AND_RED_SEA: "SinaiAndRedSea",
    Region.WESTERN_DESERT: "WesternDesert",
    Region.FOREIGN: "Foreign",
}

GOVERNORATE_TO_REGION: dict[Governorate, Region] = {
    # Greater Cairo
    Governorate.CAIRO: Region.GREATER_CAIRO,
    Governorate.GIZA: Region.GREATER_CAIRO,
    Governorate.QALYUBIA: Region.GREATER_CAIRO,
    # Delta
    Governorate.ALEXANDRIA: Region.DELTA,
    Governorate.DAMIETTA: Region.DELTA,
    Governorate.DAKAHLIA: Region.DELTA,
    Governorate.SHARQIA: Region.DELTA,
    Governorate.KAFR_EL_SHEIKH: Region.DELTA,
    Governorate.GHARBIA: Region.DELTA,
    Governorate.MONUFIA: Region.DELTA,
    Governorate.BEHEIRA: Region.DELTA,
    # Canal
    Governorate.PORT_SAID: Region.CANAL,
    Governorate.SUEZ: Region.CANAL,
    Governorate.ISMAILIA: Region.CANAL,
    # Upper Egypt
    Governorate.BENI_SUEF: Region.UPPER_EGYPT,
    Governorate.FAYOUM: Region.UPPER_EGYPT,
    Governorate.MINYA: Region.UPPER_EGYPT,
    Governorate.ASYUT: Region.UPPER_EGYPT,
    Governorate.SOHAG: Region.UPPER_EGYPT,
    Governorate.QENA: Region.UPPER_EGYPT,
    Governorate.ASWAN: Region.UPPER_EGYPT,
    Governorate.LUXOR: Region.UPPER_EGYPT,
    # Sinai and Red Sea
    Governorate.RED_SEA: Region.SINAI_AND_RED_SEA,
    Governorate.NORTH_SINAI: Region.SINAI_AND_RED_SEA,
    Governorate.SOUTH_SINAI: Region.SINAI_AND_RED_SEA,
    # Western Desert
    Governorate.NEW_VALLEY: Region.WESTERN_DESERT,
    Governorate.MATROUH: Region.WESTERN_DESERT,
    # Born abroad
    Governorate.FOREIGN: Region.FOREIGN,
}

VALID_GOVERNORATE_CODES: frozenset[int] = frozenset(g.value for g in Governorate)


def governorate_from_code(code: int) -> Optional[Governorate]:
    """Resolve a numeric governorate code.

    Args:
        code: The two-digit code as an integer (e.g. 1 for Cairo, 88 for
            people born abroad).

    Returns:
        The matching Governorate, or None if the code is not assigned.

    Examples:
        >>> governorate_from_code(21)
        <Governorate.GIZA: 21>
        >>> governorate_from_code(99) is None
        True
    """
    if code not in VALID_GOVERNORATE_CODES:
        return None
    return Governorate(code)

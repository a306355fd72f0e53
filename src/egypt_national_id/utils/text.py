"""Text processing utilities for National ID input and output."""

import re
import unicodedata

# Arabic-Indic (U+0660..) and Extended Arabic-Indic (U+06F0..) digits, as
# typed on Arabic and Persian keyboards.
_DIGIT_TRANSLATION = str.maketrans(
    "٠١٢٣٤٥٦٧٨٩۰۱۲۳۴۵۶۷۸۹",
    "01234567890123456789",
)

# Separators people use when writing the ID in groups.
_SEPARATOR_PATTERN = re.compile(r"[\s\-_./\[\]()]")

_NATIONAL_ID_RUN_PATTERN = re.compile(r"(?<!\d)\d{14}(?!\d)")

MASK_CHAR = "*"


def normalize_national_id(text: str) -> str:
    """Normalize user input before validation.

    Applies NFKC normalization, converts Arabic-Indic digits to ASCII and
    removes the separators produced by the dashed, spaced and bracketed
    display formats. No validation is performed.

    Args:
        text: Raw user input.

    Returns:
        The normalized string.

    Examples:
        >>> normalize_national_id(" 3-010101-01-23456 ")
        '30101010123456'
        >>> normalize_national_id("٣٠١٠١٠١٠١٢٣٤٥٦")
        '30101010123456'
    """
    if not text:
        return ""
    text = unicodedata.normalize("NFKC", text)
    text = text.translate(_DIGIT_TRANSLATION)
    return _SEPARATOR_PATTERN.sub("", text)


def mask_national_id(value: str, mask_char: str = MASK_CHAR) -> str:
    """Mask a National ID, keeping the first 3 and last 2 characters.

    Values too short to mask meaningfully are fully masked.

    Examples:
        >>> mask_national_id("30101011234567")
        '301********67'
        >>> mask_national_id("123")
        '***'
    """
    if not value:
        return ""
    if len(value) <= 5:
        return mask_char * len(value)
    return f"{value[:3]}{mask_char * 8}{value[-2:]}"


def mask_national_ids_in_text(text: str) -> str:
    """Mask every standalone run of 14 digits in free text.

    Examples:
        >>> mask_national_ids_in_text("ID 30101011234567 rejected")
        'ID 301********67 rejected'
    """
    if not text:
        return text
    return _NATIONAL_ID_RUN_PATTERN.sub(lambda m: mask_national_id(m.group(0)), text)

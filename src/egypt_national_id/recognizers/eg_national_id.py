"""
Egyptian National ID Recognizer

Finds 14-digit Egyptian National IDs in free text.
Format: CYYMMDDGGSSSSK (century + birth date + governorate + serial + check digit)
"""

from typing import Optional

from presidio_analyzer import Pattern, PatternRecognizer

from egypt_national_id.config.options import ParseOptions
from egypt_national_id.core.national_id import EgyptianNationalId

ENTITY_TYPE = "EG_NATIONAL_ID"


class EgyptianNationalIdRecognizer(PatternRecognizer):
    """Recognizer for Egyptian National ID numbers.

    Candidate matches are confirmed with the full construction pipeline:
    century digit, real birth date and known governorate code. The
    best-effort checksum is only applied when ``validate_checksum`` is set.

    Example:
        >>> recognizer = EgyptianNationalIdRecognizer()
        >>> recognizer.validate_result("30101010123456")
        True
    """

    PATTERNS = [
        Pattern(
            name="eg_national_id_14",
            regex=r"\b[23]\d{13}\b",
            score=0.5,
        ),
    ]

    CONTEXT = [
        "الرقم القومي",
        "رقم قومي",
        "الرقم",
        "القومي",
        "بطاقة",
        "national",
        "nid",
        "id",
        "identity",
        "card",
    ]

    def __init__(
        self,
        supported_language: str = "en",
        context: Optional[list[str]] = None,
        validate_checksum: bool = False,
    ) -> None:
        """Initialize the recognizer.

        Args:
            supported_language: Language code (default: en).
            context: Additional context words.
            validate_checksum: Also require the best-effort check digit.
        """
        self.options = ParseOptions(validate_checksum=validate_checksum)
        context_words = list(self.CONTEXT) + (context or [])

        super().__init__(
            supported_entity=ENTITY_TYPE,
            patterns=self.PATTERNS,
            context=context_words,
            supported_language=supported_language,
        )

    def validate_result(self, pattern_text: str) -> Optional[bool]:
        """Validate a match by constructing the National ID.

        Args:
            pattern_text: The matched digits.

        Returns:
            True if the ID is valid, False otherwise.
        """
        return EgyptianNationalId.is_valid(pattern_text, self.options)

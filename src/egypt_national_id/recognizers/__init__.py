"""Presidio recognizers for Egyptian National IDs in free text."""

from egypt_national_id.recognizers.eg_national_id import (
    ENTITY_TYPE,
    EgyptianNationalIdRecognizer,
)
from egypt_national_id.recognizers.registry import (
    analyze_text,
    create_recognizer_registry,
    find_national_ids,
)

__all__ = [
    "ENTITY_TYPE",
    "EgyptianNationalIdRecognizer",
    "analyze_text",
    "create_recognizer_registry",
    "find_national_ids",
]

"""
Recognizer registry and text scanning helpers.

Scanning uses the pattern recognizer directly, so no spaCy model is needed.
"""

from typing import Optional

from presidio_analyzer import RecognizerRegistry, RecognizerResult

from egypt_national_id.config.options import ParseOptions
from egypt_national_id.core.national_id import EgyptianNationalId
from egypt_national_id.logging.setup import get_logger
from egypt_national_id.recognizers.eg_national_id import (
    ENTITY_TYPE,
    EgyptianNationalIdRecognizer,
)

logger = get_logger(__name__)


def create_recognizer_registry(
    language: str = "en",
    validate_checksum: bool = False,
    custom_recognizers: Optional[list] = None,
) -> RecognizerRegistry:
    """Create a Presidio registry with the National ID recognizer.

    The registry can be handed to an ``AnalyzerEngine`` alongside the
    application's own NLP engine.

    Args:
        language: Language code the recognizer is registered for.
        validate_checksum: Also require the best-effort check digit.
        custom_recognizers: Additional recognizers to register.

    Returns:
        The populated RecognizerRegistry.
    """
    registry = RecognizerRegistry()
    registry.add_recognizer(
        EgyptianNationalIdRecognizer(
            supported_language=language,
            validate_checksum=validate_checksum,
        )
    )

    if custom_recognizers:
        for recognizer in custom_recognizers:
            registry.add_recognizer(recognizer)

    return registry


def analyze_text(text: str, options: Optional[ParseOptions] = None) -> list[RecognizerResult]:
    """Run the National ID recognizer over text.

    Returns:
        Recognizer results for valid IDs, ordered by position.
    """
    if not text:
        return []

    options = options or ParseOptions()
    recognizer = EgyptianNationalIdRecognizer(validate_checksum=options.validate_checksum)
    results = recognizer.analyze(text, entities=[ENTITY_TYPE], nlp_artifacts=None)
    return sorted(results, key=lambda r: r.start)


def find_national_ids(text: str, options: Optional[ParseOptions] = None) -> list[EgyptianNationalId]:
    """Extract the valid National IDs mentioned in text.

    Args:
        text: Free text to scan.
        options: Parsing options applied to every candidate.

    Returns:
        Parsed IDs in order of first appearance, without duplicates.

    Example:
        >>> [str(n) for n in find_national_ids("رقمي 30101010123456 شكرا")]
        ['30101010123456']
    """
    found: list[EgyptianNationalId] = []
    seen: set[str] = set()

    for result in analyze_text(text, options):
        raw = text[result.start:result.end]
        if raw in seen:
            continue
        national_id = EgyptianNationalId.try_create(raw, options)
        if national_id is None:
            continue
        seen.add(raw)
        found.append(national_id)

    logger.debug("Found %d National ID(s) in text of length %d", len(found), len(text))
    return found

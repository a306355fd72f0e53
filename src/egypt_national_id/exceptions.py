"""Exceptions raised when an Egyptian National ID is rejected.

Every error here is terminal for a single construction attempt. The
non-throwing factories absorb exactly these types and let anything else
propagate.
"""


class EgyptianNationalIdError(ValueError):
    """Base class for all National ID validation failures."""


class InvalidNationalIdFormatError(EgyptianNationalIdError):
    """The raw input is not exactly 14 ASCII digits."""

    def __init__(
        self,
        reason: str = "National ID must be exactly 14 digits long and contain digits only.",
    ) -> None:
        super().__init__(reason)


class InvalidChecksumError(EgyptianNationalIdError):
    """Checksum validation was requested and the 14th digit did not match."""

    def __init__(self) -> None:
        super().__init__(
            "National ID checksum validation failed. The ID may be invalid or corrupted."
        )


class InvalidBirthDateError(EgyptianNationalIdError):
    """Unsupported century digit, or the encoded date does not exist."""


class InvalidGovernorateCodeError(EgyptianNationalIdError):
    """The two-digit governorate field is not a known governorate."""

    def __init__(self, code: int | str) -> None:
        self.code = code
        super().__init__(f"Invalid governorate code: {code}")

"""Result type for non-throwing National ID construction."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from egypt_national_id.exceptions import EgyptianNationalIdError

if TYPE_CHECKING:
    from egypt_national_id.core.national_id import EgyptianNationalId

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of a construction attempt.

    Exactly one of ``value`` and ``error`` is set. Only
    EgyptianNationalIdError subclasses are ever captured here; any other
    exception escapes the factory that produced the result.

    Attributes:
        value: The constructed object on success.
        error: The domain error that rejected the input.
    """

    value: Optional[T] = None
    error: Optional[EgyptianNationalIdError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """Return the value, re-raising the captured error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: Optional[T] = None) -> Optional[T]:
        return self.value if self.error is None else default


NationalIdResult = ParseResult["EgyptianNationalId"]

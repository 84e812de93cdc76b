"""Exception hierarchy for readable-time.

All errors raised by the package derive from ReadableTimeError, so callers
can catch a single type. InvalidTimestampError is also a ValueError for
callers that only know about the builtin one.
"""

from typing import Any

__all__ = [
    "ReadableTimeError",
    "InvalidTimestampError",
]


class ReadableTimeError(Exception):
    """Base exception for all readable-time errors."""

    pass


class InvalidTimestampError(ReadableTimeError, ValueError):
    """Timestamp cannot be interpreted as a local instant.

    Raised when:
    - The value is neither a datetime, a date nor a real number
    - The number is NaN or infinite
    - The number is outside the platform's representable range

    Attributes:
        value: The rejected input.

    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value

"""Output mode options for readable_time().

Callers select an absolute rendering through FormatOptions.format. When the
field is unset the formatter produces relative phrases for the first month
and an abbreviated date afterwards.

Example:
    >>> FormatOptions(format="absolute-full").format
    <TimeFormat.ABSOLUTE_FULL: 'absolute-full'>
    >>> FormatOptions.from_value({"format": "sometimes"}).format is None
    True

"""

import logging
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

__all__ = ["TimeFormat", "FormatOptions"]


class TimeFormat(StrEnum):
    """Absolute output modes."""

    ABSOLUTE = "absolute"
    ABSOLUTE_FULL = "absolute-full"
    ABSOLUTE_SHORT = "absolute-short"

    def include_year(self, date_year: int, now_year: int) -> bool:
        """Whether the rendered date carries its year.

        ABSOLUTE shows the year only outside the current year, ABSOLUTE_FULL
        always shows it and ABSOLUTE_SHORT never does.
        """
        if self is TimeFormat.ABSOLUTE_FULL:
            return True
        if self is TimeFormat.ABSOLUTE_SHORT:
            return False
        return date_year != now_year


VALID_FORMATS: tuple[str, ...] = tuple(f.value for f in TimeFormat)


class FormatOptions(BaseModel):
    """Options accepted by readable_time().

    Attributes:
        format: Absolute output mode, or None for relative phrasing.
            Unrecognized values are dropped to None rather than rejected.

    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    format: TimeFormat | None = Field(
        default=None,
        description="Absolute output mode: absolute, absolute-full, absolute-short",
    )

    @field_validator("format", mode="before")
    @classmethod
    def ignore_unknown_format(cls, v: Any) -> Any:
        """Unknown format values fall through to relative mode."""
        if v is None or isinstance(v, TimeFormat):
            return v
        if isinstance(v, str) and v in VALID_FORMATS:
            return v
        logger.debug(
            "Ignoring unrecognized format %r (valid: %s)", v, ", ".join(VALID_FORMATS)
        )
        return None

    @classmethod
    def from_value(cls, value: Any) -> "FormatOptions":
        """Normalize the options argument of readable_time().

        Args:
            value: Existing options, a plain mapping such as
                {"format": "absolute"}, or None. Anything else carries no
                format and yields default options.

        Returns:
            FormatOptions instance.

        """
        if value is None:
            return cls()
        if isinstance(value, FormatOptions):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        logger.debug("Ignoring options of type %s, using defaults", type(value).__name__)
        return cls()

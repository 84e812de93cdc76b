"""Elapsed time classification.

Maps a number of elapsed seconds onto one of five buckets: just now,
minutes, hours, days, or beyond a month. The bucket is chosen from the raw
elapsed seconds; the magnitude shown in the phrase is rounded afterwards and
is never carried over into the next unit, so 3599 seconds reads
"60 minutes ago" rather than "An hour ago".

Example:
    >>> describe_elapsed(120)
    '2 minutes ago'
    >>> describe_elapsed(3600)
    'An hour ago'
    >>> classify_elapsed(40 * 86400).unit
    <TimeUnit.MONTH: 'month'>

"""

import logging
import math
from dataclasses import dataclass
from enum import StrEnum

from readable_time.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_MONTH,
)

logger = logging.getLogger(__name__)

__all__ = ["TimeUnit", "Bucket", "classify_elapsed", "describe_elapsed"]


class TimeUnit(StrEnum):
    """Unit a bucket is expressed in."""

    JUST_NOW = "just_now"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"


# Phrases for a magnitude of exactly one, keyed by unit
_SINGULAR: dict[TimeUnit, str] = {
    TimeUnit.MINUTE: "A minute ago",
    TimeUnit.HOUR: "An hour ago",
    TimeUnit.DAY: "A day ago",
}

# Upper bound (exclusive) and divisor for each relative unit, in order
_THRESHOLDS: list[tuple[int, int, TimeUnit]] = [
    (SECONDS_PER_HOUR, SECONDS_PER_MINUTE, TimeUnit.MINUTE),
    (SECONDS_PER_DAY, SECONDS_PER_HOUR, TimeUnit.HOUR),
    (SECONDS_PER_MONTH, SECONDS_PER_DAY, TimeUnit.DAY),
]


@dataclass(frozen=True)
class Bucket:
    """Classified elapsed time.

    Attributes:
        unit: Bucket unit.
        magnitude: Rounded count of units, None for JUST_NOW and MONTH.

    """

    unit: TimeUnit
    magnitude: int | None = None

    @property
    def phrase(self) -> str | None:
        """Relative phrase, or None when the caller must render a date."""
        if self.unit is TimeUnit.JUST_NOW:
            return "Just now"
        if self.unit is TimeUnit.MONTH:
            return None
        if self.magnitude == 1:
            return _SINGULAR[self.unit]
        return f"{self.magnitude} {self.unit.value}s ago"


def _round_half_up(value: float) -> int:
    # round() would give banker's rounding: 2.5 -> 2
    return math.floor(value + 0.5)


def classify_elapsed(seconds: float) -> Bucket:
    """Classify elapsed seconds into a bucket.

    Args:
        seconds: Elapsed seconds, possibly fractional. Negative values
            (a timestamp in the future) are treated as just now.

    Returns:
        Bucket with unit and rounded magnitude.

    """
    if seconds < 0:
        logger.debug("Timestamp is %.3fs in the future, treating as just now", -seconds)
        return Bucket(TimeUnit.JUST_NOW)

    if seconds < SECONDS_PER_MINUTE:
        return Bucket(TimeUnit.JUST_NOW)

    for upper, divisor, unit in _THRESHOLDS:
        if seconds < upper:
            return Bucket(unit, _round_half_up(seconds / divisor))

    return Bucket(TimeUnit.MONTH)


def describe_elapsed(seconds: float) -> str | None:
    """Return the relative phrase for elapsed seconds.

    Returns None once a month or more has elapsed.
    """
    return classify_elapsed(seconds).phrase

"""Human readable timestamps.

readable_time() tells how much time has elapsed between a timestamp and now:
"Just now", "A minute ago", "5 hours ago", "3 days ago". Once 30 days or more
have elapsed it switches to an abbreviated date, "23 Feb" for the current
year and "23 Feb 2015" for any other. The format option forces one of the
absolute renderings regardless of elapsed time.

Usage:
    from readable_time import readable_time

    readable_time(comment.created_at)
    readable_time(comment.created_at, {"format": "absolute-full"})

"""

import logging
import math
from collections.abc import Mapping
from datetime import date as date_type
from datetime import datetime, time
from numbers import Real
from typing import Any

from readable_time.absolute import render_absolute_date
from readable_time.buckets import classify_elapsed
from readable_time.clock import Clock, system_clock
from readable_time.exceptions import InvalidTimestampError
from readable_time.options import FormatOptions

logger = logging.getLogger(__name__)

__all__ = ["Timestamp", "readable_time", "to_local_datetime"]

Timestamp = datetime | date_type | float | int


def to_local_datetime(value: Any) -> datetime:
    """Convert a supported timestamp into a naive local datetime.

    Args:
        value: Naive datetime (taken as local time), aware datetime, date
            (taken as local midnight) or Unix timestamp in seconds.

    Returns:
        Naive datetime in platform local time.

    Raises:
        InvalidTimestampError: If value has an unsupported type, is not
            finite, or is outside the platform's representable range.

    """
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            return value.astimezone().replace(tzinfo=None)
        return value

    if isinstance(value, date_type):
        return datetime.combine(value, time())

    # bool is an int subclass but never a meaningful timestamp
    if isinstance(value, Real) and not isinstance(value, bool):
        seconds = float(value)
        if not math.isfinite(seconds):
            raise InvalidTimestampError(f"Timestamp is not finite: {value!r}", value=value)
        try:
            return datetime.fromtimestamp(seconds)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidTimestampError(
                f"Timestamp out of range: {value!r}", value=value
            ) from e

    raise InvalidTimestampError(
        f"Expected datetime, date or Unix timestamp, got {type(value).__name__}",
        value=value,
    )


def _epoch_seconds(value: Any, local: datetime) -> float:
    """Seconds since the Unix epoch for a timestamp already validated as local.

    Naive datetimes and dates count as local time. Elapsed time is measured
    between epoch values, so a span across a DST change keeps its real length.
    """
    if isinstance(value, datetime):
        source = value
    elif isinstance(value, date_type):
        source = local
    else:
        return float(value)
    try:
        return source.timestamp()
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidTimestampError(f"Timestamp out of range: {value!r}", value=value) from e


def readable_time(
    date: Timestamp,
    options: FormatOptions | Mapping[str, Any] | None = None,
    *,
    clock: Clock | None = None,
) -> str:
    """Generate a human readable timestamp for date relative to now.

    Args:
        date: Instant to describe. See to_local_datetime() for accepted types.
        options: FormatOptions or mapping with an optional "format" key.
            Unrecognized format values, and options of any other type,
            fall through to relative mode.
        clock: Source of the current time (defaults to the system clock).
            Read once per call.

    Returns:
        String like "Just now", "2 minutes ago", "An hour ago", "3 days ago",
        "23 Feb" or "23 Feb 2015".

    Raises:
        InvalidTimestampError: If date cannot be interpreted as an instant.

    Examples:
        >>> from datetime import datetime
        >>> now = datetime(2024, 6, 15, 12, 0, 0)
        >>> readable_time(datetime(2024, 6, 15, 11, 58), clock=lambda: now)
        '2 minutes ago'
        >>> readable_time(datetime(2022, 5, 23), clock=lambda: now)
        '23 May 2022'

    """
    current = (clock or system_clock)()
    now = to_local_datetime(current)
    moment = to_local_datetime(date)
    opts = FormatOptions.from_value(options)

    if opts.format is not None:
        return render_absolute_date(moment, opts.format.include_year(moment.year, now.year))

    elapsed = _epoch_seconds(current, now) - _epoch_seconds(date, moment)
    phrase = classify_elapsed(elapsed).phrase
    if phrase is None:
        # A month or more: fall back to the date, year only outside the current one
        return render_absolute_date(moment, moment.year != now.year)
    return phrase

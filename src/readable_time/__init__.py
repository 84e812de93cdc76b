"""Human readable relative timestamps.

This package turns a timestamp into a short description of how long ago it
happened ("Just now", "2 minutes ago", "An hour ago", "3 days ago"), falling
back to an abbreviated date ("23 Feb", "23 Feb 2015") after 30 days.

Usage:
    from readable_time import readable_time, TimeFormat

    readable_time(post.created_at)
    readable_time(post.created_at, {"format": TimeFormat.ABSOLUTE})
"""

from readable_time.absolute import MONTH_ABBREVIATIONS, render_absolute_date
from readable_time.buckets import Bucket, TimeUnit, classify_elapsed, describe_elapsed
from readable_time.clock import Clock, system_clock
from readable_time.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    SECONDS_PER_MONTH,
)
from readable_time.exceptions import InvalidTimestampError, ReadableTimeError
from readable_time.formatter import Timestamp, readable_time, to_local_datetime
from readable_time.options import FormatOptions, TimeFormat

__all__ = [
    "readable_time",
    "to_local_datetime",
    "Timestamp",
    "FormatOptions",
    "TimeFormat",
    "Clock",
    "system_clock",
    "Bucket",
    "TimeUnit",
    "classify_elapsed",
    "describe_elapsed",
    "MONTH_ABBREVIATIONS",
    "render_absolute_date",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_MONTH",
    "ReadableTimeError",
    "InvalidTimestampError",
]

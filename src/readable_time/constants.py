"""Duration constants shared by the bucket classifier and the formatter.

A month is a fixed 30-day span, not a calendar month.
"""

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * 60
SECONDS_PER_DAY = SECONDS_PER_HOUR * 24
SECONDS_PER_MONTH = SECONDS_PER_DAY * 30

__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "SECONDS_PER_MONTH",
]

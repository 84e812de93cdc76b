"""Absolute date rendering ("23 Feb", "5 May 2015")."""

from datetime import date as date_type

__all__ = ["MONTH_ABBREVIATIONS", "render_absolute_date"]

# Fixed English table, indexed by zero-based month; strftime("%b") follows the locale
MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def render_absolute_date(date: date_type, include_year: bool) -> str:
    """Render day of month and abbreviated month, optionally with the year.

    Args:
        date: Date or datetime to render.
        include_year: Append the full year.

    Returns:
        String like "5 Jan" or "23 May 2022".

    """
    result = f"{date.day} {MONTH_ABBREVIATIONS[date.month - 1]}"
    if include_year:
        result += f" {date.year}"
    return result

"""Tests for absolute date rendering."""

from datetime import date, datetime

import pytest

from readable_time.absolute import MONTH_ABBREVIATIONS, render_absolute_date


class TestRenderAbsoluteDate:
    """Test cases for render_absolute_date function."""

    def test_without_year(self) -> None:
        """Day and abbreviated month only."""
        assert render_absolute_date(datetime(2024, 2, 23, 8, 30), False) == "23 Feb"

    def test_with_year(self) -> None:
        """Year is appended after the month."""
        assert render_absolute_date(datetime(2015, 5, 5), True) == "5 May 2015"

    def test_day_not_zero_padded(self) -> None:
        """Single digit days have no leading zero."""
        assert render_absolute_date(datetime(2024, 1, 1), False) == "1 Jan"

    def test_accepts_plain_date(self) -> None:
        """A date object renders like a datetime."""
        assert render_absolute_date(date(2022, 5, 23), True) == "23 May 2022"

    @pytest.mark.parametrize("month", range(1, 13))
    def test_month_table(self, month: int) -> None:
        """Every month maps to its zero-indexed abbreviation."""
        expected = f"10 {MONTH_ABBREVIATIONS[month - 1]}"
        assert render_absolute_date(datetime(2024, month, 10), False) == expected

    def test_month_abbreviations(self) -> None:
        """Fixed English table, independent of locale."""
        assert MONTH_ABBREVIATIONS == (
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        )  # fmt: skip

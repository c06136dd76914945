"""Tests for LNMP parsing, leap years and month lengths."""

import calendar

import pytest

from naegele.dates.models import CalendarDate
from naegele.dates.parsers import days_in_month, is_leap_year, is_valid_date, parse_date
from naegele.errors import (
    ErrorKind,
    InvalidDateError,
    InvalidFormatError,
    NullOrEmptyInputError,
)


class TestIsLeapYear:
    """Test Gregorian leap year rule."""

    @pytest.mark.parametrize("year", [2000, 2400, 2024, 1904, 1996])
    def test_leap_years(self, year):
        assert is_leap_year(year) is True

    @pytest.mark.parametrize("year", [1900, 2100, 2023, 2200, 2019])
    def test_common_years(self, year):
        assert is_leap_year(year) is False


class TestDaysInMonth:
    """Test month length lookup."""

    def test_matches_gregorian_calendar(self):
        """Every month from 1900 to 2100 should match the stdlib calendar."""
        for year in range(1900, 2101):
            for month in range(1, 13):
                assert days_in_month(month, year) == calendar.monthrange(year, month)[1]

    def test_february_in_leap_year(self):
        assert days_in_month(2, 2024) == 29
        assert days_in_month(2, 2000) == 29

    def test_february_in_common_year(self):
        assert days_in_month(2, 2023) == 28
        assert days_in_month(2, 1900) == 28

    @pytest.mark.parametrize("month", [0, 13, -1, 100])
    def test_invalid_month_returns_zero(self, month):
        assert days_in_month(month, 2024) == 0


class TestIsValidDate:
    """Test range validation of parsed fields."""

    def test_valid_dates(self):
        assert is_valid_date(29, 2, 2024) is True
        assert is_valid_date(1, 1, 1900) is True
        assert is_valid_date(31, 12, 2100) is True

    def test_year_out_of_range(self):
        assert is_valid_date(31, 12, 1899) is False
        assert is_valid_date(1, 1, 2101) is False

    def test_custom_year_range(self):
        assert is_valid_date(1, 1, 1850, min_year=1800) is True
        assert is_valid_date(1, 1, 2050, max_year=2030) is False

    def test_day_beyond_month_length(self):
        assert is_valid_date(29, 2, 2023) is False
        assert is_valid_date(31, 4, 2024) is False
        assert is_valid_date(0, 1, 2024) is False


class TestParseDate:
    """Test parse_date function."""

    def test_parses_valid_date(self):
        assert parse_date("01/01/2024") == CalendarDate(day=1, month=1, year=2024)

    def test_parses_leap_day(self):
        assert parse_date("29/02/2024") == CalendarDate(day=29, month=2, year=2024)

    @pytest.mark.parametrize("text", [None, ""])
    def test_missing_input(self, text):
        with pytest.raises(NullOrEmptyInputError) as exc_info:
            parse_date(text)
        assert exc_info.value.kind == ErrorKind.NULL_OR_EMPTY_INPUT

    @pytest.mark.parametrize("text", [
        "2024/01/01",
        "1/1/2024",
        "01-01-2024",
        "01/01/24",
        "01/01/20245",
        " 1/01/2024",
        "+1/01/2024",
        "aa/01/2024",
        "01/01/2O24",
        "01/01/２０２４",
    ])
    def test_invalid_format(self, text):
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_date(text)
        assert exc_info.value.kind == ErrorKind.INVALID_FORMAT
        assert exc_info.value.expected_format == "dd/mm/yyyy"

    def test_non_string_input(self):
        with pytest.raises(InvalidFormatError):
            parse_date(20240101)

    @pytest.mark.parametrize("text", [
        "31/02/2024",
        "29/02/2023",
        "00/01/2024",
        "01/13/2024",
        "01/00/2024",
        "31/04/2024",
        "31/12/1899",
        "01/01/2101",
    ])
    def test_invalid_date(self, text):
        with pytest.raises(InvalidDateError) as exc_info:
            parse_date(text)
        assert exc_info.value.kind == ErrorKind.INVALID_DATE

    def test_invalid_date_keeps_fields(self):
        with pytest.raises(InvalidDateError) as exc_info:
            parse_date("31/02/2024")
        assert (exc_info.value.day, exc_info.value.month, exc_info.value.year) == (31, 2, 2024)

    def test_year_range_boundaries(self):
        assert parse_date("01/01/1900").year == 1900
        assert parse_date("31/12/2100").year == 2100

    def test_custom_year_range(self):
        assert parse_date("01/01/1850", min_year=1800).year == 1850
        with pytest.raises(InvalidDateError):
            parse_date("01/01/2050", max_year=2030)

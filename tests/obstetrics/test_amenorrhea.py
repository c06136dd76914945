"""Tests for Weeks of Amenorrhea computation."""

from datetime import datetime
from unittest.mock import patch

import pytest

from naegele.dates.models import CalendarDate, GestationalAge
from naegele.errors import (
    DateConversionError,
    ErrorKind,
    FutureDateError,
    SystemTimeUnavailableError,
)
from naegele.obstetrics.amenorrhea import format_gestational_age, gestational_age, lnmp_timestamp
from naegele.utils.time import SECONDS_PER_DAY, local_midnight_timestamp


class TestGestationalAge:
    """Test gestational_age with an injected clock."""

    def test_exactly_ten_weeks(self, winter_lnmp, noon_after):
        age = gestational_age(winter_lnmp, noon_after(winter_lnmp, 70))
        assert age == GestationalAge(weeks=10, days=0)
        assert format_gestational_age(age) == "10 weeks"

    def test_ten_weeks_three_days(self, winter_lnmp, noon_after):
        age = gestational_age(winter_lnmp, noon_after(winter_lnmp, 73))
        assert format_gestational_age(age) == "10 weeks, 3 days"

    def test_one_day(self, winter_lnmp, noon_after):
        age = gestational_age(winter_lnmp, noon_after(winter_lnmp, 1))
        assert format_gestational_age(age) == "0 weeks, 1 day"

    def test_one_week(self, winter_lnmp, noon_after):
        age = gestational_age(winter_lnmp, noon_after(winter_lnmp, 7))
        assert format_gestational_age(age) == "1 week"

    def test_same_day_is_zero_weeks(self, winter_lnmp, noon_after):
        age = gestational_age(winter_lnmp, noon_after(winter_lnmp, 0))
        assert format_gestational_age(age) == "0 weeks"

    def test_exact_midnight_is_not_future(self, winter_lnmp):
        now = datetime(winter_lnmp.year, winter_lnmp.month, winter_lnmp.day)
        assert gestational_age(winter_lnmp, now) == GestationalAge(weeks=0, days=0)

    def test_partial_day_is_floored(self, winter_lnmp):
        start = local_midnight_timestamp(winter_lnmp.year, winter_lnmp.month, winter_lnmp.day)
        age = gestational_age(winter_lnmp, start + 2 * SECONDS_PER_DAY - 1)
        assert age.total_days == 1

    def test_accepts_posix_timestamp(self, winter_lnmp):
        start = local_midnight_timestamp(winter_lnmp.year, winter_lnmp.month, winter_lnmp.day)
        age = gestational_age(winter_lnmp, start + 73 * SECONDS_PER_DAY)
        assert (age.weeks, age.days) == (10, 3)

    def test_reads_wall_clock_when_now_omitted(self, winter_lnmp):
        start = local_midnight_timestamp(winter_lnmp.year, winter_lnmp.month, winter_lnmp.day)
        with patch("naegele.utils.time.current_timestamp", return_value=start + 14 * SECONDS_PER_DAY):
            age = gestational_age(winter_lnmp)
        assert format_gestational_age(age) == "2 weeks"

    def test_is_idempotent_for_fixed_clock(self, winter_lnmp, noon_after):
        now = noon_after(winter_lnmp, 100)
        assert gestational_age(winter_lnmp, now) == gestational_age(winter_lnmp, now)


class TestGestationalAgeErrors:
    """Test failure modes of gestational_age."""

    def test_future_lnmp(self, winter_lnmp):
        with pytest.raises(FutureDateError) as exc_info:
            gestational_age(winter_lnmp, datetime(2023, 11, 30, 12, 0, 0))
        assert exc_info.value.kind == ErrorKind.FUTURE_DATE
        assert exc_info.value.elapsed_seconds < 0

    def test_clock_unavailable(self, winter_lnmp):
        with patch("naegele.utils.time.current_timestamp", side_effect=OSError("clock")):
            with pytest.raises(SystemTimeUnavailableError) as exc_info:
                gestational_age(winter_lnmp)
        assert exc_info.value.kind == ErrorKind.SYSTEM_TIME_UNAVAILABLE

    def test_date_conversion_failure(self, winter_lnmp):
        with patch("naegele.obstetrics.amenorrhea.local_midnight_timestamp",
                   side_effect=OverflowError("out of range")):
            with pytest.raises(DateConversionError) as exc_info:
                lnmp_timestamp(winter_lnmp)
        assert exc_info.value.kind == ErrorKind.DATE_CONVERSION
        assert exc_info.value.context["lnmp"] == "01/12/2023"

    def test_conversion_checked_before_clock(self):
        lnmp = CalendarDate(day=1, month=1, year=2024)
        with patch("naegele.obstetrics.amenorrhea.local_midnight_timestamp",
                   side_effect=OSError("mktime")), \
             patch("naegele.utils.time.current_timestamp") as mock_clock:
            with pytest.raises(DateConversionError):
                gestational_age(lnmp)
        mock_clock.assert_not_called()

    def test_string_now_is_a_type_error(self, winter_lnmp):
        with pytest.raises(TypeError):
            gestational_age(winter_lnmp, "1700000000")

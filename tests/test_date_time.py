"""Tests for DateTime parsing, formatting and arithmetic."""

import time
from datetime import datetime, timedelta, timezone

import pytest

from rfc5322.models.date_time import DateComponents, DateTime
from rfc5322.models.errors import (
    DateTimeError,
    DayOutOfRangeError,
    HourOutOfRangeError,
    InvalidDateComponentsError,
    InvalidDateFormatError,
    InvalidDayError,
    InvalidDayNameError,
    InvalidEpochSecondsError,
    InvalidHourError,
    InvalidMinuteError,
    InvalidMonthError,
    InvalidSecondError,
    InvalidTimeError,
    InvalidTimezoneError,
    InvalidTimezoneOffsetError,
    InvalidYearError,
    MonthOutOfRangeError,
    SecondOutOfRangeError,
    WeekdayMismatchError,
    WeekdayOutOfRangeError,
)

NEW_YEAR_2021 = 1609459200


class TestDateComponents:
    """Test component range validation."""

    def test_valid_components(self):
        c = DateComponents(2024, 2, 29, 23, 59, 60, 4)
        assert c.day == 29
        assert c.second == 60

    @pytest.mark.parametrize(
        "args,error",
        [
            ((2021, 13, 1, 0, 0, 0, 0), MonthOutOfRangeError),
            ((2021, 2, 29, 0, 0, 0, 0), DayOutOfRangeError),
            ((2021, 4, 31, 0, 0, 0, 0), DayOutOfRangeError),
            ((2021, 1, 1, 24, 0, 0, 0), HourOutOfRangeError),
            ((2021, 1, 1, 0, 0, 61, 0), SecondOutOfRangeError),
            ((2021, 1, 1, 0, 0, 0, 7), WeekdayOutOfRangeError),
        ],
    )
    def test_out_of_range(self, args, error):
        with pytest.raises(error):
            DateComponents(*args)


class TestParse:
    """Test parsing RFC 5322 date-time strings."""

    def test_parse_epoch_value(self):
        dt = DateTime.parse("Fri, 01 Jan 2021 00:00:00 +0000")
        assert dt.epoch_seconds == NEW_YEAR_2021
        assert dt.timezone_offset_seconds == 0

    def test_weekday_mismatch(self):
        with pytest.raises(WeekdayMismatchError) as exc_info:
            DateTime.parse("Mon, 01 Jan 2021 12:00:00 +0000")

        assert exc_info.value.expected == "Mon"
        assert exc_info.value.actual == "Fri"

    def test_negative_offset(self):
        """Local wall-clock time minus the offset gives UTC."""
        dt = DateTime.parse("Tue, 15 Nov 1994 08:12:31 -0500")
        assert dt.epoch_seconds == 784905151
        assert dt.timezone_offset_seconds == -18000
        assert dt.components.hour == 8

    def test_optional_seconds(self):
        dt = DateTime.parse("Fri, 01 Jan 2021 10:30 +0100")
        assert dt.epoch_seconds == NEW_YEAR_2021 + 9 * 3600 + 30 * 60
        assert str(dt) == "Fri, 01 Jan 2021 10:30:00 +0100"

    def test_extra_spaces_and_trailing_comment(self):
        assert DateTime.parse("Fri,  01 Jan 2021  00:00:00 +0000").epoch_seconds == NEW_YEAR_2021
        assert DateTime.parse("Fri, 01 Jan 2021 00:00:00 +0000 (UTC)").epoch_seconds == NEW_YEAR_2021

    def test_parse_bytes(self):
        assert DateTime.parse_bytes(b"Fri, 01 Jan 2021 00:00:00 +0000").epoch_seconds == NEW_YEAR_2021

    def test_leap_second(self):
        """23:59:60 is accepted and checked against the day it was written on."""
        dt = DateTime.parse("Sat, 31 Dec 2016 23:59:60 +0000")
        assert dt == DateTime.from_components(2017, 1, 1)

    @pytest.mark.parametrize(
        "value,error",
        [
            ("Fri, 01 Jan 2021", InvalidDateFormatError),
            ("", InvalidDateFormatError),
            ("Fry, 01 Jan 2021 00:00:00 +0000", InvalidDayNameError),
            ("Fri, 32 Jan 2021 00:00:00 +0000", InvalidDayError),
            ("Fri, xx Jan 2021 00:00:00 +0000", InvalidDayError),
            ("Fri, 01 January 2021 00:00:00 +0000", InvalidMonthError),
            ("Fri, 01 jan 2021 00:00:00 +0000", InvalidMonthError),
            ("Fri, 01 Jan 1899 00:00:00 +0000", InvalidYearError),
            ("Fri, 01 Jan 2021 0000 +0000", InvalidTimeError),
            ("Fri, 01 Jan 2021 00:00:00:00 +0000", InvalidTimeError),
            ("Fri, 01 Jan 2021 24:00:00 +0000", InvalidHourError),
            ("Fri, 01 Jan 2021 00:60:00 +0000", InvalidMinuteError),
            ("Fri, 01 Jan 2021 00:00:61 +0000", InvalidSecondError),
            ("Fri, 01 Jan 2021 00:00:00 0000", InvalidTimezoneError),
            ("Fri, 01 Jan 2021 00:00:00 GMT", InvalidTimezoneError),
            ("Fri, 01 Jan 2021 00:00:00 +2400", InvalidTimezoneError),
            ("Fri, 01 Jan 2021 00:00:00 +0060", InvalidTimezoneError),
        ],
    )
    def test_invalid_fields(self, value, error):
        with pytest.raises(error):
            DateTime.parse(value)

    def test_errors_share_base(self):
        with pytest.raises(DateTimeError):
            DateTime.parse("Fri, 01 Jan 2021 99:00:00 +0000")

    def test_impossible_date_wraps_component_error(self):
        with pytest.raises(InvalidDateComponentsError) as exc_info:
            DateTime.parse("Sun, 31 Feb 2021 00:00:00 +0000")

        assert isinstance(exc_info.value.error, DayOutOfRangeError)
        assert exc_info.value.__cause__ is exc_info.value.error


class TestFormat:
    """Test rendering to the RFC 5322 format."""

    def test_format_utc(self):
        assert str(DateTime(NEW_YEAR_2021)) == "Fri, 01 Jan 2021 00:00:00 +0000"
        assert DateTime(NEW_YEAR_2021).to_bytes() == b"Fri, 01 Jan 2021 00:00:00 +0000"

    def test_format_negative_offset(self):
        assert DateTime(0, -18000).format() == "Wed, 31 Dec 1969 19:00:00 -0500"

    def test_format_half_hour_offset(self):
        assert DateTime(0, 19800).format() == "Thu, 01 Jan 1970 05:30:00 +0530"

    def test_round_trip(self):
        """Formatting then parsing yields an equal instant."""
        for epoch in range(-2208902400, 4102444800, 98765432):
            for offset in (0, 3600, -18000, 19800):
                dt = DateTime(epoch, offset)
                parsed = DateTime.parse(dt.format())
                assert parsed == dt
                assert parsed.timezone_offset_seconds == offset


class TestConstruction:
    """Test construction from components and standard library values."""

    def test_from_components_is_utc(self):
        dt = DateTime.from_components(2021, 1, 1, timezone_offset_seconds=3600)
        assert dt.epoch_seconds == NEW_YEAR_2021
        assert str(dt) == "Fri, 01 Jan 2021 01:00:00 +0100"

    def test_from_components_validates(self):
        with pytest.raises(MonthOutOfRangeError):
            DateTime.from_components(2021, 13, 1)
        with pytest.raises(DayOutOfRangeError):
            DateTime.from_components(2021, 2, 29)
        with pytest.raises(HourOutOfRangeError):
            DateTime.from_components(2021, 1, 1, 24)

    def test_components_local_view(self):
        c = DateTime(0, -18000).components
        assert (c.year, c.month, c.day, c.hour, c.minute, c.second) == (1969, 12, 31, 19, 0, 0)
        assert c.weekday == 3

    def test_from_aware_datetime(self):
        value = datetime(2021, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1)))
        dt = DateTime.from_datetime(value)
        assert dt.epoch_seconds == NEW_YEAR_2021
        assert dt.timezone_offset_seconds == 3600

    def test_from_naive_datetime_is_utc(self):
        dt = DateTime.from_datetime(datetime(2021, 1, 1))
        assert dt.epoch_seconds == NEW_YEAR_2021
        assert dt.timezone_offset_seconds == 0

    def test_to_datetime(self):
        value = DateTime(NEW_YEAR_2021, 3600).to_datetime()
        assert value == datetime(2021, 1, 1, tzinfo=timezone.utc)
        assert value.utcoffset() == timedelta(hours=1)
        assert value.hour == 1

    def test_now(self):
        dt = DateTime.now(3600)
        assert dt.timezone_offset_seconds == 3600
        assert abs(dt.epoch_seconds - int(time.time())) <= 2


class TestArithmetic:
    """Test derived values and comparisons."""

    def test_equality_ignores_offset(self):
        assert DateTime(0, 3600) == DateTime(0)
        assert hash(DateTime(0, 3600)) == hash(DateTime(0))
        assert DateTime(0) != DateTime(1)

    def test_ordering(self):
        assert DateTime(0) < DateTime(1)
        assert DateTime(5, -3600) > DateTime(4, 3600)
        assert sorted([DateTime(3), DateTime(1), DateTime(2)]) == [DateTime(1), DateTime(2), DateTime(3)]

    def test_adding_and_distance(self):
        dt = DateTime(NEW_YEAR_2021, 3600)
        later = dt.adding_seconds(90)
        assert later.epoch_seconds == NEW_YEAR_2021 + 90
        assert later.timezone_offset_seconds == 3600
        assert dt.distance_to(later) == 90
        assert later.distance_to(dt) == -90
        assert later.subtracting_seconds(90) == dt

    def test_with_timezone(self):
        dt = DateTime(NEW_YEAR_2021).with_timezone(-18000)
        assert dt == DateTime(NEW_YEAR_2021)
        assert str(dt) == "Thu, 31 Dec 2020 19:00:00 -0500"

    def test_start_and_end_of_local_day(self):
        dt = DateTime.from_components(2021, 1, 1, 3, timezone_offset_seconds=-18000)
        assert str(dt.start_of_day()) == "Thu, 31 Dec 2020 00:00:00 -0500"
        assert dt.start_of_day().epoch_seconds == 1609390800
        assert str(dt.end_of_day()) == "Thu, 31 Dec 2020 23:59:59 -0500"

    def test_replace(self):
        dt = DateTime(NEW_YEAR_2021).replace(year=2020, month=2, day=29)
        assert str(dt) == "Sat, 29 Feb 2020 00:00:00 +0000"

    def test_replace_validates(self):
        with pytest.raises(DayOutOfRangeError):
            DateTime(NEW_YEAR_2021).replace(month=2, day=30)


class TestValidation:
    """Test epoch and offset validation on construction."""

    @pytest.mark.parametrize("offset", [30, 3601, -59])
    def test_offset_not_whole_minutes(self, offset):
        with pytest.raises(InvalidTimezoneOffsetError) as exc_info:
            DateTime(0, offset)

        assert exc_info.value.offset == offset

    @pytest.mark.parametrize("offset", [86400, -86400, 86460])
    def test_offset_out_of_range(self, offset):
        with pytest.raises(InvalidTimezoneOffsetError):
            DateTime(0, offset)

    def test_widest_offsets(self):
        assert DateTime(0, 86340).format() == "Thu, 01 Jan 1970 23:59:00 +2359"
        assert DateTime(0, -86340).format() == "Wed, 31 Dec 1969 00:01:00 -2359"

    @pytest.mark.parametrize("epoch", [1.5, "0", None, True])
    def test_epoch_must_be_integer(self, epoch):
        with pytest.raises(InvalidEpochSecondsError):
            DateTime(epoch)

    def test_offset_must_be_integer(self):
        with pytest.raises(InvalidTimezoneOffsetError):
            DateTime(0, 3600.0)

    def test_with_timezone_validates(self):
        with pytest.raises(InvalidTimezoneOffsetError):
            DateTime(NEW_YEAR_2021).with_timezone(30)

    def test_errors_share_base(self):
        with pytest.raises(DateTimeError):
            DateTime(0, 90000)

    @pytest.mark.parametrize("day_name", ["Fri,xyz", "Fri,,", ",Fri"])
    def test_day_name_token_exact(self, day_name):
        with pytest.raises(InvalidDayNameError) as exc_info:
            DateTime.parse(f"{day_name} 01 Jan 2021 00:00:00 +0000")

        assert exc_info.value.value == day_name

    def test_day_name_without_comma(self):
        assert DateTime.parse("Fri 01 Jan 2021 00:00:00 +0000").epoch_seconds == NEW_YEAR_2021

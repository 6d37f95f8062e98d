"""RFC 5322 date-time model (section 3.3)."""

import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import total_ordering
from typing import Optional

from rfc5322.utils import ascii
from rfc5322.utils.calendar import (
    DAY_NAMES,
    MONTH_NAMES,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    date_from_days,
    days_in_month,
    days_since_epoch,
    weekday,
)

from .base import ByteParseable
from .errors import (
    DateComponentsError,
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
    MinuteOutOfRangeError,
    MonthOutOfRangeError,
    SecondOutOfRangeError,
    WeekdayMismatchError,
    WeekdayOutOfRangeError,
)

MIN_YEAR = 1900

# +2359 / -2359, the widest offset the zone token can express
MAX_TIMEZONE_OFFSET_SECONDS = 23 * SECONDS_PER_HOUR + 59 * SECONDS_PER_MINUTE


@dataclass(frozen=True)
class DateComponents:
    """
    Calendar-valid broken-down date and time.

    Attributes:
        year: Gregorian year
        month: Month (1-12)
        day: Day of month, valid for month and year
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-60, 60 being a leap second)
        weekday: Day of week (0=Sunday, 6=Saturday)
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: int

    def __post_init__(self):
        """Validate ranges; day is checked against the month and leap year."""
        if not 1 <= self.month <= 12:
            raise MonthOutOfRangeError(self.month)
        if not 1 <= self.day <= days_in_month(self.month, self.year):
            raise DayOutOfRangeError(self.day, self.month, self.year)
        if not 0 <= self.hour <= 23:
            raise HourOutOfRangeError(self.hour)
        if not 0 <= self.minute <= 59:
            raise MinuteOutOfRangeError(self.minute)
        if not 0 <= self.second <= 60:
            raise SecondOutOfRangeError(self.second)
        if not 0 <= self.weekday <= 6:
            raise WeekdayOutOfRangeError(self.weekday)


@total_ordering
@dataclass(frozen=True, eq=False)
class DateTime(ByteParseable):
    """
    An instant plus the timezone offset it is displayed in.

    Equality, hashing and ordering use only epoch_seconds; the offset is a
    display concern.

    Attributes:
        epoch_seconds: Seconds since 1970-01-01T00:00:00Z
        timezone_offset_seconds: Offset east of UTC (e.g. -18000 for -0500)
    """

    epoch_seconds: int
    timezone_offset_seconds: int = 0

    def __post_init__(self):
        """
        Validate the instant and offset.

        Raises:
            InvalidEpochSecondsError: If epoch_seconds is not an integer
            InvalidTimezoneOffsetError: If the offset cannot be written as +HHMM
        """
        if not _is_integer(self.epoch_seconds):
            raise InvalidEpochSecondsError(self.epoch_seconds)
        validate_timezone_offset(self.timezone_offset_seconds)

    def __eq__(self, other):
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.epoch_seconds == other.epoch_seconds

    def __lt__(self, other):
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.epoch_seconds < other.epoch_seconds

    def __hash__(self):
        return hash(self.epoch_seconds)

    # ------------------------------------------------------------------
    # Construction

    @classmethod
    def from_components(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        timezone_offset_seconds: int = 0,
    ) -> "DateTime":
        """
        Create a date-time from validated calendar components.

        Components are interpreted in UTC; the offset only changes how the
        value is displayed. A second of 60 lands on the following second.

        Raises:
            DateComponentsError: If any component is out of range
        """
        _validate_fields(year, month, day, hour, minute, second)
        epoch = _epoch_from_fields(year, month, day, hour, minute, second)
        return cls(epoch, timezone_offset_seconds)

    @classmethod
    def now(cls, timezone_offset_seconds: int = 0) -> "DateTime":
        """Current time, truncated to whole seconds."""
        return cls(time.time_ns() // 1_000_000_000, timezone_offset_seconds)

    @classmethod
    def from_datetime(cls, value: datetime) -> "DateTime":
        """
        Convert a standard library datetime.

        Naive datetimes are taken as UTC. Sub-second precision is dropped.
        """
        offset = value.utcoffset()
        offset_seconds = 0 if offset is None else offset.days * SECONDS_PER_DAY + offset.seconds

        local_epoch = _epoch_from_fields(
            value.year, value.month, value.day, value.hour, value.minute, value.second
        )
        return cls(local_epoch - offset_seconds, offset_seconds)

    def to_datetime(self) -> datetime:
        """Aware datetime for the same instant in this value's offset."""
        tz = timezone(timedelta(seconds=self.timezone_offset_seconds))
        c = self.components
        return datetime(c.year, c.month, c.day, c.hour, c.minute, c.second, tzinfo=tz)

    # ------------------------------------------------------------------
    # Components

    @property
    def components(self) -> DateComponents:
        """Calendar components of the local (offset-applied) view."""
        local = self.epoch_seconds + self.timezone_offset_seconds
        days, seconds_of_day = divmod(local, SECONDS_PER_DAY)
        year, month, day = date_from_days(days)
        hour, remainder = divmod(seconds_of_day, SECONDS_PER_HOUR)
        minute, second = divmod(remainder, SECONDS_PER_MINUTE)

        return DateComponents(
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            weekday=weekday(year, month, day),
        )

    # ------------------------------------------------------------------
    # Derived values

    def adding_seconds(self, seconds: int) -> "DateTime":
        return DateTime(self.epoch_seconds + seconds, self.timezone_offset_seconds)

    def subtracting_seconds(self, seconds: int) -> "DateTime":
        return self.adding_seconds(-seconds)

    def distance_to(self, other: "DateTime") -> int:
        """Seconds from this instant to other; positive if other is later."""
        return other.epoch_seconds - self.epoch_seconds

    def with_timezone(self, offset_seconds: int) -> "DateTime":
        """Same instant displayed in another offset."""
        return DateTime(self.epoch_seconds, offset_seconds)

    def start_of_day(self) -> "DateTime":
        """00:00:00 of the local day in this value's offset."""
        return self.replace(hour=0, minute=0, second=0)

    def end_of_day(self) -> "DateTime":
        """23:59:59 of the local day in this value's offset."""
        return self.replace(hour=23, minute=59, second=59)

    def replace(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        hour: Optional[int] = None,
        minute: Optional[int] = None,
        second: Optional[int] = None,
    ) -> "DateTime":
        """
        Change local wall-clock components, keeping the offset.

        Raises:
            DateComponentsError: If the resulting components are invalid
        """
        current = self.components
        fields = (
            current.year if year is None else year,
            current.month if month is None else month,
            current.day if day is None else day,
            current.hour if hour is None else hour,
            current.minute if minute is None else minute,
            current.second if second is None else second,
        )
        _validate_fields(*fields)
        local_epoch = _epoch_from_fields(*fields)
        return DateTime(local_epoch - self.timezone_offset_seconds, self.timezone_offset_seconds)

    # ------------------------------------------------------------------
    # Wire format

    def format(self) -> str:
        """Render as "Dow, DD Mon YYYY HH:MM:SS +HHMM"."""
        c = self.components

        offset = self.timezone_offset_seconds
        sign = "+" if offset >= 0 else "-"
        offset_hours, offset_rest = divmod(abs(offset), SECONDS_PER_HOUR)
        offset_minutes = offset_rest // SECONDS_PER_MINUTE

        return (
            f"{DAY_NAMES[c.weekday]}, {c.day:02d} {MONTH_NAMES[c.month - 1]} {c.year:04d} "
            f"{c.hour:02d}:{c.minute:02d}:{c.second:02d} "
            f"{sign}{offset_hours:02d}{offset_minutes:02d}"
        )

    def to_bytes(self) -> bytes:
        return self.format().encode("ascii")

    @classmethod
    def parse_bytes(cls, data: bytes) -> "DateTime":
        """
        Parse "Dow, DD Mon YYYY HH:MM[:SS] +HHMM".

        Fields are validated in order (day name, day, month, year, hour,
        minute, second, zone). The weekday of the resulting local date must
        match the day name.

        Raises:
            DateTimeError: Subclass naming the field that failed
        """
        parts = [part for part in data.split(b" ") if part]
        if len(parts) < 6:
            raise InvalidDateFormatError(
                f"expected at least 6 space-separated fields, got {len(parts)}"
            )

        tokens = [ascii.decode_text(part) for part in parts]

        day_name = tokens[0][:-1] if tokens[0].endswith(",") else tokens[0]
        if day_name not in DAY_NAMES:
            raise InvalidDayNameError(tokens[0])
        expected_weekday = DAY_NAMES.index(day_name)

        day = _parse_number(tokens[1])
        if day is None or not 1 <= day <= 31:
            raise InvalidDayError(tokens[1])

        if tokens[2] not in MONTH_NAMES:
            raise InvalidMonthError(tokens[2])
        month = MONTH_NAMES.index(tokens[2]) + 1

        year = _parse_number(tokens[3])
        if year is None or year < MIN_YEAR:
            raise InvalidYearError(tokens[3])

        time_parts = tokens[4].split(":")
        if not 2 <= len(time_parts) <= 3:
            raise InvalidTimeError(tokens[4])

        hour = _parse_number(time_parts[0])
        if hour is None or not 0 <= hour <= 23:
            raise InvalidHourError(time_parts[0])

        minute = _parse_number(time_parts[1])
        if minute is None or not 0 <= minute <= 59:
            raise InvalidMinuteError(time_parts[1])

        second = 0
        if len(time_parts) == 3:
            second = _parse_number(time_parts[2])
            if second is None or not 0 <= second <= 60:
                raise InvalidSecondError(time_parts[2])

        offset = _parse_timezone(tokens[5])

        try:
            local = cls.from_components(year, month, day, hour, minute, second)
        except DateComponentsError as e:
            raise InvalidDateComponentsError(e) from e

        result = cls(local.epoch_seconds - offset, offset)

        # A leap second rolls the epoch into the next day at 23:59:60; check
        # the weekday of the second it was written against
        check = result.subtracting_seconds(1) if second == 60 else result
        actual_weekday = check.components.weekday
        if actual_weekday != expected_weekday:
            raise WeekdayMismatchError(DAY_NAMES[expected_weekday], DAY_NAMES[actual_weekday])

        return result


def validate_timezone_offset(offset) -> int:
    """
    Check that an offset is whole minutes within +/-23:59.

    Returns:
        The offset, unchanged

    Raises:
        InvalidTimezoneOffsetError: If the offset cannot be written as +HHMM
    """
    if not _is_integer(offset):
        raise InvalidTimezoneOffsetError(offset, "must be an integer number of seconds")
    if abs(offset) > MAX_TIMEZONE_OFFSET_SECONDS:
        raise InvalidTimezoneOffsetError(offset, "must be within +/-23:59")
    if offset % SECONDS_PER_MINUTE:
        raise InvalidTimezoneOffsetError(offset, "must be a whole number of minutes")
    return offset


def _is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_fields(year: int, month: int, day: int, hour: int, minute: int, second: int) -> None:
    DateComponents(year, month, day, hour, minute, second, weekday(year, month, day))


def _epoch_from_fields(year: int, month: int, day: int, hour: int, minute: int, second: int) -> int:
    return (
        days_since_epoch(year, month, day) * SECONDS_PER_DAY
        + hour * SECONDS_PER_HOUR
        + minute * SECONDS_PER_MINUTE
        + second
    )


def _parse_number(token: str) -> Optional[int]:
    """Parse an unsigned ASCII decimal, or None."""
    if not token or not token.isascii() or not token.isdigit():
        return None
    return int(token)


def _parse_timezone(token: str) -> int:
    """Parse "+HHMM" / "-HHMM" into signed offset seconds."""
    if len(token) != 5 or token[0] not in "+-":
        raise InvalidTimezoneError(token)

    hours = _parse_number(token[1:3])
    minutes = _parse_number(token[3:5])
    if hours is None or minutes is None or hours > 23 or minutes > 59:
        raise InvalidTimezoneError(token)

    sign = 1 if token[0] == "+" else -1
    return sign * (hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE)

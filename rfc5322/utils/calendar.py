"""Gregorian calendar arithmetic on integer day counts."""

from typing import Tuple

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

# Protocol-mandated tokens (RFC 5322 section 3.3), never localized
DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_COMMON_YEAR = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_LEAP_YEAR = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Days before the first of each month, plus the year total
_CUMULATIVE_COMMON = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)
_CUMULATIVE_LEAP = (0, 31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366)

_DAYS_PER_400_YEARS = 146097
_DAYS_PER_100_YEARS = 36524
_DAYS_PER_4_YEARS = 1461
_DAYS_PER_YEAR = 365

# Days from 0001-01-01 to 1970-01-01 in the proleptic Gregorian calendar
_EPOCH_ORDINAL = 719162


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_months(year: int) -> Tuple[int, ...]:
    """Return the twelve month lengths for the given year."""
    return _LEAP_YEAR if is_leap_year(year) else _COMMON_YEAR


def days_in_month(month: int, year: int) -> int:
    """
    Number of days in a month.

    Args:
        month: Month number (1-12)
        year: Gregorian year

    Returns:
        28, 29, 30 or 31

    Raises:
        ValueError: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be 1-12, got {month}")
    return days_in_months(year)[month - 1]


def _leap_years_through(year: int) -> int:
    """Count leap years in [1, year]; negative for years before 1."""
    return year // 4 - year // 100 + year // 400


def days_since_epoch(year: int, month: int, day: int) -> int:
    """
    Days between 1970-01-01 and the given date.

    Constant time in the distance from the epoch: leap years are counted by
    inclusion-exclusion over multiples of 4, 100 and 400.

    Args:
        year: Gregorian year
        month: Month number (1-12)
        day: Day of month (1-based)

    Returns:
        Signed day count, 0 for 1970-01-01

    Raises:
        ValueError: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be 1-12, got {month}")

    leap_days = _leap_years_through(year - 1) - _leap_years_through(1969)
    cumulative = _CUMULATIVE_LEAP if is_leap_year(year) else _CUMULATIVE_COMMON

    return 365 * (year - 1970) + leap_days + cumulative[month - 1] + (day - 1)


def weekday(year: int, month: int, day: int) -> int:
    """
    Day of week via Zeller's congruence.

    Zeller's result counts from Saturday; it is shifted so that 0 is Sunday.

    Returns:
        0 (Sunday) through 6 (Saturday)
    """
    if month < 3:
        month += 12
        year -= 1

    century_year = year % 100
    century = year // 100
    zeller = (
        day
        + (13 * (month + 1)) // 5
        + century_year
        + century_year // 4
        + century // 4
        + 5 * century
    ) % 7

    return (zeller + 6) % 7


def year_and_day_of_year(days: int) -> Tuple[int, int]:
    """
    Inverse of days_since_epoch at year granularity.

    Args:
        days: Days since 1970-01-01 (may be negative)

    Returns:
        Tuple of (year, zero-based day within that year)
    """
    ordinal = days + _EPOCH_ORDINAL

    cycles_400, ordinal = divmod(ordinal, _DAYS_PER_400_YEARS)
    cycles_100, ordinal = divmod(ordinal, _DAYS_PER_100_YEARS)
    cycles_4, ordinal = divmod(ordinal, _DAYS_PER_4_YEARS)
    years, ordinal = divmod(ordinal, _DAYS_PER_YEAR)

    year = 400 * cycles_400 + 100 * cycles_100 + 4 * cycles_4 + years + 1

    # Last day of a leap year overflows into a fifth year or century
    if cycles_100 == 4 or years == 4:
        return year - 1, 365

    return year, ordinal


def month_and_day(year: int, day_of_year: int) -> Tuple[int, int]:
    """
    Split a zero-based day-of-year into (month, day).

    Raises:
        ValueError: If day_of_year is outside the year
    """
    cumulative = _CUMULATIVE_LEAP if is_leap_year(year) else _CUMULATIVE_COMMON
    if not 0 <= day_of_year < cumulative[12]:
        raise ValueError(f"Day of year {day_of_year} out of range for {year}")

    month = 1
    while cumulative[month] <= day_of_year:
        month += 1

    return month, day_of_year - cumulative[month - 1] + 1


def date_from_days(days: int) -> Tuple[int, int, int]:
    """Convert days since 1970-01-01 to (year, month, day)."""
    year, day_of_year = year_and_day_of_year(days)
    month, day = month_and_day(year, day_of_year)
    return year, month, day

"""Utility functions"""

from .calendar import (
    DAY_NAMES,
    MONTH_NAMES,
    date_from_days,
    days_in_month,
    days_since_epoch,
    is_leap_year,
    weekday,
    year_and_day_of_year,
)

__all__ = [
    "DAY_NAMES",
    "MONTH_NAMES",
    "date_from_days",
    "days_in_month",
    "days_since_epoch",
    "is_leap_year",
    "weekday",
    "year_and_day_of_year",
]

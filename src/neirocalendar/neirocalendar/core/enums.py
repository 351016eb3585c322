from __future__ import annotations

from enum import Enum


class MonthLocale(str, Enum):
    """Language used for month names and week-day headers."""

    RU = "ru"
    EN = "en"


class Weekday(int, Enum):
    """ISO-8601 weekday numbers (Monday=1 ... Sunday=7)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR

from ..core.exceptions import InvalidDateRange, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_year_month(year: int, month: int) -> tuple[int, int]:
    if isinstance(year, bool) or not isinstance(year, int) or not MINYEAR <= year <= MAXYEAR:
        raise InvalidDateRange(f"Invalid year: {year!r}")
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidDateRange(f"Invalid month: {month!r}")
    return year, month

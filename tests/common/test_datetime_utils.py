from datetime import date

import pytest

from src.neirocalendar.neirocalendar.common.datetime_utils import add_months, first_day_of, last_day_of, parse_iso_date


def test_month_bounds():
    assert first_day_of(2024, 2) == date(2024, 2, 1)
    assert last_day_of(2024, 2) == date(2024, 2, 29)
    assert last_day_of(2023, 2) == date(2023, 2, 28)
    assert last_day_of(2024, 12) == date(2024, 12, 31)


@pytest.mark.parametrize(
    "start, months, expected",
    [
        (date(2024, 1, 31), 1, date(2024, 2, 29)),
        (date(2023, 1, 31), 1, date(2023, 2, 28)),
        (date(2024, 12, 10), 1, date(2025, 1, 10)),
        (date(2024, 5, 15), 0, date(2024, 5, 15)),
        (date(2024, 3, 31), 13, date(2025, 4, 30)),
    ],
)
def test_add_months(start, months, expected):
    assert add_months(start, months) == expected


def test_parse_iso_date():
    assert parse_iso_date("2024-02-29") == date(2024, 2, 29)
    with pytest.raises(ValueError):
        parse_iso_date("29.02.2024")

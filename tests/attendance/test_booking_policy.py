from datetime import date

import pytest

from src.neirocalendar.neirocalendar.attendance.policy import BookingPolicy
from src.neirocalendar.neirocalendar.core.enums import Weekday
from src.neirocalendar.neirocalendar.core.exceptions import ValidationError


def test_empty_policy_allows_every_day():
    policy = BookingPolicy()

    assert all(policy.allows(date(2024, 3, d)) for d in range(4, 11))


def test_policy_from_numbers():
    policy = BookingPolicy.from_numbers(["2", 7])

    assert policy.bookable_weekdays == frozenset({Weekday.TUESDAY, Weekday.SUNDAY})
    assert policy.allows(date(2024, 3, 5))  # Tuesday
    assert not policy.allows(date(2024, 3, 6))  # Wednesday


def test_policy_rejects_unknown_weekday_number():
    with pytest.raises(ValidationError):
        BookingPolicy.from_numbers([0])


def test_check_message_lists_allowed_days():
    with pytest.raises(ValidationError, match="Tuesday"):
        BookingPolicy.from_numbers([2]).check(date(2024, 3, 6))

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..core.enums import Weekday
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class BookingPolicy:
    """Which ISO weekdays accept new visits. Empty means every day."""

    bookable_weekdays: frozenset[Weekday] = frozenset()

    @classmethod
    def from_numbers(cls, numbers: Iterable[int]) -> "BookingPolicy":
        try:
            return cls(frozenset(Weekday(int(n)) for n in numbers))
        except ValueError as e:
            raise ValidationError(f"Invalid weekday number in booking policy: {e}") from e

    def allows(self, day: date) -> bool:
        return not self.bookable_weekdays or Weekday(day.isoweekday()) in self.bookable_weekdays

    def check(self, day: date) -> None:
        if not self.allows(day):
            allowed = ", ".join(w.name.capitalize() for w in sorted(self.bookable_weekdays))
            raise ValidationError(f"{day:%Y-%m-%d} is not bookable (allowed: {allowed})")

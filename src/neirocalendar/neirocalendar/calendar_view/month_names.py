from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Sequence

from ..core.enums import MonthLocale

_MONTH_NAMES: dict[MonthLocale, tuple[str, ...]] = {
    MonthLocale.RU: (
        "Январь", "Февраль", "Март", "Апрель", "Май", "Июнь",
        "Июль", "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь",
    ),
    MonthLocale.EN: (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}

_WEEK_DAYS: dict[MonthLocale, tuple[str, ...]] = {
    MonthLocale.RU: ("Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс"),
    MonthLocale.EN: ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
}


def month_names(locale: MonthLocale = MonthLocale.RU) -> Mapping[int, str]:
    """Ordered, read-only mapping 1..12 -> capitalized month name."""
    return MappingProxyType({i: name for i, name in enumerate(_MONTH_NAMES[MonthLocale(locale)], start=1)})


def week_day_headers(locale: MonthLocale = MonthLocale.RU) -> Sequence[str]:
    """Monday-first short week-day names."""
    return _WEEK_DAYS[MonthLocale(locale)]

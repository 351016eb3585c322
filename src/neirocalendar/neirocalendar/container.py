from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.policy import BookingPolicy
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .billing.calculator.fixed_price_calculator import FixedPriceCalculator
from .billing.service import AttendanceAggregator
from .calendar_view.service import CalendarViewAssembler
from .core.constants import DEFAULT_MONTH_LOCALE, DEFAULT_PRICE_PER_VISIT
from .core.enums import MonthLocale
from .database.connection import DBConfig, DatabaseConnection


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRepository

    attendance_service: AttendanceService
    calendar_service: CalendarViewAssembler


def build_services(
    attendance_repo: AttendanceRepository,
    *,
    conn: Optional[DatabaseConnection] = None,
    price_per_visit: int = DEFAULT_PRICE_PER_VISIT,
    bookable_weekdays: Iterable[int] = (),
    month_locale: str = DEFAULT_MONTH_LOCALE,
) -> Container:
    attendance_service = AttendanceService(
        attendance_repo,
        policy=BookingPolicy.from_numbers(bookable_weekdays),
    )
    calendar_service = CalendarViewAssembler(
        attendance_repo,
        aggregator=AttendanceAggregator(calculator=FixedPriceCalculator(price_per_visit)),
        locale=MonthLocale(month_locale),
    )

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        calendar_service=calendar_service,
    )


def build_container(
    *,
    db_config: dict,
    price_per_visit: int = DEFAULT_PRICE_PER_VISIT,
    bookable_weekdays: Iterable[int] = (),
    month_locale: str = DEFAULT_MONTH_LOCALE,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_settings(db_config))

    return build_services(
        MySQLAttendanceRepository(conn),
        conn=conn,
        price_per_visit=price_per_visit,
        bookable_weekdays=bookable_weekdays,
        month_locale=month_locale,
    )

from __future__ import annotations

from datetime import date

import pytest

from src.neirocalendar.neirocalendar.attendance.model import AttendanceRecord
from src.neirocalendar.neirocalendar.container import build_container, build_services
from src.neirocalendar.neirocalendar.core.exceptions import ValidationError


class ListAttendance:
    def __init__(self):
        self.saved: list[AttendanceRecord] = []

    def save(self, record):
        self.saved.append(record)
        return record

    def find_by_date_range(self, start: date, end: date):
        return [r for r in self.saved if start <= r.visit_date <= end]


def test_build_services_applies_settings():
    repo = ListAttendance()
    container = build_services(repo, price_per_visit=500, bookable_weekdays=(2,), month_locale="en")

    container.attendance_service.create("Ivan", date(2024, 2, 27))  # Tuesday
    with pytest.raises(ValidationError):
        container.attendance_service.create("Ivan", date(2024, 2, 28))

    view = container.calendar_service.assemble(2024, 2)
    assert view.month_names[2] == "February"
    assert view.attended_count == 0

    repo.saved[0] = AttendanceRecord(person_name="Ivan", visit_date=date(2024, 2, 27), attended=True, record_id=1)
    assert container.calendar_service.assemble(2024, 2).total_cost == 500
    assert container.conn is None


def test_each_container_gets_its_own_connection_factory():
    base = {"host": "localhost", "user": "root", "password": "", "database": "neiro_calendar"}

    first = build_container(db_config=base)
    second = build_container(db_config={**base, "database": "neiro_calendar_test", "port": "3307"})

    assert first.conn is not second.conn
    assert first.conn.config.database == "neiro_calendar"
    assert first.conn.config.port == 3306
    assert second.conn.config.database == "neiro_calendar_test"
    assert second.conn.config.port == 3307

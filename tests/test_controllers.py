from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

from src.neirocalendar.neirocalendar.attendance.model import AttendanceRecord
from src.neirocalendar.neirocalendar.container import build_services
from src.neirocalendar.neirocalendar.core.exceptions import StoreError
from src.neirocalendar.neirocalendar.main import create_app


class InMemoryAttendance:
    def __init__(self):
        self._by_id: dict[int, AttendanceRecord] = {}
        self._id = 0

    def find_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        return self._by_id.get(record_id)

    def find_by_date(self, visit_date: date):
        return [r for r in self._by_id.values() if r.visit_date == visit_date]

    def find_by_date_range(self, start: date, end: date):
        items = [r for r in self._by_id.values() if start <= r.visit_date <= end]
        return sorted(items, key=lambda r: (r.visit_date, r.record_id))

    def save(self, record: AttendanceRecord) -> AttendanceRecord:
        if record.record_id is None:
            self._id += 1
            record = replace(record, record_id=self._id)
        self._by_id[record.record_id] = record
        return record

    def delete_by_id(self, record_id: int) -> bool:
        return self._by_id.pop(record_id, None) is not None


class BrokenAttendance(InMemoryAttendance):
    def find_by_date_range(self, start: date, end: date):
        raise StoreError("database is down")


@pytest.fixture
def repo():
    return InMemoryAttendance()


@pytest.fixture
def client(monkeypatch, repo):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=build_services(repo))
    return app.test_client()


def test_index_redirects_to_calendar(client):
    resp = client.get("/")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/calendar")


def test_calendar_page_renders_month(client, repo):
    repo.save(AttendanceRecord(person_name="Ivan", visit_date=date(2024, 2, 29), attended=True))

    resp = client.get("/calendar?year=2024&month=2")

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "Февраль" in body
    assert "Ivan" in body
    assert "1250" in body


def test_calendar_page_invalid_month_redirects(client):
    resp = client.get("/calendar?year=2024&month=13")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/calendar")


def test_api_calendar_returns_view_model(client):
    resp = client.get("/api/calendar?year=2025&month=1")

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["year"] == 2025 and data["month"] == 1
    assert data["weeks"][0][0]["date"] == "2024-12-30"
    assert data["weeks"][-1][-1]["date"] == "2025-02-09"
    assert data["totalCost"] == 0


def test_api_calendar_invalid_month_is_bad_request(client):
    resp = client.get("/api/calendar?year=2025&month=0")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_add_redirects_to_month_of_visit(client, repo):
    resp = client.post("/calendar/add", data={"personName": "Ivan", "date": "2024-02-29"})

    assert resp.status_code == 302
    assert "year=2024" in resp.headers["Location"] and "month=2" in resp.headers["Location"]
    assert [r.person_name for r in repo.find_by_date(date(2024, 2, 29))] == ["Ivan"]


def test_add_with_empty_name_stores_nothing(client, repo):
    resp = client.post("/calendar/add", data={"personName": " ", "date": "2024-02-29"}, follow_redirects=True)

    assert resp.status_code == 200
    assert repo.find_by_date(date(2024, 2, 29)) == []


def test_add_with_bad_date_stores_nothing(client, repo):
    resp = client.post("/calendar/add", data={"personName": "Ivan", "date": "29.02.2024"})

    assert resp.status_code == 302
    assert repo.find_by_date_range(date.min, date.max) == []


def test_add_recurring_creates_records(client, repo):
    resp = client.post("/calendar/add-recurring", data={"personName": "Anna", "date": "2024-01-31", "months": "3"})

    assert resp.status_code == 302
    dates = [r.visit_date for r in repo.find_by_date_range(date(2024, 1, 1), date(2024, 12, 31))]
    assert dates == [date(2024, 1, 31), date(2024, 2, 29), date(2024, 3, 31)]


def test_check_and_uncheck_toggle_attended(client, repo):
    rec = repo.save(AttendanceRecord(person_name="Ivan", visit_date=date(2024, 2, 29)))

    client.post("/calendar/check", data={"recordId": str(rec.record_id), "year": "2024", "month": "2"})
    assert repo.find_by_id(rec.record_id).attended is True

    resp = client.post("/calendar/uncheck", data={"recordId": str(rec.record_id), "year": "2024", "month": "2"})
    assert repo.find_by_id(rec.record_id).attended is False
    assert "month=2" in resp.headers["Location"]


def test_delete_unknown_record_is_harmless(client, repo):
    repo.save(AttendanceRecord(person_name="Ivan", visit_date=date(2024, 2, 29)))

    resp = client.post("/calendar/delete", data={"recordId": "404"})

    assert resp.status_code == 302
    assert len(repo.find_by_date(date(2024, 2, 29))) == 1


def test_store_failure_is_reported(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    client = create_app(container=build_services(BrokenAttendance())).test_client()

    assert client.get("/calendar?year=2024&month=2").status_code == 503
    assert client.get("/api/calendar?year=2024&month=2").status_code == 503


def test_add_recurring_past_last_year_is_rejected_without_partial_writes(client, repo):
    resp = client.post("/calendar/add-recurring", data={"personName": "Anna", "date": "9999-11-01", "months": "3"})

    assert resp.status_code == 302
    assert repo.find_by_date_range(date.min, date.max) == []

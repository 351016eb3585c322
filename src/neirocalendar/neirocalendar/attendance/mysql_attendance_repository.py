from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Any, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "id, person_name, visit_date, attended"


def _to_record(row: Mapping[str, Any]) -> AttendanceRecord:
    """Map one attendance_records row onto the domain entity."""

    visit_date = row["visit_date"]
    if isinstance(visit_date, datetime):
        visit_date = visit_date.date()
    return AttendanceRecord(
        record_id=int(row["id"]),
        person_name=row["person_name"],
        visit_date=visit_date,
        attended=bool(row.get("attended")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE id=%s",
                (int(record_id),),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def find_by_date(self, visit_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE visit_date=%s
                ORDER BY id ASC
                """,
                (visit_date,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def find_by_date_range(self, start: date, end: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE visit_date BETWEEN %s AND %s
                ORDER BY visit_date ASC, id ASC
                """,
                (start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def save(self, record: AttendanceRecord) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            if record.record_id is None:
                cur.execute(
                    """
                    INSERT INTO attendance_records(person_name, visit_date, attended)
                    VALUES(%s,%s,%s)
                    """,
                    (record.person_name, record.visit_date, int(record.attended)),
                )
                return replace(record, record_id=int(cur.lastrowid))

            cur.execute(
                """
                UPDATE attendance_records
                SET person_name=%s, visit_date=%s, attended=%s
                WHERE id=%s
                """,
                (record.person_name, record.visit_date, int(record.attended), int(record.record_id)),
            )
            return record

    def delete_by_id(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE id=%s", (int(record_id),))
            return cur.rowcount > 0

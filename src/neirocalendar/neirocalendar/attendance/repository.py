from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def find_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def find_by_date(self, visit_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def find_by_date_range(self, start: date, end: date) -> Sequence[AttendanceRecord]:
        """Records with start <= visit_date <= end, in a stable order."""

        raise NotImplementedError

    def save(self, record: AttendanceRecord) -> AttendanceRecord:
        """Insert (record_id is None) or update a record.

        Returns the persisted record, with record_id assigned.
        """

        raise NotImplementedError

    def delete_by_id(self, record_id: int) -> bool:
        """Delete a record; returns False when nothing was deleted."""

        raise NotImplementedError

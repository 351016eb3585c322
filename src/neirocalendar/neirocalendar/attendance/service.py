from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import add_months
from ..common.logger import get_logger
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from .model import AttendanceRecord
from .policy import BookingPolicy
from .repository import AttendanceRepository

logger = get_logger("AttendanceService")


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, *, policy: Optional[BookingPolicy] = None):
        self._attendance = attendance
        self._policy = policy or BookingPolicy()

    @staticmethod
    def _require_date(visit_date: Optional[date]) -> date:
        if not isinstance(visit_date, date):
            raise ValidationError("Visit date is required")
        if isinstance(visit_date, datetime):
            return visit_date.date()
        return visit_date

    def create(self, person_name: str, visit_date: date) -> AttendanceRecord:
        name = require_non_empty(person_name, "Person name")
        visit_date = self._require_date(visit_date)
        self._policy.check(visit_date)

        saved = self._attendance.save(AttendanceRecord(person_name=name, visit_date=visit_date, attended=False))
        logger.info(f"Created attendance record {saved.record_id}: {name} on {visit_date}")
        return saved

    def create_recurring(self, person_name: str, start_date: date, months_span: int) -> list[AttendanceRecord]:
        """One record per month for ``months_span`` months, starting with ``start_date``'s month.

        The day of month is clamped for shorter months (Jan 31 -> Feb 28/29).
        """

        name = require_non_empty(person_name, "Person name")
        start_date = self._require_date(start_date)
        if int(months_span) < 1:
            raise ValidationError("Months span must be at least 1")
        self._policy.check(start_date)

        # All dates are resolved before the first save so a bad span stores nothing.
        try:
            visit_dates = [add_months(start_date, i) for i in range(int(months_span))]
        except (ValueError, OverflowError) as e:
            raise ValidationError(f"{months_span} months from {start_date} runs past the supported calendar") from e

        created: list[AttendanceRecord] = []
        for visit_date in visit_dates:
            created.append(self._attendance.save(AttendanceRecord(person_name=name, visit_date=visit_date)))

        logger.info(f"Created {len(created)} recurring records for {name} from {start_date}")
        return created

    def update(self, record_id: int, person_name: str, visit_date: date) -> Optional[AttendanceRecord]:
        name = require_non_empty(person_name, "Person name")
        visit_date = self._require_date(visit_date)

        record = self._attendance.find_by_id(int(record_id))
        if not record:
            logger.warning(f"Update skipped, record {record_id} not found")
            return None

        saved = self._attendance.save(replace(record, person_name=name, visit_date=visit_date))
        logger.info(f"Updated attendance record {record_id}")
        return saved

    def mark_attended(self, record_id: int, attended: bool = True) -> bool:
        record = self._attendance.find_by_id(int(record_id))
        if not record:
            logger.warning(f"Mark attended skipped, record {record_id} not found")
            return False

        if record.attended != bool(attended):
            self._attendance.save(replace(record, attended=bool(attended)))
        logger.info(f"Record {record_id} attended={bool(attended)}")
        return True

    def delete(self, record_id: int) -> bool:
        deleted = self._attendance.delete_by_id(int(record_id))
        if deleted:
            logger.info(f"Deleted attendance record {record_id}")
        else:
            logger.warning(f"Delete skipped, record {record_id} not found")
        return deleted

    def records_for_day(self, day: date) -> Sequence[AttendanceRecord]:
        return self._attendance.find_by_date(self._require_date(day))

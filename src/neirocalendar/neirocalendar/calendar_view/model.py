from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Sequence

from ..attendance.model import AttendanceRecord
from ..billing.service import DaySummary


@dataclass(frozen=True)
class DayCell:
    date: date
    in_selected_month: bool
    records: Sequence[AttendanceRecord] = ()


WeekRow = Sequence[DayCell]
CalendarGrid = Sequence[WeekRow]


@dataclass(frozen=True)
class MonthContext:
    year: int
    month: int
    start_of_month: date
    end_of_month: date


@dataclass(frozen=True)
class CalendarView:
    """View-model handed to the rendering layer."""

    year: int
    month: int
    grid: CalendarGrid
    total_cost: int
    attended_count: int
    month_names: Mapping[int, str]
    week_days: Sequence[str] = ()
    day_summaries: Sequence[DaySummary] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form (dates as YYYY-MM-DD)."""

        return {
            "year": self.year,
            "month": self.month,
            "totalCost": self.total_cost,
            "attendedCount": self.attended_count,
            "monthNames": {str(k): v for k, v in self.month_names.items()},
            "weekDays": list(self.week_days),
            "weeks": [
                [
                    {
                        "date": cell.date.isoformat(),
                        "inSelectedMonth": cell.in_selected_month,
                        "records": [
                            {
                                "id": r.record_id,
                                "personName": r.person_name,
                                "visitDate": r.visit_date.isoformat(),
                                "attended": r.attended,
                            }
                            for r in cell.records
                        ],
                    }
                    for cell in week
                ]
                for week in self.grid
            ],
            "daySummaries": [
                {"date": s.date.isoformat(), "attendedCount": s.attended_count, "earnings": s.earnings}
                for s in self.day_summaries
            ],
        }

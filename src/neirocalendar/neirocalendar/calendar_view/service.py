from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..billing.service import AttendanceAggregator
from ..common.datetime_utils import first_day_of, last_day_of, today_local
from ..common.logger import get_logger
from ..common.validators import require_year_month
from ..core.enums import MonthLocale
from .grid import CalendarGridBuilder
from .model import CalendarView, MonthContext
from .month_names import month_names, week_day_headers

logger = get_logger("CalendarView")


def month_context(year: int, month: int) -> MonthContext:
    require_year_month(year, month)
    return MonthContext(
        year=year,
        month=month,
        start_of_month=first_day_of(year, month),
        end_of_month=last_day_of(year, month),
    )


def group_by_date(records: Sequence[AttendanceRecord]) -> dict[date, list[AttendanceRecord]]:
    """Group records by visit date, keeping the store's order within a day."""
    grouped: dict[date, list[AttendanceRecord]] = defaultdict(list)
    for r in records:
        grouped[r.visit_date].append(r)
    return dict(grouped)


class CalendarViewAssembler:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        grid_builder: Optional[CalendarGridBuilder] = None,
        aggregator: Optional[AttendanceAggregator] = None,
        locale: MonthLocale = MonthLocale.RU,
    ):
        self._attendance = attendance
        self._grid_builder = grid_builder or CalendarGridBuilder()
        self._aggregator = aggregator or AttendanceAggregator()
        self._locale = MonthLocale(locale)

    def assemble(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        *,
        today: Optional[date] = None,
    ) -> CalendarView:
        today = today or today_local()
        ctx = month_context(
            today.year if year is None else year,
            today.month if month is None else month,
        )

        records = list(self._attendance.find_by_date_range(ctx.start_of_month, ctx.end_of_month))
        grid = self._grid_builder.build_grid(ctx.year, ctx.month, group_by_date(records))
        summary = self._aggregator.summarize(records)

        logger.info(
            f"Calendar {ctx.year}-{ctx.month:02d}: {len(records)} records, "
            f"{summary.attended_count} attended, total cost {summary.total_cost}"
        )

        return CalendarView(
            year=ctx.year,
            month=ctx.month,
            grid=grid,
            total_cost=summary.total_cost,
            attended_count=summary.attended_count,
            month_names=month_names(self._locale),
            week_days=week_day_headers(self._locale),
            day_summaries=tuple(self._aggregator.summarize_by_day(records)),
        )

from __future__ import annotations

from datetime import date, timedelta
from typing import Mapping, Sequence

from ..attendance.model import AttendanceRecord
from ..common.validators import require_year_month
from ..core.constants import DAYS_IN_GRID, DAYS_IN_WEEK
from ..core.exceptions import InvalidDateRange
from .model import CalendarGrid, DayCell


class CalendarGridBuilder:
    """Builds the fixed 6x7, Monday-first grid shown for a month.

    The grid always has six rows; short months spill into the next month
    so the rendered table keeps the same shape all year.
    """

    def build_grid(
        self,
        year: int,
        month: int,
        records_by_date: Mapping[date, Sequence[AttendanceRecord]],
    ) -> CalendarGrid:
        require_year_month(year, month)

        first_of_month = date(year, month, 1)
        # isoweekday(): Monday=1 ... Sunday=7
        start = first_of_month - timedelta(days=first_of_month.isoweekday() - 1)

        cells: list[DayCell] = []
        for offset in range(DAYS_IN_GRID):
            try:
                current = start + timedelta(days=offset)
            except OverflowError as e:
                raise InvalidDateRange(f"Calendar grid for {year}-{month:02d} runs past {date.max}") from e

            cells.append(
                DayCell(
                    date=current,
                    in_selected_month=(current.year == year and current.month == month),
                    records=tuple(records_by_date.get(current) or ()),
                )
            )

        return tuple(tuple(cells[i : i + DAYS_IN_WEEK]) for i in range(0, DAYS_IN_GRID, DAYS_IN_WEEK))

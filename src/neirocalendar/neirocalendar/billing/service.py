from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..common.logger import get_logger
from .calculator.base import BillingCalculator
from .calculator.fixed_price_calculator import FixedPriceCalculator

logger = get_logger("AttendanceAggregator")


@dataclass(frozen=True)
class MonthlySummary:
    total_cost: int
    attended_count: int

    def __add__(self, other: "MonthlySummary") -> "MonthlySummary":
        return MonthlySummary(
            total_cost=self.total_cost + other.total_cost,
            attended_count=self.attended_count + other.attended_count,
        )


@dataclass(frozen=True)
class DaySummary:
    date: date
    attended_count: int
    earnings: int


class AttendanceAggregator:
    """Totals over records that the caller already filtered to a date range."""

    def __init__(self, *, calculator: Optional[BillingCalculator] = None):
        self._calculator = calculator or FixedPriceCalculator()

    def summarize(self, records: Iterable[AttendanceRecord]) -> MonthlySummary:
        attended_count = sum(1 for r in records if r.attended is True)
        summary = MonthlySummary(
            total_cost=self._calculator.total_cost(attended_count),
            attended_count=attended_count,
        )
        logger.debug(f"Summarized {attended_count} attended visits, total cost {summary.total_cost}")
        return summary

    def summarize_by_day(self, records: Iterable[AttendanceRecord]) -> list[DaySummary]:
        counts: dict[date, int] = {}
        for r in records:
            counts.setdefault(r.visit_date, 0)
            if r.attended is True:
                counts[r.visit_date] += 1

        return [
            DaySummary(date=day, attended_count=n, earnings=self._calculator.total_cost(n))
            for day, n in sorted(counts.items())
        ]

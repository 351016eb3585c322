from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one person's visit on a given date."""

    person_name: str
    visit_date: date
    attended: bool = False
    record_id: Optional[int] = None

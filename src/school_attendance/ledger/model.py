from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..people.model import Person


@dataclass(frozen=True)
class TodaySummary:
    """Dashboard counters for the current calendar day."""

    students_present: int
    teachers_present: int
    total_students: int
    total_teachers: int


@dataclass(frozen=True)
class DailyBreakdown:
    total_days: int
    present_days: int
    absent_days: int
    leave_days: int


@dataclass(frozen=True)
class ImportDocument:
    """Parsed import file. A roster left as None was absent from the document."""

    students: Optional[list[Person]] = None
    teachers: Optional[list[Person]] = None

from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.validators import require_iso_date
from ..core.enums import AttendanceStatus, Role
from ..ledger.service import AttendanceLedger
from ..people.model import Person, secondary_label

STATUS_LABELS = {
    AttendanceStatus.PRESENT: "Present",
    AttendanceStatus.ABSENT: "Absent",
    AttendanceStatus.LEAVE: "Leave",
}

STATUS_CSS = {
    AttendanceStatus.PRESENT: "bg-success",
    AttendanceStatus.ABSENT: "bg-danger",
    AttendanceStatus.LEAVE: "bg-warning text-dark",
}


class DashboardService:
    """Use case: today's counters and the per-person mark controls."""

    def __init__(self, ledger: AttendanceLedger):
        self._ledger = ledger

    def build_dashboard(self, day: Optional[str | date] = None) -> dict:
        day_key = require_iso_date(day) if day else self._ledger.today_key()
        summary = self._ledger.today_summary()

        return {
            "date": day_key,
            "summary": {
                "students_present": summary.students_present,
                "teachers_present": summary.teachers_present,
                "total_students": summary.total_students,
                "total_teachers": summary.total_teachers,
            },
            "statuses": [s.value for s in AttendanceStatus],
            "students": [self._to_ui(p, day_key) for p in self._ledger.list_people(Role.STUDENT)],
            "teachers": [self._to_ui(p, day_key) for p in self._ledger.list_people(Role.TEACHER)],
        }

    def mark(self, role: Role, person_id: int, *, status: str, day: Optional[str] = None) -> bool:
        return self._ledger.mark_attendance(role, person_id, day or self._ledger.today_key(), status)

    def _to_ui(self, p: Person, day_key: str) -> dict:
        status = p.attendance.get(day_key)
        return {
            "id": p.id,
            "name": p.name,
            "details": secondary_label(p),
            "status": status.value if status else None,
            "label": STATUS_LABELS[status] if status else "-",
            "css_class": STATUS_CSS[status] if status else "bg-secondary",
        }

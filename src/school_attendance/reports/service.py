from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import GOOD_ATTENDANCE_PERCENT, WARNING_ATTENDANCE_PERCENT
from ..core.enums import Role
from ..ledger.service import AttendanceLedger
from ..people.model import Person, secondary_label


@dataclass(frozen=True)
class ReportData:
    students: list[dict]
    teachers: list[dict]

    @property
    def rows(self) -> list[dict]:
        return self.students + self.teachers


def percentage_band(percent: int) -> tuple[str, str]:
    """Map an attendance percentage to a (band, css class) pair."""
    if percent >= GOOD_ATTENDANCE_PERCENT:
        return "good", "bg-success"
    if percent >= WARNING_ATTENDANCE_PERCENT:
        return "warning", "bg-warning text-dark"
    return "low", "bg-danger"


class ReportService:
    def __init__(self, ledger: AttendanceLedger):
        self._ledger = ledger

    def build_attendance_report(self) -> ReportData:
        return ReportData(
            students=[self._row(p) for p in self._ledger.list_people(Role.STUDENT)],
            teachers=[self._row(p) for p in self._ledger.list_people(Role.TEACHER)],
        )

    def _row(self, p: Person) -> dict:
        breakdown = self._ledger.daily_breakdown(p)
        percent = self._ledger.attendance_percentage(p)
        band, css = percentage_band(percent)
        return {
            "role": p.role.value,
            "id": p.id,
            "name": p.name,
            "details": secondary_label(p),
            "total_days": breakdown.total_days,
            "present_days": breakdown.present_days,
            "absent_days": breakdown.absent_days,
            "leave_days": breakdown.leave_days,
            "percentage": percent,
            "band": band,
            "css_class": css,
        }

"""Example: use the ledger directly (no Flask).

Controllers are a thin layer; the attendance rules live in AttendanceLedger.
"""

from school_attendance.container import build_container
from school_attendance.core.enums import AttendanceStatus, Role


def main():
    container = build_container(storage_config={"backend": "memory"})
    ledger = container.ledger

    ali = ledger.add_person(Role.STUDENT, "Ali", "10th", "5")
    ledger.mark_attendance(Role.STUDENT, ali.id, "2025-01-01", AttendanceStatus.PRESENT)
    ledger.mark_attendance(Role.STUDENT, ali.id, "2025-01-02", AttendanceStatus.PRESENT)
    ledger.mark_attendance(Role.STUDENT, ali.id, "2025-01-03", AttendanceStatus.ABSENT)

    print(container.report_service.build_attendance_report().students)


if __name__ == "__main__":
    main()

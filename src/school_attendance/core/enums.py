from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Which roster a person belongs to."""

    STUDENT = "students"
    TEACHER = "teachers"


class AttendanceStatus(str, Enum):
    """Daily attendance mark, stored as its lowercase value."""

    PRESENT = "present"
    ABSENT = "absent"
    LEAVE = "leave"


class Tab(str, Enum):
    """Top-level views of the application."""

    DASHBOARD = "dashboard"
    STUDENTS = "students"
    TEACHERS = "teachers"
    REPORTS = "reports"

from __future__ import annotations

from datetime import date

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import format_iso_date, parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_iso_date(value: str | date, field_name: str = "date") -> str:
    """Normalize a date or YYYY-MM-DD string to its canonical string key."""

    if isinstance(value, date):
        return format_iso_date(value)
    try:
        return format_iso_date(parse_iso_date(str(value).strip()))
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD, got {value!r}")


def require_status(value: str | AttendanceStatus) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"status must be one of {allowed}, got {value!r}")

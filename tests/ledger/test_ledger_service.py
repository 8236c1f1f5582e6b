from __future__ import annotations

import json
from datetime import date

import pytest

from school_attendance.core.enums import AttendanceStatus, Role
from school_attendance.core.exceptions import ValidationError
from school_attendance.ledger.model import DailyBreakdown, TodaySummary
from school_attendance.ledger.service import AttendanceLedger
from school_attendance.people.model import Student, Teacher
from school_attendance.storage.ledger_store import LedgerStore


def test_add_student_starts_with_empty_attendance(ledger, store):
    ali = ledger.add_person(Role.STUDENT, "Ali", "10th", "5")

    assert isinstance(ali, Student)
    assert ali.class_name == "10th"
    assert ali.roll_number == "5"
    assert ali.attendance == {}
    assert ledger.list_people(Role.STUDENT) == [ali]
    assert ledger.list_people(Role.TEACHER) == []

    saved = json.loads(store.get("students"))
    assert saved == [{"id": ali.id, "name": "Ali", "class": "10th", "rollNumber": "5", "attendance": {}}]


def test_add_teacher_goes_to_teacher_roster(ledger):
    t = ledger.add_person(Role.TEACHER, "Ahmed", "Math", "0300")

    assert isinstance(t, Teacher)
    assert ledger.list_people(Role.TEACHER) == [t]
    assert ledger.list_people(Role.STUDENT) == []


def test_ids_are_unique_even_with_a_frozen_clock(ledger):
    ids = [ledger.add_person(Role.STUDENT, f"S{i}", "10th", str(i)).id for i in range(5)]
    assert len(set(ids)) == 5
    assert ids == sorted(ids)


def test_add_rejects_blank_fields(ledger):
    with pytest.raises(ValidationError):
        ledger.add_person(Role.STUDENT, "   ", "10th", "5")
    with pytest.raises(ValidationError):
        ledger.add_person(Role.TEACHER, "Ahmed", "", "0300")
    assert ledger.list_people(Role.STUDENT) == []
    assert ledger.list_people(Role.TEACHER) == []


def test_duplicate_names_are_allowed(ledger):
    ledger.add_person(Role.STUDENT, "Ali", "10th", "5")
    ledger.add_person(Role.STUDENT, "Ali", "10th", "5")
    assert len(ledger.list_people(Role.STUDENT)) == 2


def test_remove_only_touches_one_entry(ledger):
    a = ledger.add_person(Role.STUDENT, "A", "10th", "1")
    b = ledger.add_person(Role.STUDENT, "B", "10th", "2")
    t = ledger.add_person(Role.TEACHER, "T", "Math", "0300")

    assert ledger.remove_person(Role.STUDENT, a.id) is True

    assert ledger.list_people(Role.STUDENT) == [b]
    assert ledger.list_people(Role.TEACHER) == [t]


def test_remove_unknown_id_is_a_noop(ledger, store):
    ledger.add_person(Role.STUDENT, "A", "10th", "1")
    before = store.get("students")

    assert ledger.remove_person(Role.STUDENT, 999) is False
    assert ledger.remove_person(Role.TEACHER, 999) is False
    assert len(ledger.list_people(Role.STUDENT)) == 1
    assert store.get("students") == before


def test_remove_uses_the_right_roster(ledger):
    s = ledger.add_person(Role.STUDENT, "A", "10th", "1")
    assert ledger.remove_person(Role.TEACHER, s.id) is False
    assert ledger.list_people(Role.STUDENT) == [s]


def test_mark_overwrites_same_day(ledger):
    s = ledger.add_person(Role.STUDENT, "A", "10th", "1")

    ledger.mark_attendance(Role.STUDENT, s.id, "2025-01-01", AttendanceStatus.PRESENT)
    ledger.mark_attendance(Role.STUDENT, s.id, "2025-01-01", "leave")

    p = ledger.get_person(Role.STUDENT, s.id)
    assert p.attendance == {"2025-01-01": AttendanceStatus.LEAVE}


def test_mark_accepts_date_objects(ledger):
    s = ledger.add_person(Role.STUDENT, "A", "10th", "1")
    ledger.mark_attendance(Role.STUDENT, s.id, date(2025, 3, 9), AttendanceStatus.ABSENT)

    p = ledger.get_person(Role.STUDENT, s.id)
    assert ledger.status_on(p, "2025-03-09") == AttendanceStatus.ABSENT
    assert ledger.status_on(p, "2025-03-10") is None


def test_mark_unknown_id_is_a_noop(ledger):
    assert ledger.mark_attendance(Role.TEACHER, 42, "2025-01-01", AttendanceStatus.PRESENT) is False


def test_mark_rejects_bad_status_and_date(ledger):
    s = ledger.add_person(Role.STUDENT, "A", "10th", "1")

    with pytest.raises(ValidationError):
        ledger.mark_attendance(Role.STUDENT, s.id, "2025-01-01", "late")
    with pytest.raises(ValidationError):
        ledger.mark_attendance(Role.STUDENT, s.id, "01/02/2025", AttendanceStatus.PRESENT)

    assert ledger.get_person(Role.STUDENT, s.id).attendance == {}


def test_mark_persists_roster(ledger, store):
    s = ledger.add_person(Role.STUDENT, "A", "10th", "1")
    ledger.mark_attendance(Role.STUDENT, s.id, "2025-01-01", AttendanceStatus.PRESENT)

    saved = json.loads(store.get("students"))
    assert saved[0]["attendance"] == {"2025-01-01": "present"}
    assert store.get("teachers") is None


def test_ali_scenario(ledger):
    ali = ledger.add_person(Role.STUDENT, "Ali", "10th", "5")
    ledger.mark_attendance(Role.STUDENT, ali.id, "2025-01-01", AttendanceStatus.PRESENT)
    ledger.mark_attendance(Role.STUDENT, ali.id, "2025-01-02", AttendanceStatus.PRESENT)
    ledger.mark_attendance(Role.STUDENT, ali.id, "2025-01-03", AttendanceStatus.ABSENT)

    ali = ledger.get_person(Role.STUDENT, ali.id)
    assert ledger.attendance_percentage(ali) == 67
    assert ledger.daily_breakdown(ali) == DailyBreakdown(total_days=3, present_days=2, absent_days=1, leave_days=0)


def _student_with(statuses):
    attendance = {f"2025-01-{i + 1:02d}": AttendanceStatus(s) for i, s in enumerate(statuses)}
    return Student(id=1, name="X", class_name="1", roll_number="1", attendance=attendance)


@pytest.mark.parametrize(
    "statuses, expected",
    [
        ([], 0),
        (["absent", "leave"], 0),
        (["present", "absent", "absent"], 33),
        (["present", "present", "absent"], 67),
        (["present", "absent"], 50),
        (["present"] + ["absent"] * 7, 13),
        (["present"] * 4, 100),
    ],
)
def test_attendance_percentage_rounding(statuses, expected):
    assert AttendanceLedger.attendance_percentage(_student_with(statuses)) == expected


def test_breakdown_counts_sum_to_total():
    p = _student_with(["present", "leave", "absent", "leave", "present"])
    b = AttendanceLedger.daily_breakdown(p)

    assert b.total_days == 5
    assert b.present_days + b.absent_days + b.leave_days == b.total_days
    assert (b.present_days, b.absent_days, b.leave_days) == (2, 1, 2)


def test_today_summary_counts_only_present_today(ledger, fixed_now):
    today = fixed_now.date().isoformat()
    s1 = ledger.add_person(Role.STUDENT, "A", "10th", "1")
    s2 = ledger.add_person(Role.STUDENT, "B", "10th", "2")
    t1 = ledger.add_person(Role.TEACHER, "T", "Math", "0300")

    ledger.mark_attendance(Role.STUDENT, s1.id, today, AttendanceStatus.PRESENT)
    ledger.mark_attendance(Role.STUDENT, s2.id, today, AttendanceStatus.LEAVE)
    ledger.mark_attendance(Role.TEACHER, t1.id, "2026-01-31", AttendanceStatus.PRESENT)

    assert ledger.today_summary() == TodaySummary(
        students_present=1,
        teachers_present=0,
        total_students=2,
        total_teachers=1,
    )


def test_ledger_reloads_from_store(ledger, store, fixed_now):
    s = ledger.add_person(Role.STUDENT, "A", "10th", "1")
    ledger.mark_attendance(Role.STUDENT, s.id, "2025-01-01", AttendanceStatus.PRESENT)

    reloaded = AttendanceLedger(LedgerStore(store), clock=lambda: fixed_now)

    assert reloaded.list_people(Role.STUDENT) == ledger.list_people(Role.STUDENT)
    assert reloaded.list_people(Role.TEACHER) == []
    assert reloaded.add_person(Role.STUDENT, "B", "10th", "2").id > s.id


def test_ledger_without_store_works_in_memory(fixed_now):
    ledger = AttendanceLedger(clock=lambda: fixed_now)
    s = ledger.add_person(Role.STUDENT, "A", "10th", "1")
    assert ledger.remove_person(Role.STUDENT, s.id) is True


def test_early_year_dates_survive_reload_and_round_trip(ledger, store, fixed_now):
    s = ledger.add_person(Role.STUDENT, "A", "10th", "1")
    ledger.mark_attendance(Role.STUDENT, s.id, "0999-01-01", AttendanceStatus.PRESENT)
    ledger.mark_attendance(Role.STUDENT, s.id, date(5, 3, 9), AttendanceStatus.LEAVE)

    p = ledger.get_person(Role.STUDENT, s.id)
    assert set(p.attendance) == {"0999-01-01", "0005-03-09"}

    reloaded = AttendanceLedger(LedgerStore(store), clock=lambda: fixed_now)
    assert reloaded.list_people(Role.STUDENT) == ledger.list_people(Role.STUDENT)

    fresh = AttendanceLedger(clock=lambda: fixed_now)
    fresh.import_snapshot(ledger.export_snapshot())
    assert fresh.list_people(Role.STUDENT) == ledger.list_people(Role.STUDENT)


def test_people_from_the_ledger_are_read_only(ledger, store):
    s = ledger.add_person(Role.STUDENT, "A", "10th", "1")
    ledger.mark_attendance(Role.STUDENT, s.id, "2025-01-01", AttendanceStatus.PRESENT)
    saved = store.get("students")

    p = ledger.list_people(Role.STUDENT)[0]
    with pytest.raises(TypeError):
        p.attendance["2025-01-02"] = AttendanceStatus.ABSENT

    assert ledger.get_person(Role.STUDENT, s.id).attendance == {"2025-01-01": AttendanceStatus.PRESENT}
    assert store.get("students") == saved

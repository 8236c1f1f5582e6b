"""Dict codec for people records.

The wire form keeps the camelCase keys used by existing backup files:
Student {"id","name","class","rollNumber","attendance"} and
Teacher {"id","name","subject","contact","attendance"}.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import ParseError
from .model import Person, Student, Teacher

_ATTR_KEYS = {
    Role.STUDENT: ("class", "rollNumber"),
    Role.TEACHER: ("subject", "contact"),
}


def person_to_dict(person: Person) -> dict:
    if isinstance(person, Student):
        attrs = {"class": person.class_name, "rollNumber": person.roll_number}
    else:
        attrs = {"subject": person.subject, "contact": person.contact}

    return {
        "id": person.id,
        "name": person.name,
        **attrs,
        "attendance": {day: status.value for day, status in person.attendance.items()},
    }


def people_to_dicts(people: Iterable[Person]) -> List[dict]:
    return [person_to_dict(p) for p in people]


def _decode_attendance(raw: Any, *, where: str) -> dict:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ParseError(f"{where}: attendance must be an object")

    out = {}
    for day, status in raw.items():
        try:
            canonical = format_iso_date(parse_iso_date(day)) == day
        except (TypeError, ValueError):
            canonical = False
        if not canonical:
            raise ParseError(f"{where}: invalid attendance date {day!r}")
        try:
            out[day] = AttendanceStatus(status)
        except ValueError:
            raise ParseError(f"{where}: invalid attendance status {status!r}")
    return out


def person_from_dict(role: Role, raw: Any, *, index: int = 0) -> Person:
    where = f"{role.value}[{index}]"
    if not isinstance(raw, Mapping):
        raise ParseError(f"{where}: expected an object")

    person_id = raw.get("id")
    if isinstance(person_id, bool) or not isinstance(person_id, int):
        raise ParseError(f"{where}: id must be an integer")

    key1, key2 = _ATTR_KEYS[role]
    values = []
    for key in ("name", key1, key2):
        value = raw.get(key)
        if not isinstance(value, str):
            raise ParseError(f"{where}: {key} must be a string")
        values.append(value)

    attendance = _decode_attendance(raw.get("attendance"), where=where)
    name, attr1, attr2 = values

    if role == Role.STUDENT:
        return Student(id=person_id, name=name, class_name=attr1, roll_number=attr2, attendance=attendance)
    return Teacher(id=person_id, name=name, subject=attr1, contact=attr2, attendance=attendance)


def people_from_list(role: Role, raw: Any) -> List[Person]:
    if not isinstance(raw, list):
        raise ParseError(f"{role.value} must be an array")

    people = [person_from_dict(role, item, index=i) for i, item in enumerate(raw)]

    seen = set()
    for p in people:
        if p.id in seen:
            raise ParseError(f"{role.value}: duplicate id {p.id}")
        seen.add(p.id)
    return people

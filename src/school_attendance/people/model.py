from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar, Mapping, Union

from ..core.enums import AttendanceStatus, Role


def _freeze_attendance(person) -> None:
    # Read-only copy; marks go through the ledger so every change is saved.
    object.__setattr__(person, "attendance", MappingProxyType(dict(person.attendance)))


@dataclass(frozen=True)
class Student:
    """Domain entity: a student and their attendance history.

    `attendance` maps a YYYY-MM-DD date key to exactly one status.
    """

    id: int
    name: str
    class_name: str
    roll_number: str
    attendance: Mapping[str, AttendanceStatus] = field(default_factory=dict, hash=False)

    role: ClassVar[Role] = Role.STUDENT

    def __post_init__(self):
        _freeze_attendance(self)


@dataclass(frozen=True)
class Teacher:
    """Domain entity: a teacher and their attendance history."""

    id: int
    name: str
    subject: str
    contact: str
    attendance: Mapping[str, AttendanceStatus] = field(default_factory=dict, hash=False)

    role: ClassVar[Role] = Role.TEACHER

    def __post_init__(self):
        _freeze_attendance(self)


Person = Union[Student, Teacher]


def new_person(role: Role, *, person_id: int, name: str, attr1: str, attr2: str) -> Person:
    if role == Role.STUDENT:
        return Student(id=person_id, name=name, class_name=attr1, roll_number=attr2)
    return Teacher(id=person_id, name=name, subject=attr1, contact=attr2)


def secondary_label(person: Person) -> str:
    """Short "class - roll" / "subject - contact" line shown under a name."""
    if isinstance(person, Student):
        return f"{person.class_name} - {person.roll_number}"
    return f"{person.subject} - {person.contact}"

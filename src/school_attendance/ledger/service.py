from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Dict, List, Optional

from ..common.datetime_utils import format_iso_date, now_local
from ..common.validators import require_iso_date, require_non_empty, require_status
from ..core.enums import AttendanceStatus, Role
from ..people.codec import people_to_dicts
from ..people.model import Person, new_person
from ..storage.ledger_store import LedgerStore
from .model import DailyBreakdown, TodaySummary
from .snapshot import SnapshotInput, parse_snapshot

logger = logging.getLogger(__name__)

_ATTR_LABELS = {
    Role.STUDENT: ("Class", "Roll number"),
    Role.TEACHER: ("Subject", "Contact"),
}


class AttendanceLedger:
    """Student and teacher rosters plus their daily attendance.

    State is loaded from the store once, and the affected roster is written
    back after every mutation.
    """

    def __init__(self, store: Optional[LedgerStore] = None, *, clock: Callable[[], datetime] = now_local):
        self._store = store
        self._clock = clock
        self._people: Dict[Role, List[Person]] = {role: [] for role in Role}

        if store is not None:
            for role in Role:
                self._people[role] = store.load_people(role)

        self._last_id = self._max_id()

    # --- reads ---------------------------------------------------------

    def list_people(self, role: Role) -> List[Person]:
        return list(self._people[role])

    def get_person(self, role: Role, person_id: int) -> Optional[Person]:
        for p in self._people[role]:
            if p.id == person_id:
                return p
        return None

    def status_on(self, person: Person, day: str | date) -> Optional[AttendanceStatus]:
        return person.attendance.get(require_iso_date(day))

    # --- mutations -----------------------------------------------------

    def add_person(self, role: Role, name: str, attr1: str, attr2: str) -> Person:
        label1, label2 = _ATTR_LABELS[role]
        person = new_person(
            role,
            person_id=self._next_id(),
            name=require_non_empty(name, "Name"),
            attr1=require_non_empty(attr1, label1),
            attr2=require_non_empty(attr2, label2),
        )
        self._people[role].append(person)
        logger.info("Added %s id=%s name=%r", role.value, person.id, person.name)
        self._save(role)
        return person

    def remove_person(self, role: Role, person_id: int) -> bool:
        people = self._people[role]
        kept = [p for p in people if p.id != person_id]
        if len(kept) == len(people):
            return False

        self._people[role] = kept
        logger.info("Removed %s id=%s", role.value, person_id)
        self._save(role)
        return True

    def mark_attendance(self, role: Role, person_id: int, day: str | date, status: str | AttendanceStatus) -> bool:
        day_key = require_iso_date(day)
        status = require_status(status)

        people = self._people[role]
        for i, p in enumerate(people):
            if p.id == person_id:
                people[i] = replace(p, attendance={**p.attendance, day_key: status})
                logger.debug("Marked %s id=%s %s=%s", role.value, person_id, day_key, status.value)
                self._save(role)
                return True
        return False

    def import_snapshot(self, data: SnapshotInput) -> None:
        """Replace the rosters present in the document.

        The whole document is validated before anything is replaced; a
        ParseError leaves both rosters untouched.
        """

        document = parse_snapshot(data)
        incoming = {Role.STUDENT: document.students, Role.TEACHER: document.teachers}

        for role, people in incoming.items():
            if people is None:
                continue
            self._people[role] = list(people)
            logger.info("Imported %d %s", len(people), role.value)

        self._last_id = max(self._last_id, self._max_id())

        for role, people in incoming.items():
            if people is not None:
                self._save(role)

    # --- statistics ----------------------------------------------------

    @staticmethod
    def daily_breakdown(person: Person) -> DailyBreakdown:
        statuses = list(person.attendance.values())
        return DailyBreakdown(
            total_days=len(statuses),
            present_days=statuses.count(AttendanceStatus.PRESENT),
            absent_days=statuses.count(AttendanceStatus.ABSENT),
            leave_days=statuses.count(AttendanceStatus.LEAVE),
        )

    @staticmethod
    def attendance_percentage(person: Person) -> int:
        total = len(person.attendance)
        if total == 0:
            return 0
        present = sum(1 for s in person.attendance.values() if s == AttendanceStatus.PRESENT)
        # round half up in integer arithmetic: floor(100 * present / total + 1/2)
        return (200 * present + total) // (2 * total)

    def today_key(self) -> str:
        return format_iso_date(self._clock().date())

    def today_summary(self) -> TodaySummary:
        today = self.today_key()

        def present(role: Role) -> int:
            return sum(1 for p in self._people[role] if p.attendance.get(today) == AttendanceStatus.PRESENT)

        return TodaySummary(
            students_present=present(Role.STUDENT),
            teachers_present=present(Role.TEACHER),
            total_students=len(self._people[Role.STUDENT]),
            total_teachers=len(self._people[Role.TEACHER]),
        )

    def export_snapshot(self) -> dict:
        return {
            "students": people_to_dicts(self._people[Role.STUDENT]),
            "teachers": people_to_dicts(self._people[Role.TEACHER]),
            "exportDate": self._clock().astimezone().isoformat(timespec="seconds"),
        }

    # --- internals -----------------------------------------------------

    def _max_id(self) -> int:
        return max((p.id for people in self._people.values() for p in people), default=0)

    def _next_id(self) -> int:
        # Creation timestamp in ms, bumped past the last issued id so rapid adds stay unique.
        stamp = int(self._clock().timestamp() * 1000)
        self._last_id = max(stamp, self._last_id + 1)
        return self._last_id

    def _save(self, role: Role) -> None:
        if self._store is not None:
            self._store.save_people(role, self._people[role])

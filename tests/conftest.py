from __future__ import annotations

from datetime import datetime

import pytest

from school_attendance.ledger.service import AttendanceLedger
from school_attendance.storage.ledger_store import LedgerStore
from school_attendance.storage.memory_store import InMemoryStore


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 30, 0)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def ledger(store, fixed_now) -> AttendanceLedger:
    return AttendanceLedger(LedgerStore(store), clock=lambda: fixed_now)

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .attendance.service import DashboardService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_APP_SLUG, DEFAULT_DATA_DIR
from .ledger.service import AttendanceLedger
from .reports.service import ReportService
from .storage.json_file_store import JsonFileStore
from .storage.ledger_store import LedgerStore
from .storage.memory_store import InMemoryStore
from .storage.repository import KeyValueStore


@dataclass(frozen=True)
class Container:
    ledger: AttendanceLedger

    dashboard_service: DashboardService
    report_service: ReportService

    app_slug: str = DEFAULT_APP_SLUG


def build_store(*, backend: str = "file", data_dir: str = DEFAULT_DATA_DIR) -> KeyValueStore:
    if backend == "memory":
        return InMemoryStore()
    if backend == "file":
        return JsonFileStore(data_dir)
    raise ValueError(f"Unknown storage backend: {backend!r}")


def build_container(
    *,
    storage_config: Optional[dict] = None,
    store: Optional[KeyValueStore] = None,
    app_slug: str = DEFAULT_APP_SLUG,
    clock: Callable[[], datetime] = now_local,
) -> Container:
    if store is None:
        storage_config = storage_config or {}
        store = build_store(
            backend=str(storage_config.get("backend", "file")),
            data_dir=str(storage_config.get("data_dir", DEFAULT_DATA_DIR)),
        )

    ledger = AttendanceLedger(LedgerStore(store), clock=clock)

    return Container(
        ledger=ledger,
        dashboard_service=DashboardService(ledger),
        report_service=ReportService(ledger),
        app_slug=app_slug,
    )

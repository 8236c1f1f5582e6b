"""Backup the attendance ledger.

Writes the same JSON document as the export endpoint into backups/.
"""

from __future__ import annotations

import importlib
from pathlib import Path

from school_attendance.common.datetime_utils import now_local
from school_attendance.common.logging_setup import configure_logging
from school_attendance.config import get_settings_module
from school_attendance.container import build_container
from school_attendance.ledger.snapshot import backup_filename, dump_snapshot


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    logger = configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(
        storage_config={"backend": settings.STORAGE_BACKEND, "data_dir": settings.DATA_DIR},
        app_slug=settings.APP_SLUG,
    )

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    out_file = out_dir / backup_filename(settings.APP_SLUG, now_local().date())
    out_file.write_text(dump_snapshot(container.ledger.export_snapshot()), encoding="utf-8")
    logger.info("Backup created: %s", out_file)


if __name__ == "__main__":
    main()

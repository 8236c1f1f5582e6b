from __future__ import annotations

import importlib

from school_attendance.common.logging_setup import configure_logging
from school_attendance.config import get_settings_module
from school_attendance.container import build_container
from school_attendance.core.enums import Role

DEMO_STUDENTS = [
    ("Ali", "10th", "5"),
    ("Sara", "9th", "12"),
]

DEMO_TEACHERS = [
    ("Ahmed", "Mathematics", "0300-0000000"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    logger = configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(
        storage_config={"backend": settings.STORAGE_BACKEND, "data_dir": settings.DATA_DIR},
    )
    ledger = container.ledger

    for name, class_name, roll in DEMO_STUDENTS:
        ledger.add_person(Role.STUDENT, name, class_name, roll)
    for name, subject, contact in DEMO_TEACHERS:
        ledger.add_person(Role.TEACHER, name, subject, contact)

    logger.info("Seeded %d students and %d teachers into %s", len(DEMO_STUDENTS), len(DEMO_TEACHERS), settings.DATA_DIR)


if __name__ == "__main__":
    main()

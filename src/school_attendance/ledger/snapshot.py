from __future__ import annotations

import json
from datetime import date
from typing import Any, Mapping, Union

from ..common.datetime_utils import format_iso_date
from ..core.constants import EXPORT_INDENT
from ..core.enums import Role
from ..core.exceptions import ParseError
from ..people.codec import people_from_list
from .model import ImportDocument

SnapshotInput = Union[str, bytes, bytearray, Mapping[str, Any]]


def dump_snapshot(snapshot: Mapping[str, Any]) -> str:
    return json.dumps(snapshot, ensure_ascii=False, indent=EXPORT_INDENT)


def backup_filename(app_slug: str, on: date) -> str:
    return f"{app_slug}-backup-{format_iso_date(on)}.json"


def parse_snapshot(data: SnapshotInput) -> ImportDocument:
    """Decode and validate an import document.

    Raises ParseError on malformed JSON, a non-object top level, or any
    record of the wrong shape. Nothing is applied here, so a failure
    leaves callers' state untouched.
    """

    if isinstance(data, (bytes, bytearray)):
        try:
            data = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParseError(f"Import file is not valid UTF-8: {e}") from e

    if isinstance(data, str):
        try:
            data = json.loads(data)
        except ValueError as e:
            raise ParseError(f"Import file is not valid JSON: {e}") from e

    if not isinstance(data, Mapping):
        raise ParseError("Import document must be a JSON object")

    rosters = {}
    for role in Role:
        raw = data.get(role.value)
        rosters[role] = None if raw is None else people_from_list(role, raw)

    return ImportDocument(students=rosters[Role.STUDENT], teachers=rosters[Role.TEACHER])

from __future__ import annotations

import json
import logging
from typing import List, Sequence

from ..core.enums import Role
from ..core.exceptions import ParseError
from ..people.codec import people_from_list, people_to_dicts
from ..people.model import Person
from .repository import KeyValueStore

logger = logging.getLogger(__name__)


class LedgerStore:
    """Persistence collaborator for the ledger.

    One key per roster ("students", "teachers"), each holding the JSON array
    of that roster. Loading happens once at startup; saving is write-through
    and best-effort.
    """

    def __init__(self, store: KeyValueStore):
        self._store = store

    def load_people(self, role: Role) -> List[Person]:
        raw = self._store.get(role.value)
        if raw is None:
            return []

        try:
            return people_from_list(role, json.loads(raw))
        except (ValueError, ParseError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error("Stored %s could not be decoded, starting empty: %s", role.value, e)
            return []

    def save_people(self, role: Role, people: Sequence[Person]) -> bool:
        payload = json.dumps(people_to_dicts(people), ensure_ascii=False)
        try:
            self._store.set(role.value, payload)
        except OSError as e:
            logger.warning("Saving %s failed, in-memory state kept: %s", role.value, e)
            return False
        return True

from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Interface for the string key-value store backing the ledger.

    Note (DIP): the ledger depends on this interface, not on a concrete
    file layout, so tests can swap in an in-memory store.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

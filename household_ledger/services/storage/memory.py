"""
In-Memory Storage Implementation

Follows the same contract as the JSON file backend. Used by tests and
by dry runs that should never touch the disk.
"""

from typing import Optional

from household_ledger.models.ledger import Item
from household_ledger.services.storage.interface import (
    EmptyDataset,
    FileUnreadable,
    LedgerStorageInterface,
)


class InMemoryLedgerStorage(LedgerStorageInterface):
    """
    Ledger storage held in a Python list.

    A store that has never been saved behaves like a missing file.
    """

    def __init__(self, items: Optional[list[Item]] = None):
        self._items: Optional[list[Item]] = list(items) if items is not None else None
        self.save_count = 0

    def load_or_create(self) -> list[Item]:
        if self._items is None:
            return []
        return list(self._items)

    def load_or_fail(self) -> list[Item]:
        if self._items is None:
            raise FileUnreadable("In-memory ledger has never been saved", missing=True)
        if not self._items:
            raise EmptyDataset("In-memory ledger contains no items")
        return list(self._items)

    def save(self, items: list[Item]) -> None:
        self._items = list(items)
        self.save_count += 1

"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for ledger storage.
This allows us to:
1. Use the JSON snapshot file in production
2. Use in-memory storage for testing
3. Move to an append-log or database backend later without touching callers

The interface is intentionally small. There is no update or delete:
callers load the full dataset, change it in memory, and save it back.

Access modes differ only in their failure policy:

    Operation        Missing file     Malformed content      Empty dataset
    load_or_create   []               DeserializationFailed  []
    load_or_fail     FileUnreadable   DeserializationFailed  EmptyDataset
    save             creates file     n/a                    writes []
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from household_ledger.models.ledger import Item


class LedgerStorageInterface(ABC):
    """
    Abstract interface for ledger persistence.

    Any storage implementation must implement these methods.
    Single process, single writer: no locking is attempted.
    """

    @property
    def path(self) -> Optional[Path]:
        """Backing file, if the implementation has one."""
        return None

    @abstractmethod
    def load_or_create(self) -> list[Item]:
        """
        Load the full dataset, treating a missing store as empty.

        Returns:
            Items in file order (possibly empty)

        Raises:
            FileUnreadable: If the store exists but cannot be opened
            DeserializationFailed: If the content is not a valid item list
        """
        pass

    @abstractmethod
    def load_or_fail(self) -> list[Item]:
        """
        Load the full dataset, requiring at least one item.

        Returns:
            Items in file order (never empty)

        Raises:
            FileUnreadable: If the store is missing or cannot be opened
            DeserializationFailed: If the content is not a valid item list
            EmptyDataset: If the store holds no items
        """
        pass

    @abstractmethod
    def save(self, items: list[Item]) -> None:
        """
        Replace the stored dataset with a full snapshot of items.

        Raises:
            WriteFailed: If the snapshot could not be written
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)


class FileUnreadable(StorageError):
    """
    The backing file could not be opened.

    missing is True when the file simply does not exist yet, as opposed to
    a permission problem or a path that is not a regular file.
    """

    def __init__(self, message: str, path: Optional[Path] = None, missing: bool = False):
        self.missing = missing
        super().__init__(message, path)


class DeserializationFailed(StorageError):
    """The content is present but is not a valid list of items."""
    pass


class EmptyDataset(StorageError):
    """load_or_fail found no items."""
    pass


class WriteFailed(StorageError):
    """Creating, writing or replacing the backing file failed."""
    pass

"""
Storage Services Package

Provides the abstract ledger storage interface and its implementations.
The JSON snapshot file is the production backend; the in-memory store
follows the same contract for tests.
"""

from household_ledger.services.storage.interface import (
    DeserializationFailed,
    EmptyDataset,
    FileUnreadable,
    LedgerStorageInterface,
    StorageError,
    WriteFailed,
)
from household_ledger.services.storage.json_file import (
    JsonFileLedgerStorage,
    load_or_create,
    load_or_fail,
    save,
)
from household_ledger.services.storage.memory import InMemoryLedgerStorage

__all__ = [
    # Interface
    "LedgerStorageInterface",
    # Exceptions
    "DeserializationFailed",
    "EmptyDataset",
    "FileUnreadable",
    "StorageError",
    "WriteFailed",
    # Implementations
    "InMemoryLedgerStorage",
    "JsonFileLedgerStorage",
    # File operations
    "load_or_create",
    "load_or_fail",
    "save",
]

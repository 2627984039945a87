"""Services package."""

from household_ledger.services.storage import (
    DeserializationFailed,
    EmptyDataset,
    FileUnreadable,
    InMemoryLedgerStorage,
    JsonFileLedgerStorage,
    LedgerStorageInterface,
    StorageError,
    WriteFailed,
    load_or_create,
    load_or_fail,
    save,
)

__all__ = [
    # Storage services
    "DeserializationFailed",
    "EmptyDataset",
    "FileUnreadable",
    "InMemoryLedgerStorage",
    "JsonFileLedgerStorage",
    "LedgerStorageInterface",
    "StorageError",
    "WriteFailed",
    "load_or_create",
    "load_or_fail",
    "save",
]

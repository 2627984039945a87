"""
JSON Snapshot Storage Implementation

DESIGN DECISION: The ledger lives in a single human-readable JSON file
because:
1. Users can open and read their data directly
2. No database setup required
3. Diffs and backups work with ordinary tools

TRADEOFFS:
- Every save rewrites the full dataset, O(n) per append. An append-only
  log or a database would be the natural next backend.
- No locking; a second writer would lose updates. The ledger assumes one
  process owns the file for a whole load-mutate-save cycle.

Writes go to a temporary sibling file that then replaces the target, so a
reader sees either the previous snapshot or the new one.
"""

import os
import tempfile
from pathlib import Path
from typing import Union

import structlog
from pydantic import TypeAdapter, ValidationError

from household_ledger.models.ledger import Item
from household_ledger.services.storage.interface import (
    DeserializationFailed,
    EmptyDataset,
    FileUnreadable,
    LedgerStorageInterface,
    WriteFailed,
)


logger = structlog.get_logger(__name__)

_ITEM_LIST = TypeAdapter(list[Item])

DEFAULT_INDENT = 2


class JsonFileLedgerStorage(LedgerStorageInterface):
    """
    Ledger storage backed by one pretty-printed JSON file.

    The file holds a JSON array of item objects in append order.
    """

    def __init__(self, path: Union[str, Path], indent: int = DEFAULT_INDENT):
        self._path = Path(path)
        self._indent = indent

    @property
    def path(self) -> Path:
        return self._path

    def _read_items(self) -> list[Item]:
        """
        Open and decode the file.

        FileNotFoundError is left to the caller, since the two load modes
        treat a missing file differently.
        """
        try:
            with self._path.open("rb") as f:
                content = f.read()
        except FileNotFoundError:
            raise
        except OSError as e:
            raise FileUnreadable(
                f"Could not open ledger file {self._path}: {e}", self._path
            ) from e

        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DeserializationFailed(
                f"Ledger file {self._path} is not valid UTF-8: {e}", self._path
            ) from e

        try:
            return _ITEM_LIST.validate_json(text)
        except ValidationError as e:
            raise DeserializationFailed(
                f"Ledger file {self._path} is not a valid item list "
                f"({e.error_count()} error(s)): {e.errors()[0]['msg']}",
                self._path,
            ) from e

    def load_or_create(self) -> list[Item]:
        """Load all items; a missing file starts a new, empty ledger."""
        try:
            items = self._read_items()
        except FileNotFoundError:
            logger.info("ledger_created", path=str(self._path))
            return []

        logger.info("ledger_loaded", path=str(self._path), item_count=len(items))
        return items

    def load_or_fail(self) -> list[Item]:
        """Load all items; a missing file or an empty ledger is an error."""
        try:
            items = self._read_items()
        except FileNotFoundError as e:
            raise FileUnreadable(
                f"Ledger file not found: {self._path}", self._path, missing=True
            ) from e

        if not items:
            raise EmptyDataset(
                f"Ledger file {self._path} contains no items", self._path
            )

        logger.info("ledger_loaded", path=str(self._path), item_count=len(items))
        return items

    def save(self, items: list[Item]) -> None:
        """Write a full snapshot of items, replacing the file."""
        payload = _ITEM_LIST.dump_json(items, indent=self._indent) + b"\n"

        tmp_path = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "wb",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_path, self._path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise WriteFailed(
                f"Could not write ledger file {self._path}: {e}", self._path
            ) from e

        logger.info("ledger_saved", path=str(self._path), item_count=len(items))


def load_or_create(path: Union[str, Path]) -> list[Item]:
    """Load the ledger at path, or return an empty list if it does not exist."""
    return JsonFileLedgerStorage(path).load_or_create()


def load_or_fail(path: Union[str, Path]) -> list[Item]:
    """Load the ledger at path; missing, malformed or empty is an error."""
    return JsonFileLedgerStorage(path).load_or_fail()


def save(items: list[Item], path: Union[str, Path]) -> None:
    """Write items to path as a full snapshot."""
    JsonFileLedgerStorage(path).save(items)

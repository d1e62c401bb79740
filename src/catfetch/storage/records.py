"""Observable, append-only history of cat records backed by a file."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterator, Protocol

from ..errors import PersistenceError
from ..models import CatRecord

logger = logging.getLogger(__name__)

# (image_url, fact) pairs shown on first run
EXAMPLE_RECORDS: tuple[tuple[str, str], ...] = (
    (
        "https://cdn2.thecatapi.com/images/e9m.jpg",
        "Unlike humans, cats do not need to blink their eyes on a regular basis "
        "to keep their eyes lubricated.",
    ),
    (
        "https://cdn2.thecatapi.com/images/IFXsxmXLm.jpg",
        "A cat's smell is their strongest sense, and they rely on this leading "
        "sense to identify people and objects.",
    ),
    (
        "https://cdn2.thecatapi.com/images/adg.jpg",
        "The cat appears to be the only domestic companion animal not mentioned "
        "in the Bible.",
    ),
)

HistoryCallback = Callable[[tuple[CatRecord, ...]], None]


class Storage(Protocol):
    """Persistence capability used by RecordStore."""

    def write(self, path: str | Path, content: str) -> None: ...

    def read_all(self, path: str | Path) -> str: ...


class RecordStore:
    """Ordered history of records, observable and persisted one record at a time.

    Records are only ever appended. Each appended record is written to
    `path` after subscribers have seen it; a failed write raises
    PersistenceError but leaves the record in history.
    """

    def __init__(self, storage: Storage, path: str | Path) -> None:
        """Initialize the store.

        Args:
            storage: Persistence capability with write/read_all.
            path: File every appended record is written to.
        """
        self.storage = storage
        self.path = Path(path)
        self._records: list[CatRecord] = []
        self._subscribers: list[HistoryCallback] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CatRecord]:
        return iter(self.all())

    def __getitem__(self, index: int) -> CatRecord:
        return self._records[index]

    def all(self) -> tuple[CatRecord, ...]:
        """Snapshot of the history in insertion order."""
        return tuple(self._records)

    def subscribe(self, callback: HistoryCallback) -> Callable[[], None]:
        """Register a history callback. Returns a function that removes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.all()
        for callback in list(self._subscribers):
            callback(snapshot)

    def append(self, record: CatRecord) -> None:
        """Add a record to history, notify subscribers, then persist it.

        Raises:
            PersistenceError: If the storage write fails. The record stays
                in history.
        """
        self._records.append(record)
        self._notify()

        try:
            self.storage.write(self.path, record.to_json())
        except OSError as e:
            logger.warning("Failed to persist record to %s: %s", self.path, e)
            raise PersistenceError(
                f"Failed to save record to {self.path}: {e}", path=str(self.path)
            ) from e

    def seed_examples(self, owner_label: str) -> None:
        """Add the example records for first-run display. Nothing is written to storage."""
        now = datetime.now(timezone.utc)
        for image_url, fact in EXAMPLE_RECORDS:
            self._records.append(
                CatRecord(
                    image_url=image_url,
                    fact=fact,
                    owner_label=owner_label,
                    captured_at=now,
                )
            )
        self._notify()

    def load_persisted(self) -> list[CatRecord]:
        """Read back every record previously written to the file.

        Returns an empty list if the file does not exist. Lines that are not
        valid records are skipped. In-memory history is not touched.
        """
        try:
            content = self.storage.read_all(self.path)
        except FileNotFoundError:
            return []

        records: list[CatRecord] = []
        for line in content.splitlines():
            if not line.strip():
                continue
            try:
                records.append(CatRecord.from_dict(json.loads(line)))
            except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping invalid record line in %s: %s", self.path, e)
        return records

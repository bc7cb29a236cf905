"""In-memory store — the test double for StoragePort, also usable at runtime.

Records are frozen pydantic models, so they are shared without copying.
Every call holds a lock, so the duplicate-id check and the insert are atomic.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from inventoryctl.domain.entities import Record
from inventoryctl.infrastructure.storage.errors import DuplicateRecordError, RecordNotFoundError


class InMemoryStore[E: Record]:
    """Dict-backed store for one entity type."""

    def __init__(self, kind: str, records: Iterable[E] = ()) -> None:
        self._kind = kind
        self._lock = threading.Lock()
        self._records: dict[int, E] = {}
        for record in records:
            self._records[record.id] = record

    def get_all(self) -> list[E]:
        with self._lock:
            return [self._records[k] for k in sorted(self._records)]

    def get_by_id(self, record_id: int) -> E:
        with self._lock:
            record = self._records.get(record_id)
        if record is None:
            raise RecordNotFoundError(self._kind, record_id)
        return record

    def create(self, record: E) -> E:
        with self._lock:
            if record.id in self._records:
                msg = f"{self._kind} with ID {record.id} already exists"
                raise DuplicateRecordError(msg)
            self._records[record.id] = record
        return record

    def update(self, record_id: int, record: E) -> E:
        with self._lock:
            if record_id not in self._records:
                raise RecordNotFoundError(self._kind, record_id)
            stored = record.model_copy(update={"id": record_id})
            self._records[record_id] = stored
        return stored

    def delete(self, record_id: int) -> None:
        with self._lock:
            if self._records.pop(record_id, None) is None:
                raise RecordNotFoundError(self._kind, record_id)

    def last_id(self) -> int:
        with self._lock:
            return max(self._records, default=0)

    def clear(self) -> None:
        """Drop every record."""
        with self._lock:
            self._records.clear()

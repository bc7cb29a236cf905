"""StoragePort — the contract services use to reach persisted records.

One port instance manages the collection of a single entity type.
Failures are raised as :class:`~inventoryctl.infrastructure.storage.errors.StorageError`
subclasses; the port never returns sentinel values for missing records.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from inventoryctl.domain.entities import Record


@runtime_checkable
class StoragePort[E: Record](Protocol):
    """Read/write access to the records of one entity type."""

    def get_all(self) -> list[E]:
        """Return every stored record, ordered by id.

        Raises:
            StorageError: If the store cannot be read.
        """
        ...

    def get_by_id(self, record_id: int) -> E:
        """Return the record with *record_id*.

        Raises:
            RecordNotFoundError: If no such record exists.
        """
        ...

    def create(self, record: E) -> E:
        """Persist a new record and return its stored form.

        Raises:
            DuplicateRecordError: If the store's consistency check rejects it.
        """
        ...

    def update(self, record_id: int, record: E) -> E:
        """Replace the record with *record_id* and return its stored form.

        Raises:
            RecordNotFoundError: If no such record exists.
        """
        ...

    def delete(self, record_id: int) -> None:
        """Remove the record with *record_id* permanently.

        Raises:
            RecordNotFoundError: If no such record exists.
        """
        ...

    def last_id(self) -> int:
        """Return the highest stored id, or 0 when the collection is empty."""
        ...

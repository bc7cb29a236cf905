"""Exceptions raised by storage implementations.

Every exception carries a ``code`` matching the service error taxonomy so
the service layer can surface it without inspecting messages.
"""

from __future__ import annotations


class StorageError(Exception):
    """The store could not complete a read or write."""

    code = "STORAGE_FAILURE"


class RecordNotFoundError(StorageError):
    """No record with the requested id exists."""

    code = "NOT_FOUND"

    def __init__(self, kind: str, record_id: int) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"No {kind} found with ID: {record_id}")


class DuplicateRecordError(StorageError):
    """The store's own consistency check rejected a write."""

    code = "CONFLICT"

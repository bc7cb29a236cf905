"""Storage port contract and its in-memory and SQL implementations."""

from inventoryctl.infrastructure.storage.errors import (
    DuplicateRecordError,
    RecordNotFoundError,
    StorageError,
)
from inventoryctl.infrastructure.storage.memory import InMemoryStore
from inventoryctl.infrastructure.storage.ports import StoragePort
from inventoryctl.infrastructure.storage.sql import SqlStore

__all__ = [
    "DuplicateRecordError",
    "InMemoryStore",
    "RecordNotFoundError",
    "SqlStore",
    "StorageError",
    "StoragePort",
]

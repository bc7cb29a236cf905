"""BaseService — abstract foundation for inventory services.

Every service receives a single :class:`StoragePort` at construction time
and holds no other state. Storage exceptions are converted into failed
:class:`ServiceResult` objects here, at the service boundary.
"""

from __future__ import annotations

import logging
import threading
from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING, Any

from inventoryctl.services.result import ServiceResult

if TYPE_CHECKING:
    from inventoryctl.infrastructure.storage.errors import StorageError
    from inventoryctl.infrastructure.storage.ports import StoragePort

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class EntityService(BaseService):
            def create(self, request) -> ServiceResult:
                with self._write_guard():
                    records = self._store.get_all()
                    ...
    """

    def __init__(self, store: StoragePort[Any], *, serialize_writes: bool = False) -> None:
        self._store = store
        self._write_lock: threading.Lock | None = threading.Lock() if serialize_writes else None

    def _write_guard(self) -> AbstractContextManager[Any]:
        """Hold the write lock for a read-check-write sequence, if enabled."""
        if self._write_lock is None:
            return nullcontext()
        return self._write_lock

    @staticmethod
    def _storage_failure(op: str, exc: StorageError) -> ServiceResult:
        """Surface a storage exception unchanged (code and message)."""
        logger.debug("%s failed in storage: %s", op, exc)
        return ServiceResult.failure(op, exc.code, str(exc))
